"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (sink, publisher, repositório)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: níveis de log vindos de settings
"""

from dependency_injector import containers, providers
from typing import Optional
import logging

from src.adapters.events.publishers import InMemoryEventPublisher, LoggingEventPublisher
from src.adapters.persistence.repositories import InMemoryPayeeRepository
from src.adapters.persistence.unit_of_work import InMemoryUnitOfWork
from src.core.payees.use_cases import (
    CreatePayeeService,
    EditPayeeDetailsService,
    GetPayeeService,
    ListPayeesService,
)
from src.core.shared.sinks import InMemoryWarningSink, LoggingWarningSink

from . import settings


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Valores de settings
    - Infrastructure: Sink de avisos, publisher de eventos
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        container = get_container()
        service = container.create_payee_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(
        default={
            "event_log_level": logging.INFO,
            "tempered_value_log_level": logging.WARNING,
        }
    )

    # =========================================================================
    # Infrastructure
    # =========================================================================

    warning_sink = providers.Singleton(
        LoggingWarningSink,
        log_level=config.tempered_value_log_level,
    )

    event_publisher = providers.Singleton(
        LoggingEventPublisher,
        log_level=config.event_log_level,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    payee_repository = providers.Singleton(
        InMemoryPayeeRepository,
        warning_sink=warning_sink,
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        InMemoryUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    create_payee_service = providers.Factory(
        CreatePayeeService,
        payee_repo=payee_repository,
        uow=unit_of_work,
    )

    edit_payee_details_service = providers.Factory(
        EditPayeeDetailsService,
        payee_repo=payee_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    get_payee_service = providers.Factory(
        GetPayeeService,
        payee_repo=payee_repository,
    )

    list_payees_service = providers.Factory(
        ListPayeesService,
        payee_repo=payee_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), já configurada com
    os valores de settings.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(settings.as_container_config())

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def create_testing_container() -> Container:
    """
    Container para testes: avisos e eventos ficam em memória.

    Example:
        container = create_testing_container()
        container.create_payee_service().execute(input_dto)
        container.event_publisher().published_events
    """
    container = Container()
    container.warning_sink.override(providers.Singleton(InMemoryWarningSink))
    container.event_publisher.override(providers.Singleton(InMemoryEventPublisher))
    return container

"""
Configurações globais do Pytest para o Payee Registry.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest
from pathlib import Path

from src.adapters.events.publishers import InMemoryEventPublisher
from src.adapters.persistence.repositories import InMemoryPayeeRepository
from src.adapters.persistence.unit_of_work import InMemoryUnitOfWork
from src.config.container import reset_container
from src.core.shared.sinks import InMemoryWarningSink


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container limpo.
    """
    yield
    reset_container()


@pytest.fixture
def warning_sink():
    """Sink em memória para capturar avisos de restauração."""
    return InMemoryWarningSink()


@pytest.fixture
def event_publisher():
    """Publisher em memória."""
    return InMemoryEventPublisher()


@pytest.fixture
def payee_repo(warning_sink):
    """Repositório em memória ligado ao sink de testes."""
    return InMemoryPayeeRepository(warning_sink=warning_sink)


@pytest.fixture
def unit_of_work(event_publisher):
    """Unit of Work em memória ligado ao publisher de testes."""
    return InMemoryUnitOfWork(event_publisher=event_publisher)


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )

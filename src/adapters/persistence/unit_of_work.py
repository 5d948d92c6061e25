"""
Unit of Work - Implementação em memória.

Não há banco de dados neste projeto: a transação é simulada e o foco
é a garantia de que eventos só são publicados após commit.

Example:
    with InMemoryUnitOfWork(event_publisher=publisher) as uow:
        repo.save(entity)
        uow.publish_event(MyEvent(...))
    # Commit automático + eventos publicados

    with InMemoryUnitOfWork() as uow:
        uow.publish_event(MyEvent(...))
        raise ValidationError("Erro!")
    # Rollback automático, eventos descartados
"""

from typing import List, Optional
import logging

from src.core.shared.interfaces import UnitOfWork, EventPublisher
from src.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória.

    Pode ser reutilizado: cada ``with`` inicia uma nova transação.
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        """
        Args:
            event_publisher: Publicador de eventos (opcional)
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Confirma transação e publica eventos enfileirados.

        Falhas do publisher são logadas e não desfazem o commit.
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        self._committed = True
        logger.debug("Transaction committed")

        for event in self._events:
            self._published_events.append(event)

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}")

        self.clear_events()

    def rollback(self) -> None:
        """Descarta eventos enfileirados."""
        if self._committed or self._rolled_back:
            return

        self._rolled_back = True
        self.clear_events()
        logger.debug("Transaction rolled back")

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Eventos publicados em commits anteriores."""
        return list(self._published_events)

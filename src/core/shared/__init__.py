"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Base classes para Domain Events
- Sinks de avisos estruturados
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher
from .sinks import WarningSink, LoggingWarningSink, InMemoryWarningSink

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
    "WarningSink",
    "LoggingWarningSink",
    "InMemoryWarningSink",
]

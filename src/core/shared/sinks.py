"""
Warning Sinks - Destino dos avisos estruturados do domínio.

O caminho de restauração não pode falhar, mas precisa deixar rastro
quando encontra dados adulterados. Em vez de chamar o logging global
diretamente, o Core recebe um WarningSink injetado.

Implementações:
- LoggingWarningSink: Loga via logging (padrão)
- InMemoryWarningSink: Guarda os avisos (testes)
"""

from typing import List, Protocol, runtime_checkable
import json
import logging

from .events import DomainEvent

logger = logging.getLogger(__name__)


@runtime_checkable
class WarningSink(Protocol):
    """Interface de um método: registrar um aviso estruturado."""

    def record_warning(self, event: DomainEvent) -> None:
        ...


class LoggingWarningSink:
    """
    Sink que loga cada aviso.

    Formato:
        [WARNING] TemperedValueDetectedEvent | aggregate=<id> | data={...}
    """

    def __init__(self, log_level: int = logging.WARNING):
        self._log_level = log_level

    def record_warning(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[WARNING] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event._get_event_data(), default=str)}"
        )


class InMemoryWarningSink:
    """
    Sink em memória para testes.

    Example:
        sink = InMemoryWarningSink()
        PayeeEntity.restore(..., sink=sink)
        assert len(sink.warnings) == 1
    """

    def __init__(self):
        self._warnings: List[DomainEvent] = []

    def record_warning(self, event: DomainEvent) -> None:
        self._warnings.append(event)

    @property
    def warnings(self) -> List[DomainEvent]:
        return self._warnings.copy()

    def clear(self) -> None:
        self._warnings.clear()


_default_sink = LoggingWarningSink()


def get_default_warning_sink() -> WarningSink:
    """Sink usado quando nenhum é injetado."""
    return _default_sink

"""
Repositório de Favorecidos em memória.

Guarda PayeeRecord (não entidades), como um banco guardaria. Toda
leitura passa pelo PayeeMapper e, portanto, pela restauração tolerante.

Útil para:
- Testes unitários
- Prototipagem
- Desenvolvimento local

Não usar em produção!
"""

from typing import Dict, List, Optional
import logging

from src.core.payees.dtos import PayeeRecord
from src.core.payees.entities import PayeeEntity
from src.core.payees.status import PayeeStatus
from src.core.shared.sinks import WarningSink

from .mappers import PayeeMapper

logger = logging.getLogger(__name__)


class InMemoryPayeeRepository:
    """
    Implementação em memória do PayeeRepository.

    Example:
        repo = InMemoryPayeeRepository()
        repo.save(payee)
        found = repo.get_by_id(payee.id)
    """

    def __init__(self, warning_sink: Optional[WarningSink] = None):
        """
        Args:
            warning_sink: Destino dos avisos de dados adulterados na leitura
        """
        self._records: Dict[str, PayeeRecord] = {}
        self._warning_sink = warning_sink

    def save(self, payee: PayeeEntity) -> None:
        self._records[payee.id] = PayeeMapper.to_record(payee)
        logger.debug(f"Payee saved: {payee.id}")

    def get_by_id(self, payee_id: str) -> Optional[PayeeEntity]:
        record = self._records.get(payee_id)
        if record is None:
            return None
        return PayeeMapper.to_entity(record, self._warning_sink)

    def list_all(self) -> List[PayeeEntity]:
        return PayeeMapper.to_entity_list(
            list(self._records.values()), self._warning_sink
        )

    def list_by_status(self, status: PayeeStatus) -> List[PayeeEntity]:
        """Filtra pelo código persistido, sem reidratar os demais."""
        records = [r for r in self._records.values() if r.status == status.value]
        return PayeeMapper.to_entity_list(records, self._warning_sink)

    def exists(self, payee_id: str) -> bool:
        return payee_id in self._records

    def put_record(self, record: PayeeRecord) -> None:
        """
        Grava registro bruto, sem passar pela entidade.

        Simula dados inseridos ou alterados diretamente no banco.
        """
        self._records[record.id] = record

    def get_record(self, payee_id: str) -> Optional[PayeeRecord]:
        return self._records.get(payee_id)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._records.clear()

"""
Mapper para conversão entre PayeeEntity (Core) e PayeeRecord (persistência).

Responsabilidades:
- Converter PayeeEntity → PayeeRecord (para persistência)
- Converter PayeeRecord → PayeeEntity (para uso no Core)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Leitura sempre via PayeeEntity.restore(), nunca via create()
"""

from typing import List, Optional

from src.core.payees.dtos import PayeeRecord
from src.core.payees.entities import PayeeEntity
from src.core.shared.sinks import WarningSink


class PayeeMapper:
    """
    Mapper para conversão entre PayeeEntity e PayeeRecord.

    - to_record(): Entity → Record
    - to_entity(): Record → Entity
    - to_entity_list(): List[Record] → List[Entity]
    """

    @staticmethod
    def to_record(entity: PayeeEntity) -> PayeeRecord:
        """
        Converte PayeeEntity para PayeeRecord.

        Apenas valores brutos são gravados; formatos de exibição não.
        """
        return PayeeRecord(
            id=entity.id,
            name=entity.name,
            document=entity.document.value,
            status=entity.status.value,
            email=entity.email,
            pix_key_type=entity.pix_key.type,
            pix_key_value=entity.pix_key.value,
            bank_account=entity.bank_account,
        )

    @staticmethod
    def to_entity(
        record: PayeeRecord,
        sink: Optional[WarningSink] = None,
    ) -> PayeeEntity:
        """
        Converte PayeeRecord para PayeeEntity.

        Note:
            Bypassa as validações de criação: valores que não passam
            mais nas regras viram avisos no sink, nunca exceções.
        """
        return PayeeEntity.restore(
            id=record.id,
            name=record.name,
            document=record.document,
            status=record.status,
            email=record.email,
            pix_key_type=record.pix_key_type,
            pix_key_value=record.pix_key_value,
            bank_account=record.bank_account,
            sink=sink,
        )

    @staticmethod
    def to_entity_list(
        records: List[PayeeRecord],
        sink: Optional[WarningSink] = None,
    ) -> List[PayeeEntity]:
        return [PayeeMapper.to_entity(record, sink) for record in records]

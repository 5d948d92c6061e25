"""
Data Transfer Objects (DTOs) do Domínio de Favorecidos.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de modelos internos (entidades) para camadas externas.

Tipos de DTOs:
- Input DTOs: Dados de entrada brutos (de Forms/APIs)
- Output DTOs: Dados formatados para resposta (para Views/APIs)
- PayeeRecord: Conjunto de campos persistidos de um favorecido
"""

from dataclasses import dataclass
from typing import Any, Optional

from .entities import PayeeEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreatePayeeInputDTO:
    """
    DTO de entrada para cadastrar favorecido.

    Os valores chegam como digitados pelo usuário; a validação
    acontece na entidade.
    """

    name: str
    document: str
    pix_key_type: str
    pix_key: str
    email: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "document": self.document,
            "pix_key_type": self.pix_key_type,
            "pix_key": self.pix_key,
            "email": self.email,
        }


@dataclass(frozen=True)
class EditPayeeDetailsInputDTO:
    """
    DTO de entrada para editar favorecido.

    Attributes:
        payee_id: ID do favorecido
        name, document, pix_key_type, pix_key: Ignorados fora de DRAFT
        email: Novo email ("" limpa o campo)
    """

    payee_id: str
    name: str
    document: str
    pix_key_type: str
    pix_key: str
    email: str = ""

    def to_dict(self) -> dict:
        return {
            "payee_id": self.payee_id,
            "name": self.name,
            "document": self.document,
            "pix_key_type": self.pix_key_type,
            "pix_key": self.pix_key,
            "email": self.email,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class PayeeOutputDTO:
    """
    DTO de saída com dados completos do favorecido.

    Inclui valores brutos e formatados para exibição.
    """

    id: str
    name: str
    document: str
    document_formatted: str
    status: str
    status_display: str
    email: str
    pix_key_type: str
    pix_key: str
    pix_key_formatted: str
    bank_account_id: Optional[str] = None

    @classmethod
    def from_entity(cls, entity: PayeeEntity) -> "PayeeOutputDTO":
        """
        Factory method para criar DTO a partir de entidade.

        Args:
            entity: Entidade de domínio

        Returns:
            DTO com dados formatados
        """
        return cls(
            id=entity.id,
            name=entity.name,
            document=entity.document.value,
            document_formatted=str(entity.document),
            status=entity.status.value,
            status_display=entity.status.display,
            email=entity.email,
            pix_key_type=entity.pix_key.type,
            pix_key=entity.pix_key.value,
            pix_key_formatted=str(entity.pix_key),
            bank_account_id=entity.bank_account.id if entity.bank_account else None,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (útil para JSON)."""
        return {
            "id": self.id,
            "name": self.name,
            "document": self.document,
            "document_formatted": self.document_formatted,
            "status": self.status,
            "status_display": self.status_display,
            "email": self.email,
            "pix_key_type": self.pix_key_type,
            "pix_key": self.pix_key,
            "pix_key_formatted": self.pix_key_formatted,
            "bank_account_id": self.bank_account_id,
        }


# =============================================================================
# PERSISTÊNCIA
# =============================================================================

@dataclass(frozen=True)
class PayeeRecord:
    """
    Campos persistidos de um favorecido.

    Apenas valores brutos: formatos de exibição são derivados na
    leitura e nunca gravados.
    """

    id: str
    name: str
    document: str
    status: str
    email: str
    pix_key_type: str
    pix_key_value: str
    bank_account: Optional[Any] = None

"""
Domain Events do Domínio de Favorecidos.

Eventos:
- PayeeCreatedEvent: Novo favorecido foi cadastrado (rascunho)
- PayeeDetailsEditedEvent: Dados do favorecido foram editados
- TemperedValueDetectedEvent: Valor persistido inválido encontrado na leitura

Uso:
    Eventos de escrita são publicados através do UnitOfWork após commit.
    TemperedValueDetectedEvent é registrado no WarningSink pelo caminho
    de restauração e nunca interrompe a leitura.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.events import DomainEvent


PAYEE_AGGREGATE = "Payee"


@dataclass
class PayeeCreatedEvent(DomainEvent):
    """
    Evento: Favorecido foi cadastrado.

    Attributes:
        document: Documento (dígitos)
        pix_key_type: Tipo da chave PIX
        status: Código do status inicial
    """

    document: str = ""
    pix_key_type: str = ""
    status: str = ""

    @property
    def aggregate_type(self) -> str:
        return PAYEE_AGGREGATE


@dataclass
class PayeeDetailsEditedEvent(DomainEvent):
    """
    Evento: Dados do favorecido foram editados.

    Attributes:
        status: Status no momento da edição
        email_only: True quando só o email pôde ser alterado
    """

    status: str = ""
    email_only: bool = False

    @property
    def aggregate_type(self) -> str:
        return PAYEE_AGGREGATE


@dataclass
class TemperedValueDetectedEvent(DomainEvent):
    """
    Aviso: valor persistido não passa mais nas regras de validação.

    Registrado uma vez por campo adulterado durante a restauração.
    O valor bruto é mantido no agregado sem alterações.

    Attributes:
        field: Campo afetado ("document", "pix_key" ou "status")
        raw_value: Valor bruto persistido
        pix_key_type: Tipo bruto da chave (apenas para "pix_key")
        error_code: Código do erro de validação
        error: Mensagem do erro de validação
    """

    field: str = ""
    raw_value: str = ""
    pix_key_type: Optional[str] = None
    error_code: str = ""
    error: str = ""

    @property
    def aggregate_type(self) -> str:
        return PAYEE_AGGREGATE

    def _get_event_data(self) -> Dict[str, Any]:
        data = {
            "field": self.field,
            "raw_value": self.raw_value,
            "error_code": self.error_code,
            "error": self.error,
        }
        if self.pix_key_type is not None:
            data["pix_key_type"] = self.pix_key_type
        return data

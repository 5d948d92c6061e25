"""
Domínio de Favorecidos - Identificação e roteamento de pagamentos.

Este módulo contém toda a lógica de negócio relacionada ao cadastro
de favorecidos (pessoas ou empresas que recebem pagamentos):
- Value Objects (Email, Name, CPF, CNPJ, chaves PIX)
- Entidade (PayeeEntity, PayeeStatus)
- Restauração tolerante de dados persistidos
- Domain Events
- DTOs, Ports e Use Cases

Características do Domínio:
- Escrita sempre valida, leitura nunca quebra
- Favorecido nasce em rascunho; fora dele só o email é editável
"""

from .value_objects import Email, Name, only_digits
from .documents import Document, CPF, CNPJ, RestoredDocument, create_document
from .pix_keys import (
    PixKey,
    PixKeyType,
    CPFPixKey,
    CNPJPixKey,
    TelefonePixKey,
    EmailPixKey,
    ChaveAleatoriaPixKey,
    RestoredPixKey,
    create_pix_key,
)
from .status import PayeeStatus, RestoredPayeeStatus
from .entities import PayeeEntity, BankAccount
from .restoration import restore_document, restore_pix_key, restore_payee_status
from .events import (
    PayeeCreatedEvent,
    PayeeDetailsEditedEvent,
    TemperedValueDetectedEvent,
)
from .dtos import (
    CreatePayeeInputDTO,
    EditPayeeDetailsInputDTO,
    PayeeOutputDTO,
    PayeeRecord,
)
from .ports import PayeeRepository
from .use_cases import (
    CreatePayeeService,
    EditPayeeDetailsService,
    GetPayeeService,
    ListPayeesService,
)

__all__ = [
    # Value Objects
    "Email",
    "Name",
    "only_digits",
    "Document",
    "CPF",
    "CNPJ",
    "RestoredDocument",
    "create_document",
    "PixKey",
    "PixKeyType",
    "CPFPixKey",
    "CNPJPixKey",
    "TelefonePixKey",
    "EmailPixKey",
    "ChaveAleatoriaPixKey",
    "RestoredPixKey",
    "create_pix_key",
    # Entities
    "PayeeStatus",
    "RestoredPayeeStatus",
    "PayeeEntity",
    "BankAccount",
    # Restoration
    "restore_document",
    "restore_pix_key",
    "restore_payee_status",
    # Events
    "PayeeCreatedEvent",
    "PayeeDetailsEditedEvent",
    "TemperedValueDetectedEvent",
    # DTOs
    "CreatePayeeInputDTO",
    "EditPayeeDetailsInputDTO",
    "PayeeOutputDTO",
    "PayeeRecord",
    # Ports
    "PayeeRepository",
    # Use Cases
    "CreatePayeeService",
    "EditPayeeDetailsService",
    "GetPayeeService",
    "ListPayeesService",
]

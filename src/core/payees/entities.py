"""
Entidades do Domínio de Favorecidos.

Este módulo define o agregado principal do domínio: o favorecido
(pessoa ou empresa que pode receber pagamentos).

Entidades:
- PayeeEntity: Agregado principal do domínio
- BankAccount: Referência a conta bancária (mantida fora deste domínio)

Regras de Negócio Encapsuladas:
- Validação completa de nome, documento, chave PIX e email na criação
- Favorecido sempre nasce em rascunho (DRAFT)
- Em rascunho, todos os dados podem ser editados
- Fora do rascunho, apenas o email pode ser editado
- Restauração do banco nunca falha (valores adulterados viram avisos)
"""

from typing import Optional, Protocol, Union
import uuid

from src.core.shared.sinks import WarningSink

from .documents import Document, create_document
from .pix_keys import PixKey, create_pix_key
from .restoration import restore_document, restore_pix_key, restore_payee_status
from .status import PayeeStatus, RestoredPayeeStatus
from .value_objects import Email, Name


class BankAccount(Protocol):
    """Conta bancária do favorecido; apenas o ID é lido aqui."""

    @property
    def id(self) -> str:
        ...


def new_entity_id() -> str:
    """Gera identificador opaco e único (UUID4)."""
    return str(uuid.uuid4())


class PayeeEntity:
    """
    Entidade de Domínio: Favorecido.

    Invariantes:
    - Criado sempre com status DRAFT
    - Nome, documento e chave PIX validados em toda escrita
    - Email opcional (vazio limpa o campo)
    - Fora de DRAFT, nome, documento e chave PIX não mudam

    Os campos são expostos apenas para leitura; a única mutação é
    ``edit_details()``. Não é seguro chamar ``edit_details()`` em
    paralelo na mesma instância.

    Example:
        payee = PayeeEntity.create(
            name="Italo Feitosa",
            document="773.867.350-81",
            pix_key_type="TELEFONE",
            pix_key="99987654321",
            email="italo@feitosa.com",
        )

        payee.edit_details(...)
    """

    def __init__(
        self,
        id: str,
        name: Name,
        document: Document,
        status: Union[PayeeStatus, RestoredPayeeStatus],
        pix_key: PixKey,
        email: Optional[Email] = None,
        bank_account: Optional[BankAccount] = None,
    ):
        self._id = id
        self._name = name
        self._document = document
        self._status = status
        self._pix_key = pix_key
        self._email = email
        self._bank_account = bank_account

    @classmethod
    def create(
        cls,
        name: str,
        document: str,
        pix_key_type: str,
        pix_key: str,
        email: str = "",
    ) -> "PayeeEntity":
        """
        Factory method para criar favorecido com validações.

        Ordem de validação: nome, documento, chave PIX e email (apenas
        se informado). O primeiro erro interrompe a criação.

        Args:
            name: Nome ou razão social
            document: CPF ou CNPJ, com ou sem formatação
            pix_key_type: Tipo da chave PIX (ex: "CPF", "TELEFONE")
            pix_key: Valor da chave PIX
            email: Email de contato (opcional)

        Returns:
            Nova instância de PayeeEntity em DRAFT

        Raises:
            ValidationError: Primeiro erro de validação encontrado
        """
        valid_name = Name.create(name)
        valid_document = create_document(document)
        valid_pix_key = create_pix_key(pix_key_type, pix_key)
        valid_email = Email.create(email) if email else None

        return cls(
            id=new_entity_id(),
            name=valid_name,
            document=valid_document,
            status=PayeeStatus.DRAFT,
            pix_key=valid_pix_key,
            email=valid_email,
        )

    @classmethod
    def restore(
        cls,
        id: str,
        name: str,
        document: str,
        status: str,
        email: str,
        pix_key_type: str,
        pix_key_value: str,
        bank_account: Optional[BankAccount] = None,
        sink: Optional[WarningSink] = None,
    ) -> "PayeeEntity":
        """
        Reconstrói favorecido a partir de dados persistidos.

        Nunca lança exceção. Status, documento e chave PIX passam pelo
        caminho de restauração tolerante; id, nome e email são
        confiados como vieram do banco.

        Args:
            sink: Destino dos avisos de valores adulterados
                (default: LoggingWarningSink)

        Returns:
            PayeeEntity reconstruída
        """
        return cls(
            id=id,
            name=Name(name),
            document=restore_document(document, id, sink),
            status=restore_payee_status(status, id, sink),
            pix_key=restore_pix_key(pix_key_type, pix_key_value, id, sink),
            email=Email(email) if email else None,
            bank_account=bank_account,
        )

    def edit_details(
        self,
        name: str,
        document: str,
        pix_key_type: str,
        pix_key: str,
        email: str,
    ) -> None:
        """
        Atualiza dados do favorecido.

        Regras:
        - Email é sempre validado e aplicado primeiro (vazio limpa)
        - Fora de DRAFT, para após o email; demais dados são ignorados
        - Em DRAFT, aplica nome, documento e chave PIX nessa ordem
        - Campos aplicados antes de um erro permanecem aplicados

        Raises:
            ValidationError: Primeiro erro de validação encontrado
        """
        self._email = Email.create(email) if email else None

        if not self.is_draft:
            return

        self._name = Name.create(name)
        self._document = create_document(document)
        self._pix_key = create_pix_key(pix_key_type, pix_key)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def document(self) -> Document:
        return self._document

    @property
    def email(self) -> str:
        """Email do favorecido ("" quando não informado)."""
        return self._email.value if self._email else ""

    @property
    def status(self) -> Union[PayeeStatus, RestoredPayeeStatus]:
        return self._status

    @property
    def pix_key(self) -> PixKey:
        return self._pix_key

    @property
    def bank_account(self) -> Optional[BankAccount]:
        return self._bank_account

    @property
    def is_draft(self) -> bool:
        """Verifica se favorecido ainda está em rascunho."""
        return self._status is PayeeStatus.DRAFT

    def __repr__(self) -> str:
        """Representação string para debugging."""
        return (
            f"PayeeEntity("
            f"id={self._id[:8]}..., "
            f"name='{self.name[:20]}', "
            f"status={self._status.value}, "
            f"pix_key_type={self._pix_key.type}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, PayeeEntity):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash baseado em ID."""
        return hash(self._id)

"""
Chaves PIX do favorecido.

PixKey é a abstração comum para as cinco formas de chave aceitas pelo
arranjo de pagamentos instantâneos:

    CPF | CNPJ | TELEFONE | EMAIL | CHAVE_ALEATORIA

Contrato de leitura (compartilhado com RestoredPixKey):
- type: tag do tipo da chave (string persistida)
- value: valor canônico, sem formatação
- str(key): forma de exibição

A criação é sempre feita via ``create_pix_key(tipo, valor)``, que
despacha pela tag para o validador da variante.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .documents import CPF, CNPJ
from .exceptions import (
    InvalidPixKeyTypeError,
    InvalidTelefoneError,
    InvalidChaveAleatoriaError,
)
from .value_objects import Email, only_digits


class PixKeyType(str, Enum):
    """Tipos de chave PIX; o valor é a tag persistida."""

    CPF = "CPF"
    CNPJ = "CNPJ"
    TELEFONE = "TELEFONE"
    EMAIL = "EMAIL"
    CHAVE_ALEATORIA = "CHAVE_ALEATORIA"


TELEFONE_REGEX = re.compile(r"((?:\+?55)?)([1-9][0-9])(9[0-9]{8})")
CHAVE_ALEATORIA_REGEX = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

BRAZIL_COUNTRY_CODE = "55"


class PixKey(ABC):
    """Chave PIX (uma das cinco variantes ou uma chave restaurada)."""

    @property
    @abstractmethod
    def type(self) -> str:
        ...

    @property
    @abstractmethod
    def value(self) -> str:
        ...

    def __str__(self) -> str:
        return self.value


class _ValidatedPixKey(PixKey):
    """Variantes validadas: a tag é fixa por classe."""

    KEY_TYPE: ClassVar[PixKeyType]

    @property
    def type(self) -> str:
        return self.KEY_TYPE.value


@dataclass(frozen=True)
class CPFPixKey(_ValidatedPixKey):
    """Chave PIX do tipo CPF; exibida com a máscara do CPF."""

    document: CPF

    KEY_TYPE: ClassVar[PixKeyType] = PixKeyType.CPF

    @classmethod
    def create(cls, raw: str) -> "CPFPixKey":
        return cls(CPF.create(raw))

    @property
    def value(self) -> str:
        return self.document.value

    def __str__(self) -> str:
        return str(self.document)


@dataclass(frozen=True)
class CNPJPixKey(_ValidatedPixKey):
    """Chave PIX do tipo CNPJ; exibida com a máscara do CNPJ."""

    document: CNPJ

    KEY_TYPE: ClassVar[PixKeyType] = PixKeyType.CNPJ

    @classmethod
    def create(cls, raw: str) -> "CNPJPixKey":
        return cls(CNPJ.create(raw))

    @property
    def value(self) -> str:
        return self.document.value

    def __str__(self) -> str:
        return str(self.document)


@dataclass(frozen=True)
class TelefonePixKey(_ValidatedPixKey):
    """
    Chave PIX do tipo telefone celular.

    Formato aceito: ``[+55]DD9XXXXXXXX``. O valor é guardado sempre com
    o código do país (``55``) e exibido com ``+`` na frente.

    Example:
        key = TelefonePixKey.create("99987654321")
        key.value  # "5599987654321"
        str(key)   # "+5599987654321"
    """

    number: str

    KEY_TYPE: ClassVar[PixKeyType] = PixKeyType.TELEFONE

    @classmethod
    def create(cls, raw: str) -> "TelefonePixKey":
        """
        Raises:
            InvalidTelefoneError: Se fora do formato de celular brasileiro
        """
        if not TELEFONE_REGEX.fullmatch(raw):
            raise InvalidTelefoneError()

        number = only_digits(raw)

        # DDD + 9 dígitos, sem código do país
        if len(number) == 11:
            number = BRAZIL_COUNTRY_CODE + number

        return cls(number)

    @property
    def value(self) -> str:
        return self.number

    def __str__(self) -> str:
        return f"+{self.number}"


@dataclass(frozen=True)
class EmailPixKey(_ValidatedPixKey):
    """Chave PIX do tipo email."""

    email: Email

    KEY_TYPE: ClassVar[PixKeyType] = PixKeyType.EMAIL

    @classmethod
    def create(cls, raw: str) -> "EmailPixKey":
        return cls(Email.create(raw))

    @property
    def value(self) -> str:
        return self.email.value


@dataclass(frozen=True)
class ChaveAleatoriaPixKey(_ValidatedPixKey):
    """
    Chave PIX aleatória (formato UUID 8-4-4-4-12).

    A validação ignora maiúsculas/minúsculas; o valor é guardado em
    minúsculas.
    """

    key: str

    KEY_TYPE: ClassVar[PixKeyType] = PixKeyType.CHAVE_ALEATORIA

    @classmethod
    def create(cls, raw: str) -> "ChaveAleatoriaPixKey":
        """
        Raises:
            InvalidChaveAleatoriaError: Se fora do formato UUID
        """
        if not CHAVE_ALEATORIA_REGEX.fullmatch(raw):
            raise InvalidChaveAleatoriaError()

        return cls(raw.lower())

    @property
    def value(self) -> str:
        return self.key


@dataclass(frozen=True)
class RestoredPixKey(PixKey):
    """
    Chave PIX persistida que não passa mais na validação.

    Guarda tipo e valor brutos e os devolve sem alterações.
    Criada apenas pelo caminho de restauração.
    """

    raw_type: str
    raw_value: str

    @property
    def type(self) -> str:
        return self.raw_type

    @property
    def value(self) -> str:
        return self.raw_value


_PIX_KEY_FACTORIES = {
    PixKeyType.CPF: CPFPixKey,
    PixKeyType.CNPJ: CNPJPixKey,
    PixKeyType.TELEFONE: TelefonePixKey,
    PixKeyType.EMAIL: EmailPixKey,
    PixKeyType.CHAVE_ALEATORIA: ChaveAleatoriaPixKey,
}


def create_pix_key(key_type: Union[str, PixKeyType], raw: str) -> PixKey:
    """
    Cria chave PIX validada a partir da tag do tipo.

    Args:
        key_type: Tag do tipo (ex: "TELEFONE") ou PixKeyType
        raw: Valor informado da chave

    Returns:
        Variante de PixKey correspondente ao tipo

    Raises:
        InvalidPixKeyTypeError: Se a tag não é conhecida
        ValidationError: Erro próprio da variante (InvalidCPFError,
            InvalidCNPJError, InvalidTelefoneError, InvalidEmailError,
            InvalidChaveAleatoriaError)

    Example:
        key = create_pix_key("CHAVE_ALEATORIA", "9FCacF81-0F7f-47A2-881D-dA4F41A39AFD")
        key.value  # "9fcacf81-0f7f-47a2-881d-da4f41a39afd"
    """
    try:
        factory = _PIX_KEY_FACTORIES[PixKeyType(key_type)]
    except ValueError:
        raise InvalidPixKeyTypeError(str(key_type)) from None

    return factory.create(raw)

"""
Documentos fiscais do favorecido: CPF e CNPJ.

Document é a abstração comum; cada variante tem seu filtro de formato,
seu algoritmo de dígitos verificadores e sua máscara de exibição.

Contrato de leitura (compartilhado com RestoredDocument):
- value: dígitos sem formatação
- str(doc): valor formatado com a máscara da variante

Uso:
    doc = create_document("773.867.350-81")
    doc.value  # "77386735081"
    str(doc)   # "773.867.350-81"
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from .exceptions import InvalidDocumentError, InvalidCPFError, InvalidCNPJError
from .value_objects import only_digits


CPF_REGEX = re.compile(r"[0-9]{3}\.?[0-9]{3}\.?[0-9]{3}-?[0-9]{2}")
CNPJ_REGEX = re.compile(r"[0-9]{2}\.?[0-9]{3}\.?[0-9]{3}/?[0-9]{4}-?[0-9]{2}")

CNPJ_WEIGHTS = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def _check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Dígito verificador módulo 11; resultados 10 e 11 viram 0."""
    total = sum(digit * weight for digit, weight in zip(digits, weights))
    result = 11 - (total % 11)
    return 0 if result >= 10 else result


class Document(ABC):
    """
    Documento fiscal (CPF ou CNPJ).

    Subclasses são imutáveis e garantem suas invariantes apenas quando
    criadas via ``create()``.
    """

    @property
    @abstractmethod
    def value(self) -> str:
        """Dígitos do documento, sem formatação."""
        ...

    @abstractmethod
    def __str__(self) -> str:
        ...


@dataclass(frozen=True)
class CPF(Document):
    """
    Documento: Cadastro de Pessoa Física.

    Invariantes:
    - 11 dígitos
    - Dígitos não todos iguais
    - Dois dígitos verificadores válidos
    """

    digits: str

    LENGTH = 11

    @classmethod
    def create(cls, raw: str) -> "CPF":
        """
        Cria CPF validado.

        Aceita separadores opcionais (``ddd.ddd.ddd-dd``).

        Raises:
            InvalidCPFError: Se formato ou dígitos verificadores inválidos
        """
        if not CPF_REGEX.fullmatch(raw):
            raise InvalidCPFError()

        digits = only_digits(raw)

        if len(digits) != cls.LENGTH:
            raise InvalidCPFError()

        numbers = [int(char) for char in digits]

        # 000.000.000-00, 111.111.111-11... passam na conta mas são inválidos
        if len(set(numbers)) == 1:
            raise InvalidCPFError()

        if numbers[9] != _check_digit(numbers[:9], range(10, 1, -1)):
            raise InvalidCPFError()

        if numbers[10] != _check_digit(numbers[:10], range(11, 1, -1)):
            raise InvalidCPFError()

        return cls(digits)

    @property
    def value(self) -> str:
        return self.digits

    def __str__(self) -> str:
        d = self.digits
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


@dataclass(frozen=True)
class CNPJ(Document):
    """
    Documento: Cadastro Nacional da Pessoa Jurídica.

    Invariantes:
    - 14 dígitos
    - Dois dígitos verificadores válidos (pesos 5..2,9..2 e 6,5..2,9..2)
    """

    digits: str

    LENGTH = 14

    @classmethod
    def create(cls, raw: str) -> "CNPJ":
        """
        Cria CNPJ validado.

        Aceita separadores opcionais (``dd.ddd.ddd/dddd-dd``).

        Raises:
            InvalidCNPJError: Se formato ou dígitos verificadores inválidos
        """
        if not CNPJ_REGEX.fullmatch(raw):
            raise InvalidCNPJError()

        digits = only_digits(raw)

        if len(digits) != cls.LENGTH:
            raise InvalidCNPJError()

        numbers = [int(char) for char in digits]

        if numbers[12] != _check_digit(numbers[:12], CNPJ_WEIGHTS):
            raise InvalidCNPJError()

        if numbers[13] != _check_digit(numbers[:13], [6] + CNPJ_WEIGHTS):
            raise InvalidCNPJError()

        return cls(digits)

    @property
    def value(self) -> str:
        return self.digits

    def __str__(self) -> str:
        d = self.digits
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


@dataclass(frozen=True)
class RestoredDocument(Document):
    """
    Documento persistido que não passa mais na validação.

    Guarda o valor bruto e o devolve sem alterações em ``value`` e
    ``str()``. Criado apenas pelo caminho de restauração.
    """

    raw: str

    @property
    def value(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


def create_document(raw: str) -> Document:
    """
    Cria documento tentando CPF e depois CNPJ.

    Args:
        raw: Documento informado, com ou sem formatação

    Returns:
        CPF ou CNPJ validado (o primeiro que aceitar o valor)

    Raises:
        InvalidDocumentError: Se nenhuma variante aceitar o valor
    """
    for document_class in (CPF, CNPJ):
        try:
            return document_class.create(raw)
        except (InvalidCPFError, InvalidCNPJError):
            continue

    raise InvalidDocumentError(raw)

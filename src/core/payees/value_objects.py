"""
Value Objects básicos do Domínio de Favorecidos.

- only_digits: filtro de dígitos usado por todos os normalizadores
- Email: endereço de email validado
- Name: nome de pessoa ou razão social validado

Value objects são imutáveis (frozen) e comparados por valor.
O construtor direto não valida: é usado apenas na restauração de
dados já persistidos. Para dados novos use sempre ``create()``.
"""

import re
from dataclasses import dataclass

from .exceptions import (
    InvalidEmailError,
    NameEmptyError,
    NameLessThanTwoWordsError,
    FirstNameTooShortError,
)


def only_digits(text: str) -> str:
    """Retorna apenas os dígitos decimais de ``text``, na ordem original."""
    return "".join(char for char in text if char.isdecimal())


EMAIL_REGEX = re.compile(r"[a-z0-9+_.-]+@[a-z0-9.-]+")


@dataclass(frozen=True)
class Email:
    """
    Value Object: endereço de email.

    Invariante: valor sem espaços nas pontas e no formato
    ``local@dominio`` (apenas minúsculas, dígitos e ``+_.-``).
    """

    value: str

    @classmethod
    def create(cls, raw: str) -> "Email":
        """
        Cria email validado.

        Args:
            raw: Email informado pelo usuário

        Returns:
            Email com espaços das pontas removidos

        Raises:
            InvalidEmailError: Se formato inválido
        """
        trimmed = raw.strip()

        if not EMAIL_REGEX.fullmatch(trimmed):
            raise InvalidEmailError()

        return cls(trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name:
    """
    Value Object: nome de pessoa ou razão social.

    Invariantes:
    - Espaços internos colapsados em um único espaço
    - Pelo menos duas palavras
    - Primeira palavra com pelo menos 2 caracteres
    """

    value: str

    FIRST_NAME_MIN_LENGTH = 2

    @classmethod
    def create(cls, raw: str) -> "Name":
        """
        Cria nome validado e normalizado.

        Example:
            Name.create("The     Fake   Company  LTDA").value
            # "The Fake Company LTDA"

        Raises:
            NameEmptyError: Se vazio ou só espaços
            NameLessThanTwoWordsError: Se apenas uma palavra
            FirstNameTooShortError: Se primeira palavra curta demais
        """
        words = raw.split()

        if not words:
            raise NameEmptyError()

        if len(words) < 2:
            raise NameLessThanTwoWordsError()

        if len(words[0]) < cls.FIRST_NAME_MIN_LENGTH:
            raise FirstNameTooShortError()

        return cls(" ".join(words))

    def __str__(self) -> str:
        return self.value

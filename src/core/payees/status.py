"""
Status do ciclo de vida do favorecido.

Fluxo de Estados:
    DRAFT (Rascunho) → VALID (Validado)

A transição para VALID é feita por um processo externo a este domínio;
aqui o status VALID só chega pela restauração de registros persistidos.
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import TemperedValueError


class PayeeStatus(Enum):
    """
    Estados possíveis de um favorecido.

    O valor do enum é o código persistido; ``display`` é o rótulo
    apresentado ao usuário.
    """

    DRAFT = "DRAFT"
    VALID = "VALID"

    @property
    def display(self) -> str:
        """Rótulo de exibição do status."""
        display_map = {
            PayeeStatus.DRAFT: "Rascunho",
            PayeeStatus.VALID: "Validado",
        }
        return display_map[self]

    @classmethod
    def from_code(cls, code: str) -> "PayeeStatus":
        """
        Converte código persistido para enum (comparação exata).

        Raises:
            TemperedValueError: Se código desconhecido
        """
        try:
            return cls(code)
        except ValueError:
            raise TemperedValueError(
                f"Status desconhecido: {code}",
                field="status",
            ) from None


@dataclass(frozen=True)
class RestoredPayeeStatus:
    """
    Status persistido desconhecido, mantido como veio do banco.

    ``value`` e ``display`` devolvem o código bruto.
    """

    value: str

    @property
    def display(self) -> str:
        return self.value

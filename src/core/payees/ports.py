"""
Ports (Interfaces) do Domínio de Favorecidos.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência de favorecidos.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Contrato de leitura:
    Implementações devem reidratar entidades com ``PayeeEntity.restore()``
    (nunca com ``PayeeEntity.create()``), para que dados adulterados no
    banco não quebrem a leitura.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import PayeeEntity
from .status import PayeeStatus


@runtime_checkable
class PayeeRepository(Protocol):
    """
    Interface para persistência de Favorecidos.

    Implementações:
    - InMemoryPayeeRepository (para testes e desenvolvimento)
    """

    def save(self, payee: PayeeEntity) -> None:
        """
        Persiste favorecido (create ou update).

        Args:
            payee: Entidade a ser persistida
        """
        ...

    def get_by_id(self, payee_id: str) -> Optional[PayeeEntity]:
        """
        Busca favorecido por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def list_all(self) -> List[PayeeEntity]:
        ...

    def list_by_status(self, status: PayeeStatus) -> List[PayeeEntity]:
        ...

    def exists(self, payee_id: str) -> bool:
        ...

"""
Use Cases (Application Services) do Domínio de Favorecidos.

Este módulo contém os casos de uso da aplicação, que orquestram
a lógica de negócio coordenando entidades, repositórios e eventos.

Use Cases implementados:
- CreatePayeeService: Cadastra favorecido em rascunho
- EditPayeeDetailsService: Edita dados do favorecido
- GetPayeeService: Obtém favorecido específico
- ListPayeesService: Lista favorecidos com filtro opcional de status

Responsabilidades dos Use Cases:
- Coordenar entidades
- Gerenciar transações (via UoW)
- Disparar eventos de domínio
- Retornar DTOs de saída

Erros de validação da entidade são propagados sem alteração.
"""

from typing import List, Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, ValidationError

from .ports import PayeeRepository
from .entities import PayeeEntity
from .status import PayeeStatus
from .dtos import (
    CreatePayeeInputDTO,
    EditPayeeDetailsInputDTO,
    PayeeOutputDTO,
)
from .events import PayeeCreatedEvent, PayeeDetailsEditedEvent


def _get_or_raise(payee_repo: PayeeRepository, payee_id: str) -> PayeeEntity:
    payee = payee_repo.get_by_id(payee_id)

    if not payee:
        raise EntityNotFoundError(
            f"Favorecido {payee_id} não encontrado",
            entity_type="Payee",
            entity_id=payee_id,
        )

    return payee


class CreatePayeeService:
    """
    Use Case: Cadastrar um novo favorecido.

    Fluxo:
    1. Criar entidade (validações na entidade)
    2. Persistir via repositório
    3. Disparar evento PayeeCreated
    4. Retornar DTO de saída

    Example:
        service = CreatePayeeService(payee_repo, uow)
        output = service.execute(CreatePayeeInputDTO(
            name="Italo Feitosa",
            document="77386735081",
            pix_key_type="EMAIL",
            pix_key="italo@feitosa.com",
        ))
    """

    def __init__(self, payee_repo: PayeeRepository, uow: UnitOfWork):
        self.payee_repo = payee_repo
        self.uow = uow

    def execute(self, input_dto: CreatePayeeInputDTO) -> PayeeOutputDTO:
        """
        Executa cadastro em transação atômica.

        Raises:
            ValidationError: Primeiro dado inválido encontrado
        """
        with self.uow:
            payee = PayeeEntity.create(
                name=input_dto.name,
                document=input_dto.document,
                pix_key_type=input_dto.pix_key_type,
                pix_key=input_dto.pix_key,
                email=input_dto.email,
            )

            self.payee_repo.save(payee)

            self.uow.publish_event(
                PayeeCreatedEvent(
                    aggregate_id=payee.id,
                    document=payee.document.value,
                    pix_key_type=payee.pix_key.type,
                    status=payee.status.value,
                )
            )

        return PayeeOutputDTO.from_entity(payee)


class EditPayeeDetailsService:
    """
    Use Case: Editar dados de um favorecido.

    Fluxo:
    1. Buscar favorecido existente
    2. Aplicar edição (regras de status na entidade)
    3. Persistir alterações
    4. Disparar evento PayeeDetailsEdited

    Se a validação falhar, a transação é desfeita e nada é persistido,
    mesmo que a entidade em memória tenha aplicado parte dos campos.
    """

    def __init__(self, payee_repo: PayeeRepository, uow: UnitOfWork):
        self.payee_repo = payee_repo
        self.uow = uow

    def execute(self, input_dto: EditPayeeDetailsInputDTO) -> PayeeOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se favorecido não existe
            ValidationError: Primeiro dado inválido encontrado
        """
        with self.uow:
            payee = _get_or_raise(self.payee_repo, input_dto.payee_id)

            payee.edit_details(
                name=input_dto.name,
                document=input_dto.document,
                pix_key_type=input_dto.pix_key_type,
                pix_key=input_dto.pix_key,
                email=input_dto.email,
            )

            self.payee_repo.save(payee)

            self.uow.publish_event(
                PayeeDetailsEditedEvent(
                    aggregate_id=payee.id,
                    status=payee.status.value,
                    email_only=not payee.is_draft,
                )
            )

        return PayeeOutputDTO.from_entity(payee)


class GetPayeeService:
    """
    Use Case: Obter detalhes de um favorecido.

    Leitura não usa UoW. Valores adulterados no banco são devolvidos
    como estão (ver restauração).
    """

    def __init__(self, payee_repo: PayeeRepository):
        self.payee_repo = payee_repo

    def execute(self, payee_id: str) -> PayeeOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se favorecido não existe
        """
        return PayeeOutputDTO.from_entity(_get_or_raise(self.payee_repo, payee_id))


class ListPayeesService:
    """Use Case: Listar favorecidos."""

    def __init__(self, payee_repo: PayeeRepository):
        self.payee_repo = payee_repo

    def execute(self, status: Optional[str] = None) -> List[PayeeOutputDTO]:
        """
        Lista favorecidos, opcionalmente filtrando por código de status.

        Raises:
            ValidationError: Se status informado é desconhecido
        """
        if status:
            try:
                payee_status = PayeeStatus[status.upper()]
            except KeyError:
                raise ValidationError(f"Status inválido: {status}", field="status")
            payees = self.payee_repo.list_by_status(payee_status)
        else:
            payees = self.payee_repo.list_all()

        return [PayeeOutputDTO.from_entity(p) for p in payees]

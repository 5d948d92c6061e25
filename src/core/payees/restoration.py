"""
Restauração tolerante de dados persistidos.

Regra: escrita sempre valida, leitura nunca quebra.

Um registro gravado com dados válidos pode ter sido alterado fora da
aplicação (ou as regras podem ter mudado). Ao reidratar documento,
chave PIX e status:

1. Tenta o construtor normal, com validação
2. Em caso de sucesso, usa o valor validado
3. Em caso de falha, registra um TemperedValueDetectedEvent no sink
   e usa a variante "restaurada", que devolve o valor bruto sem alterações

Valores não textuais (ex: None vindo de coluna nula) seguem o mesmo
caminho de aviso + valor bruto.

Estas funções nunca devem ser usadas em caminhos de criação/edição.
"""

from typing import Callable, Optional, TypeVar, Union

from src.core.shared.exceptions import DomainException
from src.core.shared.sinks import WarningSink, get_default_warning_sink

from .documents import Document, RestoredDocument, create_document
from .status import PayeeStatus, RestoredPayeeStatus
from .events import TemperedValueDetectedEvent
from .exceptions import TemperedValueError
from .pix_keys import PixKey, RestoredPixKey, create_pix_key


T = TypeVar("T")

# Registros sem id ainda precisam gerar aviso
UNKNOWN_PAYEE_ID = "<unknown>"


def _restore(
    payee_id: str,
    field: str,
    raw_value: Optional[str],
    build: Callable[[], T],
    fallback: Callable[[], T],
    sink: Optional[WarningSink],
    pix_key_type: Optional[str] = None,
) -> T:
    try:
        if not isinstance(raw_value, str):
            raise TemperedValueError(
                f"Valor não textual: {raw_value!r}",
                field=field,
            )
        return build()
    except DomainException as e:
        (sink or get_default_warning_sink()).record_warning(
            TemperedValueDetectedEvent(
                aggregate_id=payee_id or UNKNOWN_PAYEE_ID,
                field=field,
                raw_value=raw_value,
                pix_key_type=pix_key_type,
                error_code=e.code,
                error=e.message,
            )
        )
        return fallback()


def restore_document(
    raw: str,
    payee_id: str,
    sink: Optional[WarningSink] = None,
) -> Document:
    """
    Restaura documento persistido.

    Returns:
        CPF/CNPJ validado, ou RestoredDocument com o valor bruto
    """
    return _restore(
        payee_id,
        "document",
        raw,
        build=lambda: create_document(raw),
        fallback=lambda: RestoredDocument(raw),
        sink=sink,
    )


def restore_pix_key(
    key_type: str,
    raw: str,
    payee_id: str,
    sink: Optional[WarningSink] = None,
) -> PixKey:
    """
    Restaura chave PIX persistida.

    Tipo desconhecido ou valor inválido para o tipo resultam em
    RestoredPixKey com tipo e valor brutos.
    """
    return _restore(
        payee_id,
        "pix_key",
        raw,
        build=lambda: create_pix_key(key_type, raw),
        fallback=lambda: RestoredPixKey(key_type, raw),
        sink=sink,
        pix_key_type=key_type,
    )


def restore_payee_status(
    code: str,
    payee_id: str,
    sink: Optional[WarningSink] = None,
) -> Union[PayeeStatus, RestoredPayeeStatus]:
    """
    Restaura status persistido.

    Apenas os códigos exatos "DRAFT" e "VALID" são reconhecidos;
    qualquer outro valor vira RestoredPayeeStatus (value == display).
    """
    return _restore(
        payee_id,
        "status",
        code,
        build=lambda: PayeeStatus.from_code(code),
        fallback=lambda: RestoredPayeeStatus(code),
        sink=sink,
    )

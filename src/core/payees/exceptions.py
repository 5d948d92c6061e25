"""
Exceções do Domínio de Favorecidos.

Cada tipo de falha de validação tem sua própria classe e um código
estável, para que a camada de API consiga traduzir o erro sem
depender da mensagem.

Hierarquia:
    ValidationError
    ├── InvalidDocumentError
    ├── InvalidCPFError
    ├── InvalidCNPJError
    ├── InvalidEmailError
    ├── InvalidNameError
    │   ├── NameEmptyError
    │   ├── NameLessThanTwoWordsError
    │   └── FirstNameTooShortError
    ├── InvalidPixKeyTypeError
    ├── InvalidTelefoneError
    └── InvalidChaveAleatoriaError
    DomainException
    └── TemperedValueError (apenas na restauração)
"""

from typing import Optional

from src.core.shared.exceptions import DomainException, ValidationError


class InvalidDocumentError(ValidationError):
    """Valor não corresponde a nenhum documento conhecido (CPF ou CNPJ)."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(
            f"Documento inválido: {raw}",
            field="document",
            code="INVALID_DOCUMENT",
        )


class InvalidCPFError(ValidationError):
    def __init__(self, message: str = "Número de CPF inválido"):
        super().__init__(message, code="INVALID_CPF")


class InvalidCNPJError(ValidationError):
    def __init__(self, message: str = "Número de CNPJ inválido"):
        super().__init__(message, code="INVALID_CNPJ")


class InvalidEmailError(ValidationError):
    def __init__(self, message: str = "Formato de email inválido"):
        super().__init__(message, field="email", code="INVALID_EMAIL")


class InvalidNameError(ValidationError):
    """Base para as falhas de validação de nome."""

    default_message = "Nome inválido"
    default_code = "INVALID_NAME"

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or self.default_message,
            field="name",
            code=self.default_code,
        )


class NameEmptyError(InvalidNameError):
    default_message = "Nome não pode ser vazio"
    default_code = "NAME_EMPTY"


class NameLessThanTwoWordsError(InvalidNameError):
    default_message = "Nome deve conter pelo menos duas palavras"
    default_code = "NAME_LESS_THAN_TWO_WORDS"


class FirstNameTooShortError(InvalidNameError):
    default_message = "Primeiro nome deve ter pelo menos dois caracteres"
    default_code = "FIRST_NAME_TOO_SHORT"


class InvalidPixKeyTypeError(ValidationError):
    def __init__(self, key_type: str):
        self.key_type = key_type
        super().__init__(
            f"Tipo de chave PIX inválido: {key_type}",
            field="pix_key_type",
            code="INVALID_PIX_KEY_TYPE",
        )


class InvalidTelefoneError(ValidationError):
    def __init__(self, message: str = "Telefone inválido"):
        super().__init__(message, field="pix_key", code="INVALID_TELEFONE")


class InvalidChaveAleatoriaError(ValidationError):
    def __init__(self, message: str = "Chave aleatória inválida"):
        super().__init__(message, field="pix_key", code="INVALID_CHAVE_ALEATORIA")


class TemperedValueError(DomainException):
    """
    Valor persistido não satisfaz mais as regras de validação.

    Usada somente no caminho de restauração: nunca chega ao chamador,
    é convertida em valor bruto + evento de aviso.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message, "TEMPERED_VALUE")

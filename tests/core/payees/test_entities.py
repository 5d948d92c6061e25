"""
Testes Unitários para a Entidade PayeeEntity.

Testa todas as regras de negócio encapsuladas na entidade,
incluindo validações, edição por status e restauração.

Coverage:
- PayeeEntity.create(): Validações de criação e ordem dos erros
- PayeeEntity.edit_details(): DRAFT edita tudo; fora de DRAFT só email
- PayeeEntity.restore(): Reidratação tolerante
- Identidade e propriedades
"""

import pytest

from src.core.payees.documents import CPF, CNPJ, RestoredDocument
from src.core.payees.entities import PayeeEntity
from src.core.payees.exceptions import (
    InvalidDocumentError,
    InvalidEmailError,
    InvalidPixKeyTypeError,
    InvalidTelefoneError,
    NameEmptyError,
    NameLessThanTwoWordsError,
)
from src.core.payees.pix_keys import (
    ChaveAleatoriaPixKey,
    EmailPixKey,
    RestoredPixKey,
    TelefonePixKey,
)
from src.core.payees.status import PayeeStatus, RestoredPayeeStatus
from src.core.shared.exceptions import ValidationError


VALID_CPF = "77386735081"
VALID_CNPJ = "19039318000104"


def create_payee(**overrides) -> PayeeEntity:
    data = {
        "name": "Italo Feitosa",
        "document": "773.867.350-81",
        "pix_key_type": "TELEFONE",
        "pix_key": "99987654321",
        "email": "italo@feitosa.com",
    }
    data.update(overrides)
    return PayeeEntity.create(**data)


def restore_payee(sink, **overrides) -> PayeeEntity:
    data = {
        "id": "payee-123",
        "name": "Italo Feitosa",
        "document": VALID_CPF,
        "status": "VALID",
        "email": "italo@feitosa.com",
        "pix_key_type": "EMAIL",
        "pix_key_value": "italo@feitosa.com",
    }
    data.update(overrides)
    return PayeeEntity.restore(sink=sink, **data)


class TestPayeeEntityCriacao:
    """Testes para criação de favorecidos."""

    def test_criar_favorecido_valido(self):
        """Deve criar favorecido com dados válidos."""
        payee = create_payee()

        assert payee.id is not None
        assert len(payee.id) == 36  # UUID
        assert payee.name == "Italo Feitosa"
        assert isinstance(payee.document, CPF)
        assert payee.document.value == VALID_CPF
        assert str(payee.document) == "773.867.350-81"
        assert isinstance(payee.pix_key, TelefonePixKey)
        assert payee.pix_key.value == "5599987654321"
        assert payee.email == "italo@feitosa.com"
        assert payee.status is PayeeStatus.DRAFT
        assert payee.is_draft is True
        assert payee.bank_account is None

    def test_criar_com_cnpj_e_nome_normalizado(self):
        payee = create_payee(
            name="The     Fake   Company  LTDA",
            document="19.039.318/0001-04",
        )

        assert payee.name == "The Fake Company LTDA"
        assert isinstance(payee.document, CNPJ)

    def test_criar_sem_email(self):
        """Email é opcional."""
        payee = create_payee(email="")

        assert payee.email == ""

    def test_criar_gera_ids_distintos(self):
        assert create_payee().id != create_payee().id

    def test_nome_validado_primeiro(self):
        """Com vários campos inválidos, o erro é o do nome."""
        with pytest.raises(NameEmptyError):
            create_payee(
                name="",
                document="invalido",
                pix_key_type="PASSAPORTE",
                email="invalido",
            )

    def test_documento_validado_antes_da_chave(self):
        with pytest.raises(InvalidDocumentError):
            create_payee(document="33860*422014", pix_key_type="PASSAPORTE")

    def test_chave_validada_antes_do_email(self):
        with pytest.raises(InvalidPixKeyTypeError):
            create_payee(pix_key_type="PASSAPORTE", email="invalido")

    def test_erro_da_variante_da_chave(self):
        with pytest.raises(InvalidTelefoneError):
            create_payee(pix_key="465454")

    def test_email_invalido(self):
        with pytest.raises(InvalidEmailError):
            create_payee(email="italofeitosacom")

    def test_erros_sao_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            create_payee(name="Italo")

        assert isinstance(exc_info.value, NameLessThanTwoWordsError)


class TestPayeeEntityEdicaoRascunho:
    """Edição de favorecido em DRAFT: todos os campos."""

    def test_editar_todos_os_campos(self):
        payee = create_payee()

        payee.edit_details(
            name="The Fake Company LTDA",
            document=VALID_CNPJ,
            pix_key_type="CHAVE_ALEATORIA",
            pix_key="9FCacF81-0F7f-47A2-881D-dA4F41A39AFD",
            email="contato@fake.com",
        )

        assert payee.name == "The Fake Company LTDA"
        assert isinstance(payee.document, CNPJ)
        assert isinstance(payee.pix_key, ChaveAleatoriaPixKey)
        assert payee.pix_key.value == "9fcacf81-0f7f-47a2-881d-da4f41a39afd"
        assert payee.email == "contato@fake.com"
        assert payee.status is PayeeStatus.DRAFT

    def test_email_vazio_limpa_campo(self):
        payee = create_payee()

        payee.edit_details(
            name="Italo Feitosa",
            document=VALID_CPF,
            pix_key_type="TELEFONE",
            pix_key="99987654321",
            email="",
        )

        assert payee.email == ""

    def test_erro_no_documento_mantem_campos_anteriores_aplicados(self):
        """Email e nome já aplicados ficam; documento e chave não mudam."""
        payee = create_payee()
        original_document = payee.document
        original_pix_key = payee.pix_key

        with pytest.raises(InvalidDocumentError):
            payee.edit_details(
                name="Novo Nome",
                document="33860*422014",
                pix_key_type="EMAIL",
                pix_key="novo@feitosa.com",
                email="novo@feitosa.com",
            )

        assert payee.email == "novo@feitosa.com"
        assert payee.name == "Novo Nome"
        assert payee.document == original_document
        assert payee.pix_key == original_pix_key

    def test_erro_no_email_nao_altera_nada(self):
        payee = create_payee()

        with pytest.raises(InvalidEmailError):
            payee.edit_details(
                name="Novo Nome",
                document=VALID_CNPJ,
                pix_key_type="EMAIL",
                pix_key="novo@feitosa.com",
                email="invalido",
            )

        assert payee.email == "italo@feitosa.com"
        assert payee.name == "Italo Feitosa"
        assert payee.document.value == VALID_CPF


class TestPayeeEntityEdicaoValidado:
    """Edição de favorecido fora de DRAFT: apenas email."""

    def test_somente_email_alterado(self, warning_sink):
        payee = restore_payee(warning_sink)

        payee.edit_details(
            name="Outro Nome",
            document=VALID_CNPJ,
            pix_key_type="TELEFONE",
            pix_key="99987654321",
            email="novo@feitosa.com",
        )

        assert payee.email == "novo@feitosa.com"
        assert payee.name == "Italo Feitosa"
        assert payee.document.value == VALID_CPF
        assert isinstance(payee.pix_key, EmailPixKey)
        assert payee.status is PayeeStatus.VALID

    def test_demais_campos_nem_sao_validados(self, warning_sink):
        """Campos inválidos são ignorados fora de DRAFT."""
        payee = restore_payee(warning_sink)

        payee.edit_details(
            name="",
            document="lixo",
            pix_key_type="PASSAPORTE",
            pix_key="lixo",
            email="",
        )

        assert payee.email == ""
        assert payee.name == "Italo Feitosa"

    def test_email_invalido_ainda_rejeitado(self, warning_sink):
        payee = restore_payee(warning_sink)

        with pytest.raises(InvalidEmailError):
            payee.edit_details(
                name="Italo Feitosa",
                document=VALID_CPF,
                pix_key_type="EMAIL",
                pix_key="italo@feitosa.com",
                email="invalido",
            )

        assert payee.email == "italo@feitosa.com"

    def test_status_desconhecido_tambem_so_edita_email(self, warning_sink):
        payee = restore_payee(warning_sink, status="ARCHIVED")

        payee.edit_details(
            name="Outro Nome",
            document=VALID_CNPJ,
            pix_key_type="EMAIL",
            pix_key="outro@feitosa.com",
            email="outro@feitosa.com",
        )

        assert payee.is_draft is False
        assert payee.name == "Italo Feitosa"
        assert payee.email == "outro@feitosa.com"


class TestPayeeEntityRestauracao:
    """Testes para PayeeEntity.restore()."""

    def test_restaurar_registro_valido(self, warning_sink):
        payee = restore_payee(warning_sink, pix_key_type="TELEFONE", pix_key_value="5599987654321")

        assert payee.id == "payee-123"
        assert payee.status is PayeeStatus.VALID
        assert isinstance(payee.document, CPF)
        assert isinstance(payee.pix_key, TelefonePixKey)
        assert str(payee.pix_key) == "+5599987654321"
        assert warning_sink.warnings == []

    def test_nome_e_email_confiados_como_vieram(self, warning_sink):
        """Nome e email não são revalidados na leitura."""
        payee = restore_payee(warning_sink, name="X", email="INVALIDO")

        assert payee.name == "X"
        assert payee.email == "INVALIDO"
        assert warning_sink.warnings == []

    def test_um_aviso_por_campo_adulterado(self, warning_sink):
        payee = restore_payee(
            warning_sink,
            document="33860*422014",
            status="ARCHIVED",
            pix_key_type="PASSAPORTE",
            pix_key_value="AB123",
        )

        assert isinstance(payee.document, RestoredDocument)
        assert isinstance(payee.status, RestoredPayeeStatus)
        assert isinstance(payee.pix_key, RestoredPixKey)
        assert payee.document.value == "33860*422014"
        assert payee.status.value == "ARCHIVED"
        assert payee.status.display == "ARCHIVED"
        assert payee.pix_key.type == "PASSAPORTE"
        assert payee.pix_key.value == "AB123"

        fields = sorted(w.field for w in warning_sink.warnings)
        assert fields == ["document", "pix_key", "status"]

    def test_restaurar_com_conta_bancaria(self, warning_sink):
        class Account:
            id = "account-1"

        account = Account()
        payee = restore_payee(warning_sink, bank_account=account)

        assert payee.bank_account is account


    def test_id_vazio_com_campos_adulterados(self, warning_sink):
        payee = restore_payee(
            warning_sink,
            id="",
            document="33860*422014",
            status="ARCHIVED",
        )

        assert payee.id == ""
        assert payee.document.value == "33860*422014"
        assert len(warning_sink.warnings) == 2

    def test_colunas_nulas(self, warning_sink):
        """None vindo do banco vira valor bruto, nunca exceção."""
        payee = restore_payee(warning_sink, document=None, pix_key_value=None)

        assert isinstance(payee.document, RestoredDocument)
        assert isinstance(payee.pix_key, RestoredPixKey)
        assert payee.pix_key.type == "EMAIL"
        assert sorted(w.field for w in warning_sink.warnings) == ["document", "pix_key"]


class TestPayeeEntityIdentidade:

    def test_igualdade_por_id(self, warning_sink):
        first = restore_payee(warning_sink)
        second = restore_payee(warning_sink, name="Outro Nome")

        assert first == second
        assert hash(first) == hash(second)

    def test_ids_diferentes(self):
        assert create_payee() != create_payee()

    def test_repr(self):
        payee = create_payee()

        assert "PayeeEntity(" in repr(payee)
        assert "status=DRAFT" in repr(payee)
        assert "pix_key_type=TELEFONE" in repr(payee)

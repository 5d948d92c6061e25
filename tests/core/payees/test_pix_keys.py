"""
Testes Unitários para Chaves PIX.

Coverage:
- create_pix_key(): despacho pela tag e tag desconhecida
- Cada variante: normalização, valor e exibição
- RestoredPixKey: valores brutos
"""

import pytest

from src.core.payees.pix_keys import (
    PixKey,
    PixKeyType,
    CPFPixKey,
    CNPJPixKey,
    TelefonePixKey,
    EmailPixKey,
    ChaveAleatoriaPixKey,
    RestoredPixKey,
    create_pix_key,
)
from src.core.payees.exceptions import (
    InvalidPixKeyTypeError,
    InvalidCPFError,
    InvalidCNPJError,
    InvalidEmailError,
    InvalidTelefoneError,
    InvalidChaveAleatoriaError,
)


class TestCreatePixKey:
    """Testes de despacho por tipo."""

    @pytest.mark.parametrize("key_type, raw, expected_class", [
        ("CPF", "77386735081", CPFPixKey),
        ("CNPJ", "19039318000104", CNPJPixKey),
        ("TELEFONE", "99987654321", TelefonePixKey),
        ("EMAIL", "italo@feitosa.com", EmailPixKey),
        ("CHAVE_ALEATORIA", "9fcacf81-0f7f-47a2-881d-da4f41a39afd", ChaveAleatoriaPixKey),
    ])
    def test_despacha_pela_tag(self, key_type, raw, expected_class):
        key = create_pix_key(key_type, raw)

        assert isinstance(key, expected_class)
        assert isinstance(key, PixKey)
        assert key.type == key_type

    def test_aceita_enum(self):
        key = create_pix_key(PixKeyType.EMAIL, "italo@feitosa.com")

        assert key.type == "EMAIL"

    @pytest.mark.parametrize("key_type", ["PASSAPORTE", "cpf", ""])
    def test_tipo_desconhecido(self, key_type):
        """Tag desconhecida (inclusive minúscula) é rejeitada."""
        with pytest.raises(InvalidPixKeyTypeError) as exc_info:
            create_pix_key(key_type, "77386735081")

        assert exc_info.value.code == "INVALID_PIX_KEY_TYPE"
        assert exc_info.value.key_type == key_type

    @pytest.mark.parametrize("key_type, raw, error", [
        ("CPF", "77386735082", InvalidCPFError),
        ("CNPJ", "65678974000175", InvalidCNPJError),
        ("TELEFONE", "465454", InvalidTelefoneError),
        ("EMAIL", "italofeitosacom", InvalidEmailError),
        ("CHAVE_ALEATORIA", "9fcacf810f7f47a2881dda4f41a39afd", InvalidChaveAleatoriaError),
    ])
    def test_erro_da_variante(self, key_type, raw, error):
        """O erro é o da variante, não um erro genérico."""
        with pytest.raises(error):
            create_pix_key(key_type, raw)


class TestDocumentPixKeys:

    def test_chave_cpf(self):
        key = create_pix_key("CPF", "773.867.350-81")

        assert key.value == "77386735081"
        assert str(key) == "773.867.350-81"

    def test_chave_cnpj(self):
        key = create_pix_key("CNPJ", "19039318000104")

        assert key.value == "19039318000104"
        assert str(key) == "19.039.318/0001-04"

    def test_chave_cpf_nao_aceita_cnpj(self):
        with pytest.raises(InvalidCPFError):
            create_pix_key("CPF", "19039318000104")


class TestTelefonePixKey:
    """Testes para chave do tipo telefone."""

    @pytest.mark.parametrize("raw", ["99987654321", "5599987654321", "+5599987654321"])
    def test_telefone_valido(self, raw):
        """Código do país é opcional na entrada e sempre presente no valor."""
        key = TelefonePixKey.create(raw)

        assert key.value == "5599987654321"
        assert str(key) == "+5599987654321"

    @pytest.mark.parametrize("raw", [
        "465454",
        "55999876543210",
        "09987654321",
        "99887654321",
        "(99) 98765-4321",
        "+1199987654321",
    ])
    def test_telefone_invalido(self, raw):
        with pytest.raises(InvalidTelefoneError) as exc_info:
            TelefonePixKey.create(raw)

        assert exc_info.value.code == "INVALID_TELEFONE"


class TestEmailPixKey:

    def test_email(self):
        key = EmailPixKey.create(" italo@feitosa.com ")

        assert key.value == "italo@feitosa.com"
        assert str(key) == "italo@feitosa.com"


class TestChaveAleatoriaPixKey:
    """Testes para chave aleatória."""

    def test_normaliza_para_minusculas(self):
        key = ChaveAleatoriaPixKey.create("9FCacF81-0F7f-47A2-881D-dA4F41A39AFD")

        assert key.value == "9fcacf81-0f7f-47a2-881d-da4f41a39afd"
        assert str(key) == "9fcacf81-0f7f-47a2-881d-da4f41a39afd"

    @pytest.mark.parametrize("raw", [
        "9fcacf810f7f47a2881dda4f41a39afd",
        "9fcacf810-f7f47a288-1dda4f41a-39afd",
        "gfcacf81-0f7f-47a2-881d-da4f41a39afd",
        "",
    ])
    def test_formato_invalido(self, raw):
        with pytest.raises(InvalidChaveAleatoriaError) as exc_info:
            ChaveAleatoriaPixKey.create(raw)

        assert exc_info.value.code == "INVALID_CHAVE_ALEATORIA"


class TestRestoredPixKey:

    def test_devolve_tipo_e_valor_brutos(self):
        key = RestoredPixKey("PASSAPORTE", "AB123")

        assert isinstance(key, PixKey)
        assert key.type == "PASSAPORTE"
        assert key.value == "AB123"
        assert str(key) == "AB123"

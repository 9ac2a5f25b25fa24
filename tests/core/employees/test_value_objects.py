"""
Testes Unitários para Value Objects do Domínio de Funcionários.

Coverage:
- Email
- Document (CPF/CNPJ)
- Money
- PersonName
- Address
"""

from decimal import Decimal

import pytest

from src.core.employees.value_objects import (
    Address,
    Document,
    DocumentType,
    Email,
    Money,
    PersonName,
)
from src.core.shared.exceptions import BusinessRuleViolationError


class TestEmail:
    """Testes para Email."""

    def test_criar_email_valido(self):
        """Deve criar email removendo espaços das pontas."""
        result = Email.create("  joao@empresa.com  ")

        assert result.is_success
        assert result.value.value == "joao@empresa.com"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_email_vazio_erro(self, value):
        result = Email.create(value)

        assert result.has_error("Email.Empty")
        assert result.error_messages == ["O email não pode ser vazio"]

    @pytest.mark.parametrize("value", ["joao", "joao@", "@empresa.com", "joao@empresa", "jo ao@empresa.com"])
    def test_email_formato_invalido(self, value):
        result = Email.create(value)

        assert result.has_error("Email.InvalidFormat")

    def test_igualdade_ignora_caixa(self):
        """Emails com caixa diferente são iguais e têm o mesmo hash."""
        a = Email.create("Joao@Empresa.com").value
        b = Email.create("joao@empresa.com").value

        assert a == b
        assert hash(a) == hash(b)
        assert a.value == "Joao@Empresa.com"


class TestDocument:
    """Testes para Document."""

    def test_cpf_com_pontuacao(self):
        """Deve aceitar CPF formatado e guardar apenas dígitos."""
        result = Document.create("529.982.247-25")

        assert result.is_success
        assert result.value.value == "52998224725"
        assert result.value.type == DocumentType.CPF

    def test_cnpj_com_pontuacao(self):
        result = Document.create("11.222.333/0001-81")

        assert result.value.value == "11222333000181"
        assert result.value.type == DocumentType.CNPJ

    def test_documento_vazio_erro(self):
        assert Document.create("  ").has_error("Document.Empty")

    @pytest.mark.parametrize("value", ["123", "1234567890", "123456789012", "123456789012345"])
    def test_quantidade_de_digitos_invalida(self, value):
        result = Document.create(value)

        assert result.has_error("Document.InvalidFormat")

    def test_documentos_iguais_por_valor(self):
        assert Document.create("529.982.247-25").value == Document.create("52998224725").value


class TestMoney:
    """Testes para Money."""

    def test_criar_com_moeda_padrao(self):
        money = Money.create("100.50").value

        assert money.amount == Decimal("100.50")
        assert money.currency == "BRL"

    def test_moeda_normalizada_para_maiusculas(self):
        assert Money.create(10, " usd ").value.currency == "USD"

    def test_zero_e_permitido(self):
        assert Money.create(0).is_success

    def test_valor_negativo_erro(self):
        assert Money.create("-0.01").has_error("Money.NegativeAmount")

    def test_valor_nulo_erro(self):
        assert Money.create(None).has_error("Money.Empty")

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
    def test_valor_nao_numerico_erro(self, value):
        assert Money.create(value).has_error("Money.InvalidAmount")

    def test_soma_mesma_moeda(self):
        total = Money.create("10.25").value + Money.create("5.75").value

        assert total == Money(Decimal("16.00"), "BRL")

    def test_subtracao_mesma_moeda(self):
        result = Money.create("10").value - Money.create("4").value

        assert result.amount == Decimal("6")

    def test_soma_moedas_diferentes_erro(self):
        with pytest.raises(BusinessRuleViolationError):
            Money.create(10, "BRL").value.add(Money.create(10, "USD").value)

    def test_subtracao_resultado_negativo_erro(self):
        with pytest.raises(BusinessRuleViolationError):
            Money.create(1).value.subtract(Money.create(2).value)

    def test_representacao_textual(self):
        assert str(Money.create("100.5", "USD").value) == "100.50 USD"


class TestPersonName:
    """Testes para PersonName."""

    def test_nome_completo(self):
        name = PersonName.create("  Maria ", " Silva ").value

        assert name.first_name == "Maria"
        assert name.last_name == "Silva"
        assert name.full_name == "Maria Silva"

    def test_nome_vazio_erro(self):
        assert PersonName.create("", "Silva").has_error("PersonName.FirstNameEmpty")

    def test_sobrenome_vazio_erro(self):
        assert PersonName.create("Maria", None).has_error("PersonName.LastNameEmpty")


class TestAddress:
    """Testes para Address."""

    def test_criar_endereco_valido(self, address_data):
        address = Address.create(**address_data).value

        assert address.city == "São Paulo"
        assert address.is_main is False

    def test_pais_padrao_e_complemento_opcional(self, address_data):
        address_data.update(country=None, complement="  ")

        address = Address.create(**address_data).value

        assert address.country == "Brasil"
        assert address.complement is None

    def test_reporta_todos_os_campos_obrigatorios(self):
        """Deve acumular um erro por campo obrigatório vazio."""
        result = Address.create(None, "", None, " ", None, None, None)

        assert result.is_failure
        assert [e.code for e in result.errors] == [
            "Address.StreetEmpty",
            "Address.NumberEmpty",
            "Address.NeighborhoodEmpty",
            "Address.CityEmpty",
            "Address.StateEmpty",
            "Address.ZipCodeEmpty",
        ]

    def test_marcacao_de_principal_nao_entra_na_igualdade(self, address_data):
        """Mesmos dados postais são o mesmo endereço, principal ou não."""
        address = Address.create(**address_data).value
        main = Address.create(**address_data, is_main=True).value

        assert main.is_main is True
        assert address.is_main is False
        assert main == address
        assert hash(main) == hash(address)
        assert main.with_main(False) == address

    def test_dados_postais_diferentes(self, address_data):
        address = Address.create(**address_data).value
        address_data["number"] = "1001"

        assert Address.create(**address_data).value != address

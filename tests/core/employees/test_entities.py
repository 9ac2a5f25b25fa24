"""
Testes Unitários para Entidades do Domínio de Funcionários.

Testa:
- Criação com validações (Employee.create)
- Atualização cadastral
- Regras de endereço principal
- Exclusão lógica
- Cálculo de idade
"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch
from decimal import Decimal

import pytest

from src.core.employees.entities import Employee
from src.core.employees.value_objects import Document, Email, Money, PersonName


@pytest.fixture
def valid_fields():
    return {
        "name": PersonName.create("Maria", "Silva").value,
        "email": Email.create("maria@empresa.com").value,
        "birth_date": date(1990, 5, 20),
        "document": Document.create("529.982.247-25").value,
        "position": "Analista",
        "salary": Money.create("5000.00").value,
    }


class TestEmployeeCriacao:
    """Testes para criação de funcionários."""

    def test_criar_funcionario_valido(self, valid_fields):
        """Deve criar funcionário ativo, sem endereços."""
        result = Employee.create(**valid_fields)

        assert result.is_success
        employee = result.value
        assert len(employee.id) == 36  # UUID
        assert employee.is_active is True
        assert employee.addresses == []
        assert employee.created_at == employee.updated_at
        assert employee.name.full_name == "Maria Silva"

    def test_cargo_sem_espacos_extras(self, valid_fields):
        valid_fields["position"] = "  Analista  "

        assert Employee.create(**valid_fields).value.position == "Analista"

    @pytest.mark.parametrize("field, code", [
        ("name", "Employee.NameRequired"),
        ("email", "Employee.EmailRequired"),
        ("document", "Employee.DocumentRequired"),
        ("position", "Employee.PositionRequired"),
        ("salary", "Employee.SalaryRequired"),
        ("birth_date", "Employee.BirthDateRequired"),
    ])
    def test_campo_obrigatorio_ausente(self, valid_fields, field, code):
        valid_fields[field] = None

        result = Employee.create(**valid_fields)

        assert result.is_failure
        assert result.has_error(code)

    def test_cargo_em_branco_erro(self, valid_fields):
        valid_fields["position"] = "   "

        assert Employee.create(**valid_fields).has_error("Employee.PositionRequired")

    def test_primeira_regra_violada_interrompe(self, valid_fields):
        """Apenas o primeiro erro é reportado."""
        valid_fields.update(name=None, email=None)

        result = Employee.create(**valid_fields)

        assert [e.code for e in result.errors] == ["Employee.NameRequired"]

    def test_nascimento_anterior_a_1900_erro(self, valid_fields):
        valid_fields["birth_date"] = date(1899, 12, 31)

        assert Employee.create(**valid_fields).has_error("Employee.BirthDateTooOld")

    def test_nascimento_no_futuro_erro(self, valid_fields, years_ago):
        valid_fields["birth_date"] = years_ago(0) + timedelta(days=1)

        assert Employee.create(**valid_fields).has_error("Employee.BirthDateInFuture")

    def test_menor_de_idade_erro(self, valid_fields, years_ago):
        valid_fields["birth_date"] = years_ago(18) + timedelta(days=1)

        result = Employee.create(**valid_fields)

        assert result.has_error("Employee.Underage")
        assert result.error_messages == ["O funcionário deve ter pelo menos 18 anos"]

    def test_exatamente_18_anos_permitido(self, valid_fields, years_ago):
        valid_fields["birth_date"] = years_ago(18)

        assert Employee.create(**valid_fields).is_success


class TestEmployeeIdade:
    """Testes para cálculo de idade."""

    def test_aniversario_ainda_nao_ocorreu(self):
        assert Employee.calculate_age(date(2000, 12, 31), today=date(2024, 6, 1)) == 23

    def test_aniversario_ja_ocorreu(self):
        assert Employee.calculate_age(date(2000, 1, 1), today=date(2024, 6, 1)) == 24

    def test_no_dia_do_aniversario(self):
        assert Employee.calculate_age(date(2000, 6, 1), today=date(2024, 6, 1)) == 24

    @pytest.mark.parametrize("now, expected", [
        (datetime(2024, 5, 19, 23, 30, tzinfo=timezone.utc), 17),
        (datetime(2024, 5, 20, 0, 30, tzinfo=timezone.utc), 18),
    ])
    def test_data_de_referencia_em_utc(self, now, expected):
        """O dia corrente é o do relógio UTC, não o local."""
        with patch("src.core.employees.entities._utcnow", return_value=now):
            assert Employee.calculate_age(date(2006, 5, 20)) == expected

    def test_nascimento_hoje_em_utc_nao_e_futuro(self, valid_fields):
        now = datetime(2024, 5, 20, 0, 30, tzinfo=timezone.utc)
        valid_fields["birth_date"] = date(2006, 5, 20)

        with patch("src.core.employees.entities._utcnow", return_value=now):
            assert Employee.create(**valid_fields).is_success


class TestEmployeeAtualizacao:
    """Testes para atualização cadastral."""

    def test_atualizar_dados(self, make_employee):
        employee = make_employee()
        previous_update = employee.updated_at

        result = employee.update(
            name=PersonName.create("Maria", "Souza").value,
            email=Email.create("maria.souza@empresa.com").value,
            birth_date=date(1991, 1, 1),
            position="Coordenadora",
            salary=Money.create("8000").value,
        )

        assert result.is_success
        assert employee.name.last_name == "Souza"
        assert employee.position == "Coordenadora"
        assert employee.salary.amount == Decimal("8000")
        assert employee.updated_at > previous_update

    def test_documento_nao_e_alterado(self, make_employee):
        employee = make_employee()
        document = employee.document

        employee.update(
            name=employee.name,
            email=employee.email,
            birth_date=employee.birth_date,
            position="Gerente",
            salary=employee.salary,
        )

        assert employee.document == document

    def test_falha_nao_altera_nenhum_campo(self, make_employee, years_ago):
        """Atualização inválida deixa a entidade intacta."""
        employee = make_employee()
        original_name = employee.name
        original_update = employee.updated_at

        result = employee.update(
            name=PersonName.create("Outra", "Pessoa").value,
            email=employee.email,
            birth_date=years_ago(0),
            position="Gerente",
            salary=employee.salary,
        )

        assert result.has_error("Employee.Underage")
        assert employee.name == original_name
        assert employee.position == "Analista de RH"
        assert employee.updated_at == original_update


class TestEmployeeEnderecos:
    """Testes para regras de endereço principal."""

    def test_primeiro_endereco_vira_principal(self, make_employee, make_address):
        employee = make_employee()

        result = employee.add_address(make_address())

        assert result.is_success
        assert result.value.is_main is True
        assert result.value.employee_id == employee.id
        assert employee.main_address is result.value

    def test_endereco_comum_nao_troca_principal(self, make_employee, make_address):
        employee = make_employee()
        first = employee.add_address(make_address()).value

        second = employee.add_address(make_address(street="Rua Augusta")).value

        assert first.is_main is True
        assert second.is_main is False
        assert employee.main_address is first

    def test_novo_principal_desmarca_anterior(self, make_employee, make_address):
        employee = make_employee()
        first = employee.add_address(make_address()).value

        second = employee.add_address(make_address(street="Rua Augusta", is_main=True)).value

        assert first.is_main is False
        assert second.is_main is True
        assert sum(1 for a in employee.addresses if a.is_main) == 1

    def test_endereco_nulo_erro(self, make_employee):
        employee = make_employee()

        assert employee.add_address(None).has_error("Employee.AddressRequired")

    def test_adicionar_endereco_atualiza_timestamp(self, make_employee, make_address):
        employee = make_employee()
        before = employee.updated_at

        employee.add_address(make_address())

        assert employee.updated_at > before

    def test_remover_principal_promove_proximo(self, make_employee, make_address):
        employee = make_employee()
        first = employee.add_address(make_address()).value
        second = employee.add_address(make_address(street="Rua Augusta")).value

        result = employee.remove_address(first.id)

        assert result.is_success
        assert employee.addresses == [second]
        assert second.is_main is True

    def test_remover_endereco_inexistente_erro(self, make_employee):
        employee = make_employee()

        assert employee.remove_address("nao-existe").has_error("Employee.AddressNotFound")


class TestEmployeeAtivacao:
    """Testes para exclusão lógica."""

    def test_desativar_e_reativar(self, make_employee):
        employee = make_employee()

        employee.deactivate()
        assert employee.is_active is False

        employee.activate()
        assert employee.is_active is True

    def test_timestamps_estritamente_crescentes(self, make_employee):
        employee = make_employee()
        stamps = []
        for _ in range(5):
            employee.deactivate()
            stamps.append(employee.updated_at)

        assert stamps == sorted(set(stamps))

    def test_igualdade_por_id(self, make_employee):
        employee = make_employee()
        other = make_employee(email="outra@empresa.com")

        assert employee != other
        assert employee == Employee(
            id=employee.id,
            name=other.name,
            email=other.email,
            birth_date=other.birth_date,
            document=other.document,
            position=other.position,
            salary=other.salary,
        )

"""
Configurações globais do Pytest para Employee Manager.

Este arquivo é carregado automaticamente pelo pytest e
fornece Django settings de teste e fixtures compartilhadas.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configura Django (SQLite em memória) antes da coleta dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='tests-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.employees',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='UTC',
            EVENT_PUBLISHER_MODE='sync',
            EMPLOYEES_DEFAULT_PAGE_SIZE=10,
            EMPLOYEES_MAX_PAGE_SIZE=100,
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_di_container():
    """Garante container DI limpo entre testes."""
    from src.config.container import reset_container

    yield
    reset_container()


# =============================================================================
# Dados de exemplo
# =============================================================================

def _years_ago(years: int, today: date = None) -> date:
    today = today or datetime.now(timezone.utc).date()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # 29/02 em ano não bissexto
        return today.replace(year=today.year - years, day=28)


@pytest.fixture
def years_ago():
    """Função que retorna a data de N anos atrás."""
    return _years_ago


@pytest.fixture
def employee_data():
    """Campos válidos para CreateEmployeeCommand."""
    return {
        'first_name': 'Maria',
        'last_name': 'Silva',
        'email': 'maria.silva@empresa.com.br',
        'birth_date': date(1990, 5, 20),
        'document': '529.982.247-25',
        'position': 'Analista de RH',
        'salary': Decimal('6500.00'),
        'currency': 'BRL',
    }


@pytest.fixture
def address_data():
    """Campos válidos de endereço (sem employee_id)."""
    return {
        'street': 'Avenida Paulista',
        'number': '1000',
        'complement': 'Sala 12',
        'neighborhood': 'Bela Vista',
        'city': 'São Paulo',
        'state': 'SP',
        'zip_code': '01310-100',
        'country': 'Brasil',
    }


@pytest.fixture
def make_employee(employee_data):
    """Factory de entidade Employee válida (campos sobrescrevíveis)."""
    from src.core.employees.entities import Employee
    from src.core.employees.value_objects import Document, Email, Money, PersonName

    def _make(**overrides):
        data = {**employee_data, **overrides}
        return Employee.create(
            name=PersonName.create(data['first_name'], data['last_name']).value,
            email=Email.create(data['email']).value,
            birth_date=data['birth_date'],
            document=Document.create(data['document']).value,
            position=data['position'],
            salary=Money.create(data['salary'], data['currency']).value,
        ).value

    return _make


@pytest.fixture
def make_address(address_data):
    """Factory de Value Object Address válido."""
    from src.core.employees.value_objects import Address

    def _make(**overrides):
        return Address.create(**{**address_data, **overrides}).value

    return _make


@pytest.fixture
def inmemory_employee_repo():
    """Repositório em memória para testes unitários."""
    from src.core.employees.ports import InMemoryEmployeeRepository
    return InMemoryEmployeeRepository()


@pytest.fixture
def inmemory_uow():
    """Unit of Work em memória para testes unitários."""
    from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()

"""
Fixtures para testes com Django.

Settings de teste ficam no conftest raiz; aqui ficam apenas
fixtures de banco e de container.
"""

import pytest


@pytest.fixture
def employee_repo(db):
    """Repositório Django (SQLite em memória)."""
    from src.adapters.django_app.employees.repositories import DjangoEmployeeRepository
    return DjangoEmployeeRepository()


@pytest.fixture
def event_publisher():
    from src.adapters.django_app.events.publishers import InMemoryEventPublisher
    return InMemoryEventPublisher()


@pytest.fixture
def container(event_publisher):
    """
    Container principal com publisher em memória.

    Instalado como container global para que as views o usem.
    """
    from dependency_injector import providers

    from src.config.container import Container, set_container

    container = Container()
    container.event_publisher.override(providers.Object(event_publisher))
    set_container(container)

    yield container

    container.event_publisher.reset_override()


@pytest.fixture
def persisted_employee(employee_repo, make_employee):
    """Funcionário gravado no banco."""
    employee = make_employee()
    employee_repo.add(employee)
    return employee

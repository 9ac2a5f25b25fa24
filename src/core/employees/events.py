"""
Domain Events do Domínio de Funcionários.

Eventos:
- EmployeeCreatedEvent: Funcionário cadastrado
- EmployeeUpdatedEvent: Dados cadastrais alterados
- EmployeeDeactivatedEvent: Funcionário desativado (exclusão lógica)
- EmployeeAddressAddedEvent: Endereço vinculado ao funcionário

Uso:
    with uow:
        employee_repo.add(employee)
        uow.publish_event(EmployeeCreatedEvent(aggregate_id=employee.id, ...))
"""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass(frozen=True)
class EmployeeEvent(DomainEvent):
    """Base dos eventos cujo agregado é o funcionário."""

    @property
    def aggregate_type(self) -> str:
        return "Employee"


@dataclass(frozen=True)
class EmployeeCreatedEvent(EmployeeEvent):
    """
    Evento: Funcionário foi cadastrado.

    Handlers típicos:
    - Provisionar acessos
    - Notificar RH
    """

    full_name: str = ""
    email: str = ""
    document_type: str = ""
    position: str = ""


@dataclass(frozen=True)
class EmployeeUpdatedEvent(EmployeeEvent):
    """Evento: Dados cadastrais do funcionário foram alterados."""

    full_name: str = ""
    email: str = ""
    position: str = ""


@dataclass(frozen=True)
class EmployeeDeactivatedEvent(EmployeeEvent):
    """Evento: Funcionário foi desativado (exclusão lógica)."""


@dataclass(frozen=True)
class EmployeeAddressAddedEvent(EmployeeEvent):
    """
    Evento: Endereço foi vinculado ao funcionário.

    Attributes:
        address_id: ID do EmployeeAddress criado
        is_main: Se o novo endereço passou a ser o principal
    """

    address_id: str = ""
    city: str = ""
    state: str = ""
    is_main: bool = False

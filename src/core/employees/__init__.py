"""
Domínio de Funcionários - Cadastro de Funcionários.

Este módulo contém toda a lógica de negócio relacionada ao cadastro
de funcionários, incluindo:
- Value Objects (Email, Document, Money, PersonName, Address)
- Entidades (Employee, EmployeeAddress)
- Handlers (Create, Update, Delete, AddAddress, GetById, GetList)
- Port de validação dos Commands (CommandValidator)
- Domain Events (EmployeeCreated, EmployeeUpdated, ...)
- DTOs (Commands, Queries, Responses)
- Ports (Interface do repositório)

Características do Domínio:
- Funcionário maior de idade, com documento CPF ou CNPJ
- Email e documento únicos
- Exclusão lógica
- Falhas esperadas propagadas via Result
"""

from .value_objects import Address, Document, DocumentType, Email, Money, PersonName
from .entities import Employee, EmployeeAddress
from .events import (
    EmployeeCreatedEvent,
    EmployeeUpdatedEvent,
    EmployeeDeactivatedEvent,
    EmployeeAddressAddedEvent,
)
from .dtos import (
    CreateEmployeeCommand,
    UpdateEmployeeCommand,
    DeleteEmployeeCommand,
    AddEmployeeAddressCommand,
    GetEmployeeByIdQuery,
    GetEmployeeListQuery,
    AddressResponse,
    EmployeeResponse,
    EmployeeListItemResponse,
    EmployeeListResponse,
)
from .ports import CommandValidator, EmployeeRepository, InMemoryEmployeeRepository
from .use_cases import (
    CreateEmployeeHandler,
    UpdateEmployeeHandler,
    DeleteEmployeeHandler,
    AddEmployeeAddressHandler,
    GetEmployeeByIdHandler,
    GetEmployeeListHandler,
)

__all__ = [
    # Value Objects
    "Address",
    "Document",
    "DocumentType",
    "Email",
    "Money",
    "PersonName",
    # Entities
    "Employee",
    "EmployeeAddress",
    # Events
    "EmployeeCreatedEvent",
    "EmployeeUpdatedEvent",
    "EmployeeDeactivatedEvent",
    "EmployeeAddressAddedEvent",
    # DTOs
    "CreateEmployeeCommand",
    "UpdateEmployeeCommand",
    "DeleteEmployeeCommand",
    "AddEmployeeAddressCommand",
    "GetEmployeeByIdQuery",
    "GetEmployeeListQuery",
    "AddressResponse",
    "EmployeeResponse",
    "EmployeeListItemResponse",
    "EmployeeListResponse",
    # Ports
    "EmployeeRepository",
    "InMemoryEmployeeRepository",
    "CommandValidator",
    # Handlers
    "CreateEmployeeHandler",
    "UpdateEmployeeHandler",
    "DeleteEmployeeHandler",
    "AddEmployeeAddressHandler",
    "GetEmployeeByIdHandler",
    "GetEmployeeListHandler",
]

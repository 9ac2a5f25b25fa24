"""
Data Transfer Objects (DTOs) do Domínio de Funcionários.

Tipos de DTOs:
- Commands: Intenção de alterar estado (criar, atualizar, excluir, endereço)
- Queries: Parâmetros de leitura (por ID, listagem paginada)
- Responses: Formato de saída para a API

Commands e Queries são imutáveis (frozen=True). Os valores chegam
"crus" da borda (strings, Decimal, date) e são validados pelo
CommandValidator antes de virarem Value Objects.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
import math

from .entities import Employee, EmployeeAddress


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def _money(value: Decimal) -> str:
    return f"{value:.2f}"


# =============================================================================
# COMMANDS (Escrita)
# =============================================================================

@dataclass(frozen=True)
class CreateEmployeeCommand:
    """
    Comando para cadastrar funcionário.

    Attributes:
        first_name: Nome
        last_name: Sobrenome
        email: Email (único)
        birth_date: Data de nascimento
        document: CPF ou CNPJ, com ou sem pontuação (único)
        position: Cargo
        salary: Salário (> 0)
        currency: Moeda ISO 4217 (default BRL)
    """

    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    birth_date: Optional[date]
    document: Optional[str]
    position: Optional[str]
    salary: Optional[Decimal]
    currency: str = "BRL"

    def to_dict(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "birth_date": _iso(self.birth_date),
            "document": self.document,
            "position": self.position,
            "salary": str(self.salary) if self.salary is not None else None,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class UpdateEmployeeCommand:
    """Comando para atualizar dados cadastrais (documento é imutável)."""

    id: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    birth_date: Optional[date]
    position: Optional[str]
    salary: Optional[Decimal]
    currency: str = "BRL"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "birth_date": _iso(self.birth_date),
            "position": self.position,
            "salary": str(self.salary) if self.salary is not None else None,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class DeleteEmployeeCommand:
    """Comando para exclusão lógica de funcionário."""

    id: str

    def to_dict(self) -> dict:
        return {"id": self.id}


@dataclass(frozen=True)
class AddEmployeeAddressCommand:
    """Comando para vincular endereço a um funcionário."""

    employee_id: Optional[str]
    street: Optional[str]
    number: Optional[str]
    complement: Optional[str]
    neighborhood: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip_code: Optional[str]
    country: Optional[str] = "Brasil"
    is_main: bool = False

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "street": self.street,
            "number": self.number,
            "complement": self.complement,
            "neighborhood": self.neighborhood,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
            "country": self.country,
            "is_main": self.is_main,
        }


# =============================================================================
# QUERIES (Leitura)
# =============================================================================

@dataclass(frozen=True)
class GetEmployeeByIdQuery:
    id: str


@dataclass(frozen=True)
class GetEmployeeListQuery:
    """
    Parâmetros de listagem paginada.

    Valores fora da faixa são normalizados pelo handler
    (página mínima 1, tamanho entre 1 e o máximo configurado).
    """

    page: int = 1
    page_size: int = 10


# =============================================================================
# RESPONSES (Saída)
# =============================================================================

@dataclass
class AddressResponse:
    id: str
    street: str
    number: str
    complement: Optional[str]
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: str
    is_main: bool

    @classmethod
    def from_entity(cls, employee_address: EmployeeAddress) -> "AddressResponse":
        address = employee_address.address
        return cls(
            id=employee_address.id,
            street=address.street,
            number=address.number,
            complement=address.complement,
            neighborhood=address.neighborhood,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
            is_main=address.is_main,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "street": self.street,
            "number": self.number,
            "complement": self.complement,
            "neighborhood": self.neighborhood,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
            "country": self.country,
            "is_main": self.is_main,
        }


@dataclass
class EmployeeResponse:
    """
    DTO de saída completo com dados do funcionário.

    Usado no detalhe (GET por ID) e na resposta de criação.
    """

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    birth_date: date
    document: str
    document_type: str
    position: str
    salary: Decimal
    currency: str
    created_at: datetime
    updated_at: datetime
    is_active: bool
    addresses: List[AddressResponse] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: Employee) -> "EmployeeResponse":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade Employee

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            first_name=entity.name.first_name,
            last_name=entity.name.last_name,
            full_name=entity.name.full_name,
            email=entity.email.value,
            birth_date=entity.birth_date,
            document=entity.document.value,
            document_type=entity.document.type.value,
            position=entity.position,
            salary=entity.salary.amount,
            currency=entity.salary.currency,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            is_active=entity.is_active,
            addresses=[AddressResponse.from_entity(a) for a in entity.addresses],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "email": self.email,
            "birth_date": _iso(self.birth_date),
            "document": self.document,
            "document_type": self.document_type,
            "position": self.position,
            "salary": _money(self.salary),
            "currency": self.currency,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
            "is_active": self.is_active,
            "addresses": [address.to_dict() for address in self.addresses],
        }


@dataclass
class EmployeeListItemResponse:
    """DTO enxuto para listagens."""

    id: str
    full_name: str
    email: str
    document: str
    position: str
    salary: Decimal
    currency: str
    is_active: bool

    @classmethod
    def from_entity(cls, entity: Employee) -> "EmployeeListItemResponse":
        return cls(
            id=entity.id,
            full_name=entity.name.full_name,
            email=entity.email.value,
            document=entity.document.value,
            position=entity.position,
            salary=entity.salary.amount,
            currency=entity.salary.currency,
            is_active=entity.is_active,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "document": self.document,
            "position": self.position,
            "salary": _money(self.salary),
            "currency": self.currency,
            "is_active": self.is_active,
        }


@dataclass
class EmployeeListResponse:
    """
    Página de funcionários.

    Attributes:
        employees: Itens da página atual
        total_count: Total de funcionários (sem paginação)
        page: Página atual (1-indexed)
        page_size: Itens por página
    """

    employees: List[EmployeeListItemResponse]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict:
        return {
            "employees": [item.to_dict() for item in self.employees],
            "total_count": self.total_count,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
        }

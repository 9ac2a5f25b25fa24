"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter Employee → EmployeeModel (para persistência)
- Converter EmployeeModel → Employee (para uso no Core)
- Converter EmployeeAddress ↔ EmployeeAddressModel

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from decimal import Decimal

from src.core.employees.entities import Employee, EmployeeAddress
from src.core.employees.value_objects import (
    Address,
    Document,
    DocumentType,
    Email,
    Money,
    PersonName,
)

from .models import EmployeeAddressModel, EmployeeModel


class EmployeeAddressMapper:
    """Mapper entre EmployeeAddress e EmployeeAddressModel."""

    @staticmethod
    def to_model(entity: EmployeeAddress) -> EmployeeAddressModel:
        address = entity.address
        return EmployeeAddressModel(
            id=entity.id,
            employee_id=entity.employee_id,
            street=address.street,
            number=address.number,
            complement=address.complement,
            neighborhood=address.neighborhood,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
            is_main=address.is_main,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_fields(entity: EmployeeAddress) -> dict:
        """Campos editáveis do endereço (usado em update_or_create)."""
        address = entity.address
        return {
            'employee_id': entity.employee_id,
            'street': address.street,
            'number': address.number,
            'complement': address.complement,
            'neighborhood': address.neighborhood,
            'city': address.city,
            'state': address.state,
            'zip_code': address.zip_code,
            'country': address.country,
            'is_main': address.is_main,
            'created_at': entity.created_at,
        }

    @staticmethod
    def to_entity(model: EmployeeAddressModel) -> EmployeeAddress:
        return EmployeeAddress(
            id=model.id,
            employee_id=model.employee_id,
            address=Address(
                street=model.street,
                number=model.number,
                complement=model.complement,
                neighborhood=model.neighborhood,
                city=model.city,
                state=model.state,
                zip_code=model.zip_code,
                country=model.country,
                is_main=model.is_main,
            ),
            created_at=model.created_at,
        )


class EmployeeMapper:
    """
    Mapper para conversão entre Employee e EmployeeModel.

    Responsável por:
    - to_model(): Entity → Model (sem endereços)
    - to_entity(): Model → Entity (com endereços)
    """

    @staticmethod
    def to_fields(entity: Employee) -> dict:
        """
        Converte a entidade nos campos do model (exceto id).

        Usado como `defaults` em update_or_create.
        """
        return {
            'first_name': entity.name.first_name,
            'last_name': entity.name.last_name,
            'email': entity.email.value,
            'birth_date': entity.birth_date,
            'document': entity.document.value,
            'document_type': entity.document.type.value,
            'position': entity.position,
            'salary': entity.salary.amount,
            'currency': entity.salary.currency,
            'is_active': entity.is_active,
            'created_at': entity.created_at,
            'updated_at': entity.updated_at,
        }

    @staticmethod
    def to_model(entity: Employee) -> EmployeeModel:
        """
        Converte Employee para EmployeeModel.

        Note:
            Não chama .save() nem converte endereços - isso fica
            para o Repository
        """
        return EmployeeModel(id=entity.id, **EmployeeMapper.to_fields(entity))

    @staticmethod
    def to_entity(model: EmployeeModel) -> Employee:
        """
        Converte EmployeeModel para Employee.

        Note:
            Bypassa as factories `create` pois os dados já foram
            validados na criação original
        """
        addresses = [
            EmployeeAddressMapper.to_entity(address)
            for address in model.addresses.all()
        ]

        return Employee(
            id=model.id,
            name=PersonName(model.first_name, model.last_name),
            email=Email(model.email),
            birth_date=model.birth_date,
            document=Document(model.document, DocumentType(model.document_type)),
            position=model.position,
            salary=Money(Decimal(model.salary), model.currency),
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
            addresses=addresses,
        )

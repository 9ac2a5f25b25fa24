"""
Handlers (Application Services) do Domínio de Funcionários.

Commands:
- CreateEmployeeHandler: Cadastra funcionário
- UpdateEmployeeHandler: Atualiza dados cadastrais
- DeleteEmployeeHandler: Exclusão lógica
- AddEmployeeAddressHandler: Vincula endereço

Queries:
- GetEmployeeByIdHandler: Detalhe de um funcionário
- GetEmployeeListHandler: Listagem paginada

Fluxo comum dos commands:
1. Validar o command (CommandValidator, com os valores normalizados)
2. Verificar regras que dependem de estado (duplicidade, existência)
3. Construir Value Objects e aplicar o comportamento da entidade
4. Persistir dentro do UnitOfWork e enfileirar o evento de domínio

Falhas esperadas retornam Result.fail; nada é escrito nesse caso.
"""

from typing import Optional
import logging

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.result import Error, Result

from .dtos import (
    AddEmployeeAddressCommand,
    CreateEmployeeCommand,
    DeleteEmployeeCommand,
    EmployeeListItemResponse,
    EmployeeListResponse,
    EmployeeResponse,
    GetEmployeeByIdQuery,
    GetEmployeeListQuery,
    UpdateEmployeeCommand,
)
from .entities import Employee
from .events import (
    EmployeeAddressAddedEvent,
    EmployeeCreatedEvent,
    EmployeeDeactivatedEvent,
    EmployeeUpdatedEvent,
)
from .ports import CommandValidator, EmployeeRepository
from .value_objects import Address, Document, Email, Money, PersonName

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = Error("Employee.NotFound", "Funcionário não encontrado")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _not_found(employee_id: Optional[str]) -> Result:
    logger.warning(f"Funcionário não encontrado: {employee_id}")
    return Result.fail(EMPLOYEE_NOT_FOUND)


def _build_profile(command) -> Result[tuple]:
    """Constrói os Value Objects comuns a criação e atualização."""
    name = PersonName.create(command.first_name, command.last_name)
    if name.is_failure:
        return Result.fail(name.errors)

    email = Email.create(command.email)
    if email.is_failure:
        return Result.fail(email.errors)

    salary = Money.create(command.salary, command.currency)
    if salary.is_failure:
        return Result.fail(salary.errors)

    return Result.ok((name.value, email.value, salary.value))


# =============================================================================
# Commands
# =============================================================================

class CreateEmployeeHandler:
    """
    Use Case: Cadastrar funcionário.

    Example:
        handler = CreateEmployeeHandler(employee_repo, uow, validator)
        result = handler.handle(CreateEmployeeCommand(...))
        if result.is_success:
            print(result.value.id)
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        uow: UnitOfWork,
        validator: CommandValidator,
    ):
        self.employee_repo = employee_repo
        self.uow = uow
        self.validator = validator

    def handle(self, command: CreateEmployeeCommand) -> Result[EmployeeResponse]:
        validation = self.validator.validate(command)
        if validation.is_failure:
            logger.warning(f"Cadastro de funcionário rejeitado: {len(validation.errors)} erro(s) de validação")
            return Result.fail(validation.errors)
        command = validation.value

        if self.employee_repo.email_exists(command.email):
            return Result.fail("EmailInUse", "O email informado já está em uso")

        if self.employee_repo.document_exists(command.document):
            return Result.fail("DocumentInUse", "O documento informado já está em uso")

        profile = _build_profile(command)
        if profile.is_failure:
            return Result.fail(profile.errors)
        name, email, salary = profile.value

        document = Document.create(command.document)
        if document.is_failure:
            return Result.fail(document.errors)

        created = Employee.create(
            name=name,
            email=email,
            birth_date=command.birth_date,
            document=document.value,
            position=command.position,
            salary=salary,
        )
        if created.is_failure:
            return Result.fail(created.errors)
        employee = created.value

        with self.uow:
            self.employee_repo.add(employee)
            self.uow.publish_event(
                EmployeeCreatedEvent(
                    aggregate_id=employee.id,
                    full_name=employee.name.full_name,
                    email=employee.email.value,
                    document_type=employee.document.type.value,
                    position=employee.position,
                )
            )

        logger.info(f"Funcionário cadastrado: {employee.id}")
        return Result.ok(EmployeeResponse.from_entity(employee))


class UpdateEmployeeHandler:
    """
    Use Case: Atualizar dados cadastrais.

    O documento não é alterável. O email pode ser trocado desde que
    não pertença a outro funcionário.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        uow: UnitOfWork,
        validator: CommandValidator,
    ):
        self.employee_repo = employee_repo
        self.uow = uow
        self.validator = validator

    def handle(self, command: UpdateEmployeeCommand) -> Result[None]:
        validation = self.validator.validate(command)
        if validation.is_failure:
            logger.warning(f"Atualização do funcionário {command.id} rejeitada na validação")
            return Result.fail(validation.errors)
        command = validation.value

        employee = self.employee_repo.get_by_id(command.id)
        if employee is None:
            return _not_found(command.id)

        if self.employee_repo.email_exists(command.email, exclude_id=employee.id):
            return Result.fail(
                "EmailInUse",
                "O email informado já está em uso por outro funcionário",
            )

        profile = _build_profile(command)
        if profile.is_failure:
            return Result.fail(profile.errors)
        name, email, salary = profile.value

        updated = employee.update(
            name=name,
            email=email,
            birth_date=command.birth_date,
            position=command.position,
            salary=salary,
        )
        if updated.is_failure:
            return updated

        with self.uow:
            self.employee_repo.update(employee)
            self.uow.publish_event(
                EmployeeUpdatedEvent(
                    aggregate_id=employee.id,
                    full_name=employee.name.full_name,
                    email=employee.email.value,
                    position=employee.position,
                )
            )

        logger.info(f"Funcionário atualizado: {employee.id}")
        return Result.ok()


class DeleteEmployeeHandler:
    """Use Case: Exclusão lógica (desativação) de funcionário."""

    def __init__(self, employee_repo: EmployeeRepository, uow: UnitOfWork):
        self.employee_repo = employee_repo
        self.uow = uow

    def handle(self, command: DeleteEmployeeCommand) -> Result[None]:
        if not command.id or not self.employee_repo.exists(command.id):
            return _not_found(command.id)

        with self.uow:
            self.employee_repo.delete(command.id)
            self.uow.publish_event(EmployeeDeactivatedEvent(aggregate_id=command.id))

        logger.info(f"Funcionário desativado: {command.id}")
        return Result.ok()


class AddEmployeeAddressHandler:
    """
    Use Case: Vincular endereço a funcionário.

    O primeiro endereço vira principal; um endereço enviado com
    is_main=True substitui o principal atual.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        uow: UnitOfWork,
        validator: CommandValidator,
    ):
        self.employee_repo = employee_repo
        self.uow = uow
        self.validator = validator

    def handle(self, command: AddEmployeeAddressCommand) -> Result[None]:
        validation = self.validator.validate(command)
        if validation.is_failure:
            logger.warning(f"Endereço rejeitado para funcionário {command.employee_id}")
            return Result.fail(validation.errors)
        command = validation.value

        employee = self.employee_repo.get_by_id(command.employee_id)
        if employee is None:
            return _not_found(command.employee_id)

        address = Address.create(
            street=command.street,
            number=command.number,
            complement=command.complement,
            neighborhood=command.neighborhood,
            city=command.city,
            state=command.state,
            zip_code=command.zip_code,
            country=command.country,
            is_main=command.is_main,
        )
        if address.is_failure:
            return Result.fail(address.errors)

        added = employee.add_address(address.value)
        if added.is_failure:
            return Result.fail(added.errors)
        employee_address = added.value

        with self.uow:
            self.employee_repo.update(employee)
            self.uow.publish_event(
                EmployeeAddressAddedEvent(
                    aggregate_id=employee.id,
                    address_id=employee_address.id,
                    city=employee_address.address.city,
                    state=employee_address.address.state,
                    is_main=employee_address.is_main,
                )
            )

        logger.info(f"Endereço {employee_address.id} vinculado ao funcionário {employee.id}")
        return Result.ok()


# =============================================================================
# Queries (sem UoW - leitura)
# =============================================================================

class GetEmployeeByIdHandler:
    """Use Case: Obter funcionário por ID."""

    def __init__(self, employee_repo: EmployeeRepository):
        self.employee_repo = employee_repo

    def handle(self, query: GetEmployeeByIdQuery) -> Result[EmployeeResponse]:
        employee = self.employee_repo.get_by_id(query.id) if query.id else None
        if employee is None:
            return _not_found(query.id)
        return Result.ok(EmployeeResponse.from_entity(employee))


class GetEmployeeListHandler:
    """
    Use Case: Listar funcionários com paginação.

    Normalização:
    - page < 1 → 1
    - page_size < 1 → default_page_size
    - page_size > max_page_size → max_page_size
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self.employee_repo = employee_repo
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def handle(self, query: GetEmployeeListQuery) -> Result[EmployeeListResponse]:
        page = query.page if query.page and query.page > 0 else 1
        page_size = query.page_size if query.page_size and query.page_size > 0 else self.default_page_size
        page_size = min(page_size, self.max_page_size)

        employees = self.employee_repo.get_all(page, page_size)
        total_count = self.employee_repo.get_total_count()

        logger.debug(f"Listagem de funcionários: página {page}, {len(employees)} de {total_count}")

        return Result.ok(EmployeeListResponse(
            employees=[EmployeeListItemResponse.from_entity(e) for e in employees],
            total_count=total_count,
            page=page,
            page_size=page_size,
        ))

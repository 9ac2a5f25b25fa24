"""
Repositórios Django para persistência de Funcionários.

Implementam a interface (Port) definida no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar EmployeeRepository protocol
- Mapear entities para models e vice-versa
- Manter os endereços sincronizados com o agregado
"""

from typing import List, Optional
import logging

from django.db import transaction

from src.core.employees.entities import Employee
from src.core.employees.value_objects import Document

from ..shared.repository import BaseRepository, PaginationParams
from .mappers import EmployeeAddressMapper, EmployeeMapper
from .models import EmployeeAddressModel, EmployeeModel

logger = logging.getLogger(__name__)


class DjangoEmployeeRepository(BaseRepository[Employee, EmployeeModel]):
    """
    Implementação Django do EmployeeRepository.

    O agregado é persistido inteiro: a linha do funcionário e todas
    as linhas de endereço.

    Example:
        repo = DjangoEmployeeRepository()
        repo.add(employee)
        employee = repo.get_by_id("uuid-here")
    """

    model_class = EmployeeModel
    prefetch_related_fields = ["addresses"]
    default_order_field = "-updated_at"

    def to_entity(self, model: EmployeeModel) -> Employee:
        return EmployeeMapper.to_entity(model)

    def get_all(self, page: int, page_size: int) -> List[Employee]:
        return self.list_page(PaginationParams(page=page, per_page=page_size))

    def get_total_count(self) -> int:
        return self.count()

    @transaction.atomic
    def add(self, employee: Employee) -> None:
        logger.debug(f"Adding employee: {employee.id}")

        EmployeeMapper.to_model(employee).save(force_insert=True)
        if employee.addresses:
            EmployeeAddressModel.objects.bulk_create(
                [EmployeeAddressMapper.to_model(a) for a in employee.addresses]
            )

    @transaction.atomic
    def update(self, employee: Employee) -> None:
        """
        Atualiza o funcionário e sincroniza os endereços.

        Endereços ausentes na entidade são removidos; os demais
        são inseridos ou atualizados.
        """
        logger.debug(f"Updating employee: {employee.id}")

        EmployeeModel.objects.update_or_create(
            id=employee.id,
            defaults=EmployeeMapper.to_fields(employee),
        )

        current_ids = [a.id for a in employee.addresses]
        removed, _ = (
            EmployeeAddressModel.objects
            .filter(employee_id=employee.id)
            .exclude(id__in=current_ids)
            .delete()
        )
        if removed:
            logger.debug(f"Removed {removed} address(es) of employee {employee.id}")

        for address in employee.addresses:
            EmployeeAddressModel.objects.update_or_create(
                id=address.id,
                defaults=EmployeeAddressMapper.to_fields(address),
            )

    def delete(self, employee_id: str) -> None:
        """
        Exclusão lógica: desativa o funcionário.

        Note:
            Não lança erro se funcionário não existir
        """
        employee = self.get_by_id(employee_id)
        if employee is None:
            logger.debug(f"Employee not found for deletion: {employee_id}")
            return

        employee.deactivate()
        updated = EmployeeModel.objects.filter(id=employee_id).update(
            is_active=False,
            updated_at=employee.updated_at,
        )
        if updated:
            logger.debug(f"Employee deactivated: {employee_id}")

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        qs = EmployeeModel.objects.filter(email__iexact=(email or "").strip())
        if exclude_id:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

    def document_exists(self, document: str, exclude_id: Optional[str] = None) -> bool:
        qs = EmployeeModel.objects.filter(document=Document.only_digits(document))
        if exclude_id:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

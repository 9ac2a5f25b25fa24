"""
Ports (Interfaces) do Domínio de Funcionários.

Define o contrato de persistência que os Adapters de infraestrutura
devem implementar.

Implementações:
- DjangoEmployeeRepository (PostgreSQL/SQLite via ORM)
- InMemoryEmployeeRepository (testes e prototipagem)
- CommandValidator (FormCommandValidator, com Django Forms)
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable
import copy

from src.core.shared.result import Result

from .entities import Employee
from .value_objects import Document


@runtime_checkable
class EmployeeRepository(Protocol):
    """
    Interface para persistência de Funcionários.

    Exclusão é sempre lógica: `delete` desativa o funcionário e
    o mantém consultável por ID.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        """
        Busca funcionário por ID (ativo ou não), com endereços.

        Returns:
            Entidade encontrada ou None
        """
        ...

    def get_all(self, page: int, page_size: int) -> List[Employee]:
        """
        Lista uma página de funcionários, mais recentes primeiro.

        Ordenação por updated_at decrescente. `page` começa em 1.
        """
        ...

    def get_total_count(self) -> int:
        """Total de funcionários cadastrados."""
        ...

    def add(self, employee: Employee) -> None:
        """Persiste novo funcionário (com endereços)."""
        ...

    def update(self, employee: Employee) -> None:
        """
        Persiste alterações de funcionário existente.

        Endereços são sincronizados: novos são inseridos, alterados
        atualizados e removidos da entidade são apagados.
        """
        ...

    def delete(self, employee_id: str) -> None:
        """Exclusão lógica (desativa o funcionário)."""
        ...

    def exists(self, employee_id: str) -> bool:
        ...

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """
        Verifica se email já está em uso (comparação case-insensitive).

        Args:
            email: Email a verificar
            exclude_id: ID de funcionário a ignorar (atualização)
        """
        ...

    def document_exists(self, document: str, exclude_id: Optional[str] = None) -> bool:
        """
        Verifica se documento já está em uso.

        Compara apenas os dígitos, ignorando pontuação.
        """
        ...


@runtime_checkable
class CommandValidator(Protocol):
    """
    Interface para validação de entrada dos Commands.

    Implementada na borda com Django Forms (ver
    adapters/django_app/employees/validators.py).
    """

    def validate(self, command: Any) -> Result[Any]:
        """
        Valida o command.

        Returns:
            Result com o command de valores normalizados, ou com um
            Error(code, message, field) por regra violada
        """
        ...


class InMemoryEmployeeRepository:
    """
    Implementação em memória do EmployeeRepository.

    Guarda cópias das entidades para simular a fronteira de
    persistência: alterações só são vistas após add/update.

    Não usar em produção!
    """

    def __init__(self):
        self._employees: Dict[str, Employee] = {}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        employee = self._employees.get(employee_id)
        return copy.deepcopy(employee) if employee else None

    def get_all(self, page: int, page_size: int) -> List[Employee]:
        ordered = sorted(
            self._employees.values(),
            key=lambda e: e.updated_at,
            reverse=True,
        )
        start = (page - 1) * page_size
        return [copy.deepcopy(e) for e in ordered[start:start + page_size]]

    def get_total_count(self) -> int:
        return len(self._employees)

    def add(self, employee: Employee) -> None:
        self._employees[employee.id] = copy.deepcopy(employee)

    def update(self, employee: Employee) -> None:
        self._employees[employee.id] = copy.deepcopy(employee)

    def delete(self, employee_id: str) -> None:
        employee = self._employees.get(employee_id)
        if employee:
            employee.deactivate()

    def exists(self, employee_id: str) -> bool:
        return employee_id in self._employees

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        email = (email or "").strip().lower()
        return any(
            e.email.value.lower() == email
            for e in self._employees.values()
            if e.id != exclude_id
        )

    def document_exists(self, document: str, exclude_id: Optional[str] = None) -> bool:
        digits = Document.only_digits(document)
        return any(
            e.document.value == digits
            for e in self._employees.values()
            if e.id != exclude_id
        )

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._employees.clear()

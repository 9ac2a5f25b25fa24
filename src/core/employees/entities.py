"""
Entidades do Domínio de Funcionários.

Entidades:
- Employee: Agregado principal (funcionário)
- EmployeeAddress: Endereço vinculado a um funcionário

Regras de Negócio Encapsuladas:
- Funcionário deve ter pelo menos 18 anos
- Data de nascimento entre 01/01/1900 e hoje
- Documento (CPF/CNPJ) é imutável após a criação
- No máximo um endereço principal; o primeiro endereço é sempre principal
- Exclusão é lógica (is_active = False)

Operações que podem falhar por regra de negócio retornam Result em
vez de lançar exceção.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional
import uuid

from src.core.shared.result import Result

from .value_objects import Address, Document, Email, Money, PersonName


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _utc_today() -> date:
    return _utcnow().date()


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class EmployeeAddress:
    """
    Endereço de um funcionário.

    Entidade (tem identidade própria) que envolve o Value Object
    Address. A marcação de principal vive no Address; trocar a
    marcação substitui o Value Object por uma cópia.

    Attributes:
        id: Identificador único (UUID)
        employee_id: ID do funcionário dono do endereço
        address: Dados postais
        created_at: Data/hora (UTC) de criação
    """

    employee_id: str
    address: Address
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, employee_id: str, address: Address) -> "EmployeeAddress":
        return cls(employee_id=employee_id, address=address)

    @property
    def is_main(self) -> bool:
        return self.address.is_main

    def set_as_main(self, is_main: bool) -> None:
        if self.address.is_main != is_main:
            self.address = self.address.with_main(is_main)


@dataclass
class Employee:
    """
    Entidade de Domínio: Funcionário.

    Invariantes:
    - Idade mínima de 18 anos
    - Data de nascimento não anterior a 01/01/1900 nem no futuro
    - Exatamente um endereço principal quando houver endereços
    - updated_at nunca é anterior a created_at

    Example:
        result = Employee.create(
            name=PersonName.create("Maria", "Silva").value,
            email=Email.create("maria@empresa.com").value,
            birth_date=date(1990, 5, 20),
            document=Document.create("123.456.789-01").value,
            position="Analista",
            salary=Money.create("5000.00").value,
        )
        employee = result.value
        employee.add_address(endereco)
    """

    name: PersonName
    email: Email
    birth_date: date
    document: Document
    position: str
    salary: Money
    id: str = field(default_factory=_new_id)
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None
    addresses: List[EmployeeAddress] = field(default_factory=list)

    MIN_BIRTH_DATE = date(1900, 1, 1)
    MIN_AGE = 18

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    # =========================================================================
    # Factory
    # =========================================================================

    @classmethod
    def create(
        cls,
        name: Optional[PersonName],
        email: Optional[Email],
        birth_date: Optional[date],
        document: Optional[Document],
        position: Optional[str],
        salary: Optional[Money],
    ) -> Result["Employee"]:
        """
        Factory method para criar funcionário com validações.

        A primeira regra violada interrompe a criação.

        Returns:
            Result com o novo funcionário (ativo, sem endereços)
        """
        if name is None:
            return Result.fail("Employee.NameRequired", "O nome é obrigatório")
        if email is None:
            return Result.fail("Employee.EmailRequired", "O email é obrigatório")
        if document is None:
            return Result.fail("Employee.DocumentRequired", "O documento é obrigatório")
        if not position or not position.strip():
            return Result.fail("Employee.PositionRequired", "O cargo é obrigatório")
        if salary is None:
            return Result.fail("Employee.SalaryRequired", "O salário é obrigatório")

        birth_date_result = cls._validate_birth_date(birth_date)
        if birth_date_result.is_failure:
            return Result.fail(birth_date_result.errors)

        now = _utcnow()
        return Result.ok(cls(
            name=name,
            email=email,
            birth_date=birth_date_result.value,
            document=document,
            position=position.strip(),
            salary=salary,
            created_at=now,
            updated_at=now,
        ))

    # =========================================================================
    # Comportamentos
    # =========================================================================

    def update(
        self,
        name: Optional[PersonName],
        email: Optional[Email],
        birth_date: Optional[date],
        position: Optional[str],
        salary: Optional[Money],
    ) -> Result[None]:
        """
        Atualiza dados cadastrais (documento não pode ser alterado).

        Nenhum campo é alterado se alguma regra for violada.
        """
        if name is None:
            return Result.fail("Employee.NameRequired", "O nome é obrigatório")
        if email is None:
            return Result.fail("Employee.EmailRequired", "O email é obrigatório")
        if not position or not position.strip():
            return Result.fail("Employee.PositionRequired", "O cargo é obrigatório")
        if salary is None:
            return Result.fail("Employee.SalaryRequired", "O salário é obrigatório")

        birth_date_result = self._validate_birth_date(birth_date)
        if birth_date_result.is_failure:
            return Result.fail(birth_date_result.errors)

        self.name = name
        self.email = email
        self.birth_date = birth_date_result.value
        self.position = position.strip()
        self.salary = salary
        self._touch()

        return Result.ok()

    def add_address(self, address: Optional[Address]) -> Result[EmployeeAddress]:
        """
        Vincula novo endereço ao funcionário.

        Regras:
        - O primeiro endereço sempre vira principal
        - Um endereço marcado como principal desmarca os demais
        - Um endereço comum não altera o principal atual
        """
        if address is None:
            return Result.fail("Employee.AddressRequired", "O endereço não pode ser nulo")

        if not self.addresses or address.is_main:
            for existing in self.addresses:
                existing.set_as_main(False)
            address = address.with_main(True)

        employee_address = EmployeeAddress.create(self.id, address)
        self.addresses.append(employee_address)
        self._touch()

        return Result.ok(employee_address)

    def remove_address(self, address_id: str) -> Result[None]:
        """
        Remove endereço pelo ID.

        Se o endereço removido era o principal, o primeiro endereço
        restante assume a marcação.
        """
        employee_address = self.get_address(address_id)
        if employee_address is None:
            return Result.fail("Employee.AddressNotFound", "Endereço não encontrado")

        self.addresses.remove(employee_address)

        if employee_address.is_main and self.addresses:
            self.addresses[0].set_as_main(True)

        self._touch()
        return Result.ok()

    def get_address(self, address_id: str) -> Optional[EmployeeAddress]:
        for employee_address in self.addresses:
            if employee_address.id == address_id:
                return employee_address
        return None

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    # =========================================================================
    # Propriedades Calculadas
    # =========================================================================

    @property
    def main_address(self) -> Optional[EmployeeAddress]:
        for employee_address in self.addresses:
            if employee_address.is_main:
                return employee_address
        return None

    @property
    def age(self) -> int:
        return self.calculate_age(self.birth_date)

    # =========================================================================
    # Validações
    # =========================================================================

    @staticmethod
    def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
        """
        Idade em anos completos.

        Diferença de anos, menos um se o aniversário ainda não
        ocorreu no ano corrente.
        """
        today = today or _utc_today()
        age = today.year - birth_date.year
        if (today.month, today.day) < (birth_date.month, birth_date.day):
            age -= 1
        return age

    @classmethod
    def _validate_birth_date(cls, birth_date: Optional[date]) -> Result[date]:
        if birth_date is None:
            return Result.fail(
                "Employee.BirthDateRequired",
                "A data de nascimento é obrigatória",
            )

        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()

        if birth_date < cls.MIN_BIRTH_DATE:
            return Result.fail(
                "Employee.BirthDateTooOld",
                "A data de nascimento não pode ser anterior a 01/01/1900",
            )

        if birth_date > _utc_today():
            return Result.fail(
                "Employee.BirthDateInFuture",
                "A data de nascimento não pode ser no futuro",
            )

        if cls.calculate_age(birth_date) < cls.MIN_AGE:
            return Result.fail(
                "Employee.Underage",
                "O funcionário deve ter pelo menos 18 anos",
            )

        return Result.ok(birth_date)

    def _touch(self) -> None:
        # updated_at estritamente crescente, mesmo com relógio de baixa resolução
        now = _utcnow()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now

    def __eq__(self, other) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

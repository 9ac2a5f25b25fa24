"""
Value Objects do Domínio de Funcionários.

Value Objects são imutáveis, comparados por valor e só existem em
estado válido: a criação passa sempre pela factory `create`, que
retorna um Result com o objeto ou com os erros encontrados.

Value Objects:
- Email: endereço de email (comparação case-insensitive)
- Document: CPF (11 dígitos) ou CNPJ (14 dígitos)
- Money: valor monetário não negativo com moeda
- PersonName: nome e sobrenome
- Address: endereço postal (com marcação de endereço principal)
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union
import re

from src.core.shared.exceptions import BusinessRuleViolationError
from src.core.shared.result import Error, Result


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


# =============================================================================
# Email
# =============================================================================

@dataclass(frozen=True)
class Email:
    """
    Endereço de email.

    Igualdade e hash ignoram maiúsculas/minúsculas, mas o valor
    original (sem espaços nas pontas) é preservado para exibição.
    """

    value: str

    PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    @classmethod
    def create(cls, email: Optional[str]) -> Result["Email"]:
        if _is_blank(email):
            return Result.fail("Email.Empty", "O email não pode ser vazio")

        email = email.strip()
        if not cls.PATTERN.match(email):
            return Result.fail("Email.InvalidFormat", "Formato de email inválido")

        return Result.ok(cls(email))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.value.lower() == other.value.lower()

    def __hash__(self) -> int:
        return hash(self.value.lower())

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Document
# =============================================================================

class DocumentType(Enum):
    """Tipos de documento aceitos."""

    CPF = "CPF"
    CNPJ = "CNPJ"


@dataclass(frozen=True)
class Document:
    """
    Documento fiscal brasileiro (CPF ou CNPJ).

    Armazena apenas os dígitos. O tipo é deduzido pela quantidade
    de dígitos; dígitos verificadores não são conferidos.
    """

    value: str
    type: DocumentType

    CPF_LENGTH = 11
    CNPJ_LENGTH = 14

    @classmethod
    def create(cls, document: Optional[str]) -> Result["Document"]:
        if _is_blank(document):
            return Result.fail("Document.Empty", "O documento não pode ser vazio")

        digits = cls.only_digits(document)

        if len(digits) == cls.CPF_LENGTH:
            return Result.ok(cls(digits, DocumentType.CPF))
        if len(digits) == cls.CNPJ_LENGTH:
            return Result.ok(cls(digits, DocumentType.CNPJ))

        return Result.fail(
            "Document.InvalidFormat",
            "Documento inválido. Deve ser CPF (11 dígitos) ou CNPJ (14 dígitos)",
        )

    @staticmethod
    def only_digits(document: str) -> str:
        """Remove pontuação e qualquer caractere não numérico."""
        return re.sub(r"\D", "", document or "")

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Money
# =============================================================================

@dataclass(frozen=True)
class Money:
    """
    Valor monetário não negativo.

    Operações entre moedas diferentes são erro de programação e
    lançam BusinessRuleViolationError.
    """

    amount: Decimal
    currency: str = "BRL"

    DEFAULT_CURRENCY = "BRL"

    @classmethod
    def create(
        cls,
        amount: Union[Decimal, int, float, str, None],
        currency: Optional[str] = None,
    ) -> Result["Money"]:
        if amount is None:
            return Result.fail("Money.Empty", "O valor é obrigatório")

        try:
            amount = Decimal(str(amount))
        except InvalidOperation:
            return Result.fail("Money.InvalidAmount", "O valor informado não é numérico")

        if not amount.is_finite():
            return Result.fail("Money.InvalidAmount", "O valor informado não é numérico")

        if amount < 0:
            return Result.fail("Money.NegativeAmount", "O valor não pode ser negativo")

        currency = (currency or cls.DEFAULT_CURRENCY).strip().upper()
        return Result.ok(cls(amount, currency))

    def add(self, other: "Money") -> "Money":
        if self.currency != other.currency:
            raise BusinessRuleViolationError(
                "Não é possível adicionar valores em moedas diferentes",
                rule="Money.CurrencyMismatch",
            )
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        if self.currency != other.currency:
            raise BusinessRuleViolationError(
                "Não é possível subtrair valores em moedas diferentes",
                rule="Money.CurrencyMismatch",
            )

        result = self.amount - other.amount
        if result < 0:
            raise BusinessRuleViolationError(
                "O resultado da subtração não pode ser negativo",
                rule="Money.NegativeAmount",
            )
        return Money(result, self.currency)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


# =============================================================================
# PersonName
# =============================================================================

@dataclass(frozen=True)
class PersonName:
    """Nome e sobrenome de uma pessoa."""

    first_name: str
    last_name: str

    @classmethod
    def create(cls, first_name: Optional[str], last_name: Optional[str]) -> Result["PersonName"]:
        if _is_blank(first_name):
            return Result.fail("PersonName.FirstNameEmpty", "O nome não pode ser vazio")
        if _is_blank(last_name):
            return Result.fail("PersonName.LastNameEmpty", "O sobrenome não pode ser vazio")

        return Result.ok(cls(first_name.strip(), last_name.strip()))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name


# =============================================================================
# Address
# =============================================================================

@dataclass(frozen=True)
class Address:
    """
    Endereço postal.

    `is_main` é apenas uma marcação e não entra na igualdade: dois
    endereços com os mesmos dados postais são iguais mesmo que só um
    seja o principal. Para alterar a marcação use `with_main`, que
    devolve uma nova instância.
    """

    street: str
    number: str
    complement: Optional[str]
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: str = "Brasil"
    is_main: bool = field(default=False, compare=False)

    DEFAULT_COUNTRY = "Brasil"

    @classmethod
    def create(
        cls,
        street: Optional[str],
        number: Optional[str],
        complement: Optional[str],
        neighborhood: Optional[str],
        city: Optional[str],
        state: Optional[str],
        zip_code: Optional[str],
        country: Optional[str] = None,
        is_main: bool = False,
    ) -> Result["Address"]:
        """
        Cria endereço validando todos os campos obrigatórios.

        Diferente dos demais Value Objects, todas as violações são
        reportadas de uma vez.
        """
        required = [
            (street, "Address.StreetEmpty", "A rua não pode ser vazia"),
            (number, "Address.NumberEmpty", "O número não pode ser vazio"),
            (neighborhood, "Address.NeighborhoodEmpty", "O bairro não pode ser vazio"),
            (city, "Address.CityEmpty", "A cidade não pode ser vazia"),
            (state, "Address.StateEmpty", "O estado não pode ser vazio"),
            (zip_code, "Address.ZipCodeEmpty", "O CEP não pode ser vazio"),
        ]
        errors = [Error(code, message) for value, code, message in required if _is_blank(value)]
        if errors:
            return Result.fail(errors)

        return Result.ok(cls(
            street=street.strip(),
            number=number.strip(),
            complement=None if _is_blank(complement) else complement.strip(),
            neighborhood=neighborhood.strip(),
            city=city.strip(),
            state=state.strip(),
            zip_code=zip_code.strip(),
            country=cls.DEFAULT_COUNTRY if _is_blank(country) else country.strip(),
            is_main=bool(is_main),
        ))

    def with_main(self, is_main: bool) -> "Address":
        """Retorna cópia com nova marcação de endereço principal."""
        return replace(self, is_main=is_main)

    def __str__(self) -> str:
        complement = f" {self.complement}" if self.complement else ""
        return (
            f"{self.street}, {self.number}{complement} - {self.neighborhood}, "
            f"{self.city}/{self.state} - {self.zip_code}, {self.country}"
        )

"""
Django Models para o domínio de Funcionários.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/employees/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- EmployeeModel: Tabela principal de funcionários
- EmployeeAddressModel: Endereços de um funcionário (1:N)
"""

from django.db import models
from django.utils import timezone


class DocumentTypeChoices(models.TextChoices):
    """Choices para tipo de documento (espelha DocumentType do Core)."""
    CPF = 'CPF', 'CPF'
    CNPJ = 'CNPJ', 'CNPJ'


class EmployeeModel(models.Model):
    """
    Model Django para persistência de Funcionários.

    Value Objects do Core são "achatados" em colunas:
    PersonName → first_name/last_name, Money → salary/currency,
    Document → document/document_type.
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do funcionário"
    )

    first_name = models.CharField(
        max_length=50,
        help_text="Nome"
    )

    last_name = models.CharField(
        max_length=50,
        help_text="Sobrenome"
    )

    email = models.EmailField(
        max_length=254,
        unique=True,
        help_text="Email (único)"
    )

    birth_date = models.DateField(
        help_text="Data de nascimento"
    )

    document = models.CharField(
        max_length=14,
        unique=True,
        help_text="CPF ou CNPJ, apenas dígitos"
    )

    document_type = models.CharField(
        max_length=4,
        choices=DocumentTypeChoices.choices,
        help_text="Tipo do documento"
    )

    position = models.CharField(
        max_length=100,
        help_text="Cargo"
    )

    salary = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        help_text="Salário"
    )

    currency = models.CharField(
        max_length=3,
        default='BRL',
        help_text="Moeda do salário (ISO 4217)"
    )

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="False quando excluído logicamente"
    )

    # Timestamps (controlados pela Entity)
    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de criação"
    )

    updated_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'employees'
        verbose_name = 'Funcionário'
        verbose_name_plural = 'Funcionários'
        ordering = ['-updated_at']
        indexes = [
            models.Index(fields=['is_active', 'updated_at'], name='idx_employee_active_upd'),
        ]

    def __str__(self):
        return f"[{self.id[:8]}] {self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<EmployeeModel id={self.id[:8]} email={self.email}>"


class EmployeeAddressModel(models.Model):
    """Endereço de um funcionário."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do endereço"
    )

    employee = models.ForeignKey(
        EmployeeModel,
        on_delete=models.CASCADE,
        related_name='addresses',
        help_text="Funcionário dono do endereço"
    )

    street = models.CharField(max_length=100, help_text="Rua")
    number = models.CharField(max_length=20, help_text="Número")
    complement = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Complemento"
    )
    neighborhood = models.CharField(max_length=100, help_text="Bairro")
    city = models.CharField(max_length=100, help_text="Cidade")
    state = models.CharField(max_length=50, help_text="Estado")
    zip_code = models.CharField(max_length=20, help_text="CEP")
    country = models.CharField(max_length=50, default='Brasil', help_text="País")

    is_main = models.BooleanField(
        default=False,
        help_text="Endereço principal do funcionário"
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de criação"
    )

    class Meta:
        db_table = 'employee_addresses'
        verbose_name = 'Endereço de Funcionário'
        verbose_name_plural = 'Endereços de Funcionários'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.street}, {self.number} - {self.city}/{self.state}"

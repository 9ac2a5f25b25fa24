"""
Django Forms para validação de entrada.

Forms são DRIVING ADAPTERS que validam e convertem o payload JSON
antes de passar para os Handlers.

Responsabilidades:
- Validação estrutural (campos obrigatórios, tamanhos, formatos)
- Conversão de tipos (date, Decimal, bool)
- Mensagens de erro amigáveis em português

Princípios:
- Forms NÃO contêm lógica de negócio
- Regras que dependem de estado (email/documento duplicados,
  funcionário existente) ficam nos Handlers
- Campo vazio reporta apenas "obrigatório"; campo preenchido reporta
  todas as regras violadas
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List

from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator

from src.core.employees.entities import Employee
from src.core.employees.value_objects import Document, Email
from src.core.shared.result import Error

DATE_INPUT_FORMATS = ['%Y-%m-%d', '%Y-%m-%dT%H:%M:%S', '%Y-%m-%dT%H:%M:%S.%f', '%d/%m/%Y']

CURRENCY_PATTERN = re.compile(r'^[A-Za-z]{3}$')

# Limite de página aceito na listagem (OFFSET precisa caber no banco)
MAX_PAGE = 1_000_000

# Códigos dos validators do Django → códigos expostos pela API
ERROR_CODES = {
    'required': 'NotEmpty',
    'min_length': 'MinLength',
    'max_length': 'MaxLength',
    'max_digits': 'PrecisionScale',
    'max_decimal_places': 'PrecisionScale',
    'max_whole_digits': 'PrecisionScale',
    'max_value': 'LessThanOrEqual',
    'invalid': 'Invalid',
}

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake_case(key: str) -> str:
    """firstName → first_name (chaves já em snake_case não mudam)."""
    return _CAMEL_BOUNDARY.sub('_', key).lower()


def normalize_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Aceita chaves em camelCase convertendo-as para snake_case."""
    return {to_snake_case(str(key)): value for key, value in data.items()}


def form_errors(form: forms.Form) -> List[Error]:
    """
    Erros do form no formato do Result.

    Mantém a ordem de declaração dos campos e o código de cada regra.
    """
    errors = []
    for field, field_errors in form.errors.as_data().items():
        for error in field_errors:
            code = ERROR_CODES.get(error.code, error.code or 'Invalid')
            for message in error.messages:
                errors.append(Error(code, message, None if field == '__all__' else field))
    return errors


def _utc_today():
    return datetime.now(timezone.utc).date()


# =============================================================================
# Funcionário
# =============================================================================

class _PersonForm(forms.Form):
    """Campos comuns a criação e atualização de funcionário."""

    first_name = forms.CharField(
        min_length=2,
        max_length=50,
        error_messages={
            'required': 'O nome é obrigatório',
            'min_length': 'O nome deve ter pelo menos 2 caracteres',
            'max_length': 'O nome deve ter no máximo 50 caracteres',
        },
    )

    last_name = forms.CharField(
        min_length=2,
        max_length=50,
        error_messages={
            'required': 'O sobrenome é obrigatório',
            'min_length': 'O sobrenome deve ter pelo menos 2 caracteres',
            'max_length': 'O sobrenome deve ter no máximo 50 caracteres',
        },
    )

    email = forms.CharField(
        max_length=254,
        validators=[RegexValidator(Email.PATTERN, message='O email é inválido', code='Email')],
        error_messages={
            'required': 'O email é obrigatório',
            'max_length': 'O email deve ter no máximo 254 caracteres',
        },
    )

    birth_date = forms.DateField(
        input_formats=DATE_INPUT_FORMATS,
        error_messages={
            'required': 'A data de nascimento é obrigatória',
            'invalid': 'A data de nascimento é inválida',
        },
    )

    position = forms.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            'required': 'O cargo é obrigatório',
            'min_length': 'O cargo deve ter pelo menos 2 caracteres',
            'max_length': 'O cargo deve ter no máximo 100 caracteres',
        },
    )

    # decimal(18,2) no banco
    salary = forms.DecimalField(
        max_digits=18,
        decimal_places=2,
        error_messages={
            'required': 'O salário é obrigatório',
            'invalid': 'O salário deve ser um número',
            'max_digits': 'O salário deve ter no máximo 18 dígitos',
            'max_decimal_places': 'O salário deve ter no máximo 2 casas decimais',
            'max_whole_digits': 'O salário deve ter no máximo 16 dígitos antes da vírgula',
        },
    )

    currency = forms.CharField(
        required=False,
        validators=[RegexValidator(
            CURRENCY_PATTERN,
            message='A moeda deve ter 3 letras (ISO 4217)',
            code='Currency',
        )],
    )

    def clean_birth_date(self):
        """Data não futura, a partir de 1900 e idade mínima de 18 anos."""
        birth_date = self.cleaned_data['birth_date']
        errors = []

        if birth_date > _utc_today():
            errors.append(ValidationError(
                'A data de nascimento não pode ser no futuro', code='LessThanOrEqual'
            ))
        if birth_date < Employee.MIN_BIRTH_DATE:
            errors.append(ValidationError(
                'A data de nascimento não pode ser anterior a 01/01/1900', code='GreaterThanOrEqual'
            ))
        if Employee.calculate_age(birth_date, _utc_today()) < Employee.MIN_AGE:
            errors.append(ValidationError(
                'O funcionário deve ter pelo menos 18 anos', code='MinimumAge'
            ))

        if errors:
            raise ValidationError(errors)
        return birth_date

    def clean_salary(self):
        salary = self.cleaned_data['salary']
        if salary <= Decimal('0'):
            raise ValidationError('O salário deve ser maior que zero', code='GreaterThan')
        return salary

    def clean_currency(self):
        currency = self.cleaned_data.get('currency')
        return currency.upper() if currency else 'BRL'


class EmployeeCreateForm(_PersonForm):
    """Payload de POST /api/employees/."""

    document = forms.CharField(
        error_messages={'required': 'O documento é obrigatório'},
    )

    def clean_document(self):
        """Aceita CPF ou CNPJ com ou sem pontuação."""
        document = self.cleaned_data['document']
        digits = Document.only_digits(document)
        if len(digits) not in (Document.CPF_LENGTH, Document.CNPJ_LENGTH):
            raise ValidationError(
                'Documento inválido. Deve ser CPF (11 dígitos) ou CNPJ (14 dígitos)',
                code='Document',
            )
        return document


class EmployeeUpdateForm(_PersonForm):
    """Payload de PUT /api/employees/<id>/ (documento não é alterável)."""

    id = forms.CharField(
        error_messages={'required': 'O ID do funcionário é obrigatório'},
    )


# =============================================================================
# Endereço
# =============================================================================

def _address_text(label: str, max_length: int, required_message: str = None) -> forms.CharField:
    return forms.CharField(
        required=required_message is not None,
        max_length=max_length,
        error_messages={
            'required': required_message,
            'max_length': f'{label} deve ter no máximo {max_length} caracteres',
        },
    )


class EmployeeAddressForm(forms.Form):
    """Payload de POST /api/employees/<id>/addresses/."""

    employee_id = forms.CharField(
        error_messages={'required': 'O ID do funcionário é obrigatório'},
    )
    street = _address_text('A rua', 100, 'A rua é obrigatória')
    number = _address_text('O número', 20, 'O número é obrigatório')
    complement = _address_text('O complemento', 100)
    neighborhood = _address_text('O bairro', 100, 'O bairro é obrigatório')
    city = _address_text('A cidade', 100, 'A cidade é obrigatória')
    state = _address_text('O estado', 50, 'O estado é obrigatório')
    zip_code = _address_text('O CEP', 20, 'O CEP é obrigatório')
    country = _address_text('O país', 50)
    is_main = forms.BooleanField(required=False)

    def clean_complement(self):
        return self.cleaned_data.get('complement') or None

    def clean_country(self):
        return self.cleaned_data.get('country') or 'Brasil'


# =============================================================================
# Listagem
# =============================================================================

class EmployeeListQueryForm(forms.Form):
    """
    Query params de GET /api/employees/.

    Valores fora da faixa (page <= 0, page_size <= 0 ou acima do
    máximo) são normalizados pelo Handler; aqui só se rejeita o que
    não é inteiro ou uma página além de MAX_PAGE.
    """

    page = forms.IntegerField(
        required=False,
        max_value=MAX_PAGE,
        error_messages={
            'invalid': "O parâmetro 'page' deve ser um número inteiro",
            'max_value': "O parâmetro 'page' deve ser no máximo %(limit_value)s",
        },
    )

    page_size = forms.IntegerField(
        required=False,
        error_messages={
            'invalid': "O parâmetro 'pageSize' deve ser um número inteiro",
        },
    )

"""
Validators dos Commands baseados em Django Forms.

Implementam o port CommandValidator: o command vira o `data` do form,
as regras declaradas no form são aplicadas e o command volta com os
valores limpos (strip, moeda em maiúsculas, país padrão).

Assim Handlers chamados fora da API (scripts, testes) passam pelas
mesmas regras e mensagens que as requisições HTTP.
"""

from dataclasses import asdict, fields, replace
from typing import Any, Type

from django import forms

from src.core.shared.result import Result

from .forms import (
    EmployeeAddressForm,
    EmployeeCreateForm,
    EmployeeUpdateForm,
    form_errors,
)


class FormCommandValidator:
    """
    Valida um command com um Django Form.

    Example:
        validator = FormCommandValidator(EmployeeCreateForm)
        result = validator.validate(command)
        if result.is_success:
            command = result.value
    """

    def __init__(self, form_class: Type[forms.Form]):
        self.form_class = form_class

    def validate(self, command: Any) -> Result[Any]:
        form = self.form_class(data=asdict(command))
        if not form.is_valid():
            return Result.fail(form_errors(form))

        names = {f.name for f in fields(command)}
        cleaned = {k: v for k, v in form.cleaned_data.items() if k in names}
        return Result.ok(replace(command, **cleaned))


def create_employee_validator() -> FormCommandValidator:
    return FormCommandValidator(EmployeeCreateForm)


def update_employee_validator() -> FormCommandValidator:
    return FormCommandValidator(EmployeeUpdateForm)


def add_employee_address_validator() -> FormCommandValidator:
    return FormCommandValidator(EmployeeAddressForm)

"""
Configuração do Django App para Funcionários.
"""

from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    """Configuração do app Employees."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.employees'
    label = 'employees'
    verbose_name = 'Cadastro de Funcionários'

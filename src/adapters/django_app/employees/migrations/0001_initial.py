"""
Migration inicial para o domínio de Funcionários.

Cria as tabelas:
- employees: Tabela principal de funcionários
- employee_addresses: Endereços dos funcionários
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: employees
        # =================================================================
        migrations.CreateModel(
            name='EmployeeModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do funcionário'
                )),
                ('first_name', models.CharField(
                    max_length=50,
                    help_text='Nome'
                )),
                ('last_name', models.CharField(
                    max_length=50,
                    help_text='Sobrenome'
                )),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='Email (único)'
                )),
                ('birth_date', models.DateField(
                    help_text='Data de nascimento'
                )),
                ('document', models.CharField(
                    max_length=14,
                    unique=True,
                    help_text='CPF ou CNPJ, apenas dígitos'
                )),
                ('document_type', models.CharField(
                    max_length=4,
                    choices=[('CPF', 'CPF'), ('CNPJ', 'CNPJ')],
                    help_text='Tipo do documento'
                )),
                ('position', models.CharField(
                    max_length=100,
                    help_text='Cargo'
                )),
                ('salary', models.DecimalField(
                    max_digits=18,
                    decimal_places=2,
                    help_text='Salário'
                )),
                ('currency', models.CharField(
                    max_length=3,
                    default='BRL',
                    help_text='Moeda do salário (ISO 4217)'
                )),
                ('is_active', models.BooleanField(
                    default=True,
                    db_index=True,
                    help_text='False quando excluído logicamente'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de criação'
                )),
                ('updated_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'db_table': 'employees',
                'verbose_name': 'Funcionário',
                'verbose_name_plural': 'Funcionários',
                'ordering': ['-updated_at'],
            },
        ),
        migrations.AddIndex(
            model_name='employeemodel',
            index=models.Index(
                fields=['is_active', 'updated_at'],
                name='idx_employee_active_upd'
            ),
        ),

        # =================================================================
        # Tabela: employee_addresses
        # =================================================================
        migrations.CreateModel(
            name='EmployeeAddressModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do endereço'
                )),
                ('street', models.CharField(max_length=100, help_text='Rua')),
                ('number', models.CharField(max_length=20, help_text='Número')),
                ('complement', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    help_text='Complemento'
                )),
                ('neighborhood', models.CharField(max_length=100, help_text='Bairro')),
                ('city', models.CharField(max_length=100, help_text='Cidade')),
                ('state', models.CharField(max_length=50, help_text='Estado')),
                ('zip_code', models.CharField(max_length=20, help_text='CEP')),
                ('country', models.CharField(
                    max_length=50,
                    default='Brasil',
                    help_text='País'
                )),
                ('is_main', models.BooleanField(
                    default=False,
                    help_text='Endereço principal do funcionário'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de criação'
                )),
                ('employee', models.ForeignKey(
                    on_delete=models.deletion.CASCADE,
                    related_name='addresses',
                    to='employees.employeemodel',
                    help_text='Funcionário dono do endereço'
                )),
            ],
            options={
                'db_table': 'employee_addresses',
                'verbose_name': 'Endereço de Funcionário',
                'verbose_name_plural': 'Endereços de Funcionários',
                'ordering': ['created_at'],
            },
        ),
    ]

#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria dados de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar src ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    
    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'
    
    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command
    
    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cria funcionários de exemplo usando os handlers da aplicação."""
    from datetime import date
    from decimal import Decimal

    from src.config.container import get_container
    from src.core.employees.dtos import AddEmployeeAddressCommand, CreateEmployeeCommand

    container = get_container()

    sample_employees = [
        CreateEmployeeCommand(
            first_name='Maria',
            last_name='Silva',
            email='maria.silva@empresa.com.br',
            birth_date=date(1988, 3, 14),
            document='529.982.247-25',
            position='Analista de RH',
            salary=Decimal('6500.00'),
        ),
        CreateEmployeeCommand(
            first_name='João',
            last_name='Souza',
            email='joao.souza@empresa.com.br',
            birth_date=date(1992, 11, 2),
            document='111.444.777-35',
            position='Desenvolvedor',
            salary=Decimal('9800.00'),
        ),
        CreateEmployeeCommand(
            first_name='Consultoria',
            last_name='Alfa',
            email='contato@alfa.com.br',
            birth_date=date(1980, 1, 1),
            document='11.222.333/0001-81',
            position='Prestador de Serviço',
            salary=Decimal('15000.00'),
        ),
    ]

    print("📝 Criando funcionários de exemplo...")

    created = 0
    for command in sample_employees:
        result = container.create_employee_handler().handle(command)
        if result.is_failure:
            print(f"   ✗ {command.email}: {'; '.join(result.error_messages)}")
            continue

        created += 1
        employee = result.value
        container.add_employee_address_handler().handle(
            AddEmployeeAddressCommand(
                employee_id=employee.id,
                street='Avenida Paulista',
                number=str(1000 + created),
                complement=None,
                neighborhood='Bela Vista',
                city='São Paulo',
                state='SP',
                zip_code='01310-100',
            )
        )
        print(f"   ✓ {employee.full_name} ({employee.position})")

    print(f"✅ {created} funcionários criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection
    
    print("🔍 Verificando conexão com o banco...")
    
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings
    
    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/api/employees/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )
    
    args = parser.parse_args()
    
    print("\n" + "=" * 60)
    print("🔧 Employee Manager - Quick Setup")
    print("=" * 60 + "\n")
    
    # Configurar Django
    setup_django()
    
    if args.check_only:
        check_connection()
        return
    
    # Verificar conexão
    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///db.sqlite3")
        return
    
    # Executar migrations
    run_migrations()
    
    # Criar dados de exemplo
    if args.with_sample_data:
        create_sample_data()
    
    # Mostrar informações
    show_info()


if __name__ == '__main__':
    main()

"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher, validators)
- Factory: Nova instância por chamada (handlers, UoW)
- Callable: Valores lidos do Django settings
"""

from dependency_injector import containers, providers
from typing import Optional


def _build_event_publisher(mode: Optional[str]):
    """Publisher conforme EVENT_PUBLISHER_MODE ('sync' ou 'celery')."""
    from src.adapters.django_app.events.publishers import get_event_publisher

    return get_event_publisher(use_celery=(mode or 'sync').lower() == 'celery')


def _settings_value(name: str, default):
    from django.conf import settings

    return getattr(settings, name, default)


def _form_validator(factory_name: str):
    """Validator de command com Django Forms (import tardio)."""
    from src.adapters.django_app.employees import validators

    return getattr(validators, factory_name)()


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Settings: Valores do Django settings
    - Infrastructure: Publisher de eventos e validators
    - Repositories: Persistência
    - Unit of Work: Transações
    - Handlers: Commands e Queries

    Example:
        from src.config.container import get_container

        handler = get_container().create_employee_handler()
        result = handler.handle(command)
    """

    # =========================================================================
    # Settings
    # =========================================================================

    event_publisher_mode = providers.Callable(
        _settings_value, 'EVENT_PUBLISHER_MODE', 'sync'
    )

    default_page_size = providers.Callable(
        _settings_value, 'EMPLOYEES_DEFAULT_PAGE_SIZE', 10
    )

    max_page_size = providers.Callable(
        _settings_value, 'EMPLOYEES_MAX_PAGE_SIZE', 100
    )

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        _build_event_publisher,
        mode=event_publisher_mode,
    )

    create_employee_validator = providers.Singleton(_form_validator, 'create_employee_validator')
    update_employee_validator = providers.Singleton(_form_validator, 'update_employee_validator')
    add_employee_address_validator = providers.Singleton(
        _form_validator, 'add_employee_address_validator'
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    employee_repository = providers.Singleton(
        # Lazy import
        lambda: __import__(
            'src.adapters.django_app.employees.repositories',
            fromlist=['DjangoEmployeeRepository']
        ).DjangoEmployeeRepository()
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda event_publisher: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['DjangoUnitOfWork']
        ).DjangoUnitOfWork(event_publisher=event_publisher),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Handlers (Factory - nova instância por chamada)
    # =========================================================================

    create_employee_handler = providers.Factory(
        lambda employee_repo, uow, validator: __import__(
            'src.core.employees.use_cases',
            fromlist=['CreateEmployeeHandler']
        ).CreateEmployeeHandler(employee_repo=employee_repo, uow=uow, validator=validator),
        employee_repo=employee_repository,
        uow=unit_of_work,
        validator=create_employee_validator,
    )

    update_employee_handler = providers.Factory(
        lambda employee_repo, uow, validator: __import__(
            'src.core.employees.use_cases',
            fromlist=['UpdateEmployeeHandler']
        ).UpdateEmployeeHandler(employee_repo=employee_repo, uow=uow, validator=validator),
        employee_repo=employee_repository,
        uow=unit_of_work,
        validator=update_employee_validator,
    )

    delete_employee_handler = providers.Factory(
        lambda employee_repo, uow: __import__(
            'src.core.employees.use_cases',
            fromlist=['DeleteEmployeeHandler']
        ).DeleteEmployeeHandler(employee_repo=employee_repo, uow=uow),
        employee_repo=employee_repository,
        uow=unit_of_work,
    )

    add_employee_address_handler = providers.Factory(
        lambda employee_repo, uow, validator: __import__(
            'src.core.employees.use_cases',
            fromlist=['AddEmployeeAddressHandler']
        ).AddEmployeeAddressHandler(employee_repo=employee_repo, uow=uow, validator=validator),
        employee_repo=employee_repository,
        uow=unit_of_work,
        validator=add_employee_address_validator,
    )

    # Queries (sem UoW - leitura)
    get_employee_by_id_handler = providers.Factory(
        lambda employee_repo: __import__(
            'src.core.employees.use_cases',
            fromlist=['GetEmployeeByIdHandler']
        ).GetEmployeeByIdHandler(employee_repo=employee_repo),
        employee_repo=employee_repository,
    )

    get_employee_list_handler = providers.Factory(
        lambda employee_repo, default_page_size, max_page_size: __import__(
            'src.core.employees.use_cases',
            fromlist=['GetEmployeeListHandler']
        ).GetEmployeeListHandler(
            employee_repo=employee_repo,
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        ),
        employee_repo=employee_repository,
        default_page_size=default_page_size,
        max_page_size=max_page_size,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def set_container(container) -> None:
    """Substitui o container global (ex: TestingContainer em testes)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes sem banco de dados.

    Usa implementações InMemory e expõe os mesmos providers de
    handlers do Container principal.

    Example:
        container = TestingContainer()
        handler = container.create_employee_handler()
        repo = container.employee_repository()
    """

    event_publisher = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.events.publishers',
            fromlist=['InMemoryEventPublisher']
        ).InMemoryEventPublisher()
    )

    create_employee_validator = providers.Singleton(_form_validator, 'create_employee_validator')
    update_employee_validator = providers.Singleton(_form_validator, 'update_employee_validator')
    add_employee_address_validator = providers.Singleton(
        _form_validator, 'add_employee_address_validator'
    )

    employee_repository = providers.Singleton(
        lambda: __import__(
            'src.core.employees.ports',
            fromlist=['InMemoryEmployeeRepository']
        ).InMemoryEmployeeRepository()
    )

    unit_of_work = providers.Factory(
        lambda event_publisher: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['InMemoryUnitOfWork']
        ).InMemoryUnitOfWork(event_publisher=event_publisher),
        event_publisher=event_publisher,
    )

    create_employee_handler = providers.Factory(
        lambda employee_repo, uow, validator: __import__(
            'src.core.employees.use_cases',
            fromlist=['CreateEmployeeHandler']
        ).CreateEmployeeHandler(employee_repo=employee_repo, uow=uow, validator=validator),
        employee_repo=employee_repository,
        uow=unit_of_work,
        validator=create_employee_validator,
    )

    update_employee_handler = providers.Factory(
        lambda employee_repo, uow, validator: __import__(
            'src.core.employees.use_cases',
            fromlist=['UpdateEmployeeHandler']
        ).UpdateEmployeeHandler(employee_repo=employee_repo, uow=uow, validator=validator),
        employee_repo=employee_repository,
        uow=unit_of_work,
        validator=update_employee_validator,
    )

    delete_employee_handler = providers.Factory(
        lambda employee_repo, uow: __import__(
            'src.core.employees.use_cases',
            fromlist=['DeleteEmployeeHandler']
        ).DeleteEmployeeHandler(employee_repo=employee_repo, uow=uow),
        employee_repo=employee_repository,
        uow=unit_of_work,
    )

    add_employee_address_handler = providers.Factory(
        lambda employee_repo, uow, validator: __import__(
            'src.core.employees.use_cases',
            fromlist=['AddEmployeeAddressHandler']
        ).AddEmployeeAddressHandler(employee_repo=employee_repo, uow=uow, validator=validator),
        employee_repo=employee_repository,
        uow=unit_of_work,
        validator=add_employee_address_validator,
    )

    get_employee_by_id_handler = providers.Factory(
        lambda employee_repo: __import__(
            'src.core.employees.use_cases',
            fromlist=['GetEmployeeByIdHandler']
        ).GetEmployeeByIdHandler(employee_repo=employee_repo),
        employee_repo=employee_repository,
    )

    get_employee_list_handler = providers.Factory(
        lambda employee_repo: __import__(
            'src.core.employees.use_cases',
            fromlist=['GetEmployeeListHandler']
        ).GetEmployeeListHandler(employee_repo=employee_repo),
        employee_repo=employee_repository,
    )

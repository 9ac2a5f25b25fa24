"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
eventos de funcionários são publicados. O payload recebido é o
resultado de `DomainEvent.to_dict()`: envelope (event_id,
aggregate_id, occurred_at...) com os campos do evento em "data".

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        # Processar evento
"""

import logging
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)


def _payload(event_data: Dict[str, Any]) -> Dict[str, Any]:
    return event_data.get('data') or {}


# =============================================================================
# Event Handlers - Funcionários
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_employee_created(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para EmployeeCreatedEvent.

    Ações:
    - Registrar o cadastro para o RH
    """
    employee_id = event_data.get('aggregate_id')
    data = _payload(event_data)

    logger.info(
        f"[HANDLER] EmployeeCreated: {employee_id} | "
        f"Nome: {data.get('full_name')} | Cargo: {data.get('position')}"
    )


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_employee_updated(self, event_data: Dict[str, Any]) -> None:
    """Handler para EmployeeUpdatedEvent."""
    employee_id = event_data.get('aggregate_id')
    data = _payload(event_data)

    logger.info(
        f"[HANDLER] EmployeeUpdated: {employee_id} | "
        f"Email: {data.get('email')} | Cargo: {data.get('position')}"
    )


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_employee_deactivated(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para EmployeeDeactivatedEvent.

    Ações:
    - Registrar desligamento (revogação de acessos é externa)
    """
    employee_id = event_data.get('aggregate_id')

    logger.info(f"[HANDLER] EmployeeDeactivated: {employee_id} em {event_data.get('occurred_at')}")


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_employee_address_added(self, event_data: Dict[str, Any]) -> None:
    """Handler para EmployeeAddressAddedEvent."""
    employee_id = event_data.get('aggregate_id')
    data = _payload(event_data)

    main = " (principal)" if data.get('is_main') else ""
    logger.info(
        f"[HANDLER] EmployeeAddressAdded: {employee_id} | "
        f"{data.get('city')}/{data.get('state')}{main}"
    )


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    'EmployeeCreatedEvent': handle_employee_created,
    'EmployeeUpdatedEvent': handle_employee_updated,
    'EmployeeDeactivatedEvent': handle_employee_deactivated,
    'EmployeeAddressAddedEvent': handle_employee_address_added,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Roteia eventos para os handlers apropriados.
    Este é o ponto de entrada para todos os eventos.

    Args:
        event_type: Tipo do evento (ex: 'EmployeeCreatedEvent')
        event_data: Dados do evento serializado
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler:
        logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
        handler.delay(event_data)
    else:
        logger.warning(f"[DISPATCHER] Handler não encontrado para {event_type}")

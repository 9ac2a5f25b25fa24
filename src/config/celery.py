"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para processar Domain Events de funcionários
fora do ciclo request/response (modo EVENT_PUBLISHER_MODE=celery).

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: rpc (tarefas de eventos ignoram resultados)
- Workers: Processos que executam as tarefas

Uso:
    # Iniciar worker
    celery -A src.config.celery worker -l INFO -Q default,events
"""

import os
from celery import Celery
from kombu import Queue, Exchange

# Definir módulo de settings do Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

# Criar aplicação Celery
app = Celery('employee_manager')

# Carregar configurações do Django (prefixo CELERY_)
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    # Configurações de execução
    task_acks_late=True,  # ACK após execução
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,

    # Monitoramento
    worker_send_task_events=True,
    task_send_sent_event=True,
)

# Definir filas
app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
)
app.conf.task_default_queue = 'default'

# Roteamento de tarefas para filas
app.conf.task_routes = {
    'src.adapters.django_app.events.handlers.*': {'queue': 'events'},
}

# Auto-descoberta de tarefas (módulo "handlers" do pacote de eventos)
app.autodiscover_tasks(['src.adapters.django_app.events'], related_name='handlers')


@app.task(bind=True, ignore_result=True)
def debug_task(self):
    """Tarefa de debug para testar Celery."""
    print(f'Request: {self.request!r}')

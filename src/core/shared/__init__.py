"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Result / Error (propagação explícita de falhas)
- Exceções de domínio
- Interfaces (Ports)
- Base classes para Domain Events
"""

from .exceptions import (
    DomainException,
    BusinessRuleViolationError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher
from .result import Error, Result

__all__ = [
    "DomainException",
    "BusinessRuleViolationError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
    "Error",
    "Result",
]

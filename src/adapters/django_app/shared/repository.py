"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para os repositórios:
- Busca por ID
- Paginação
- Contagem
- Otimização de queries (select_related, prefetch_related)

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


@dataclass
class PaginationParams:
    """Parâmetros de paginação (page 1-indexed)."""
    page: int = 1
    per_page: int = 10

    @property
    def offset(self) -> int:
        """Calcula offset para query."""
        return (self.page - 1) * self.per_page


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoEmployeeRepository(BaseRepository[Employee, EmployeeModel]):
            model_class = EmployeeModel
            prefetch_related_fields = ["addresses"]

            def to_entity(self, model):
                return EmployeeMapper.to_entity(model)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Campos para prefetch_related (M2M, reverse FK)
    prefetch_related_fields: List[str] = []

    # Campo padrão de ordenação
    default_order_field: str = "-updated_at"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet:
        """
        Retorna queryset base com otimizações.

        Aplica select_related e prefetch_related para evitar N+1.
        """
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        if self.prefetch_related_fields:
            qs = qs.prefetch_related(*self.prefetch_related_fields)

        return qs

    def get_by_id(self, entity_id: str) -> Optional[T]:
        try:
            model = self._get_base_queryset().get(id=entity_id)
        except self.model_class.DoesNotExist:
            logger.debug(f"{self.model_class.__name__} not found: {entity_id}")
            return None
        return self.to_entity(model)

    def exists(self, entity_id: str) -> bool:
        return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_page(self, pagination: PaginationParams) -> List[T]:
        """
        Lista uma página de entidades na ordenação padrão.

        Args:
            pagination: Parâmetros de paginação

        Returns:
            Entidades da página (lista vazia além da última página)
        """
        # "id" como desempate mantém a paginação estável
        qs = self._get_base_queryset().order_by(self.default_order_field, "id")
        models_page = qs[pagination.offset:pagination.offset + pagination.per_page]
        return [self.to_entity(m) for m in models_page]

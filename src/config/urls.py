"""
URL Configuration para Employee Manager.

Estrutura:
- /admin/ - Django Admin
- /api/employees/ - API de Funcionários
- /health/ - Health check
"""

from django.contrib import admin
from django.urls import include, path

from src.adapters.django_app.employees.api_views import (
    EmployeeListAPIView,
    HealthCheckView,
)

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # Funcionários
    path('api/employees/', include('src.adapters.django_app.employees.urls')),
    path('api/employees', EmployeeListAPIView.as_view()),

    # Health check
    path('health/', HealthCheckView.as_view(), name='health'),
]

"""
URL patterns para o domínio de Funcionários.

Montado em /api/employees/ (barra final opcional em todas as rotas):
- GET/POST /api/employees/
- GET/PUT/DELETE /api/employees/<id>/
- POST /api/employees/<id>/addresses/
"""

from django.urls import path

from . import api_views

app_name = 'employees'

employee_list = api_views.EmployeeListAPIView.as_view()
employee_detail = api_views.EmployeeDetailAPIView.as_view()
employee_addresses = api_views.EmployeeAddressAPIView.as_view()

urlpatterns = [
    # Listagem e cadastro
    path('', employee_list, name='list'),

    # Detalhe, atualização e exclusão
    path('<str:pk>/', employee_detail, name='detail'),
    path('<str:pk>', employee_detail),

    # Endereços
    path('<str:pk>/addresses/', employee_addresses, name='addresses'),
    path('<str:pk>/addresses', employee_addresses),
]

"""
API Views JSON para o domínio de Funcionários.

Endpoints:
- GET /api/employees/?page=&pageSize= - Listar funcionários
- POST /api/employees/ - Cadastrar funcionário
- GET /api/employees/<id>/ - Obter funcionário
- PUT /api/employees/<id>/ - Atualizar funcionário
- DELETE /api/employees/<id>/ - Desativar funcionário
- POST /api/employees/<id>/addresses/ - Vincular endereço

Formato:
- Entrada: JSON (chaves snake_case ou camelCase)
- Saída: {success, data} ou {success: false, errors, details}

Views apenas traduzem HTTP ↔ Commands/Queries; o resultado dos
handlers (Result) decide o status da resposta.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.config.container import get_container
from src.core.employees.dtos import (
    AddEmployeeAddressCommand,
    CreateEmployeeCommand,
    DeleteEmployeeCommand,
    GetEmployeeByIdQuery,
    GetEmployeeListQuery,
    UpdateEmployeeCommand,
)
from src.core.employees.use_cases import EMPLOYEE_NOT_FOUND
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
)
from src.core.shared.result import Error, Result

from .forms import (
    EmployeeAddressForm,
    EmployeeCreateForm,
    EmployeeListQueryForm,
    EmployeeUpdateForm,
    form_errors,
    normalize_payload,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(
    success: bool,
    data: Any = None,
    errors: Optional[List[str]] = None,
    details: Optional[List[Dict]] = None,
    status: int = 200,
) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        errors: Mensagens de erro (se aplicável)
        details: Erros estruturados {code, message, field}
        status: HTTP status code
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if errors is not None:
        response['errors'] = errors

    if details is not None:
        response['details'] = details

    return JsonResponse(response, status=status)


def error_response(message: str, status: int = 400, code: str = 'Error',
                   field: Optional[str] = None) -> JsonResponse:
    return json_response(
        success=False,
        errors=[message],
        details=[Error(code, message, field).to_dict()],
        status=status,
    )


def failure_response(result: Result) -> JsonResponse:
    """Converte Result de falha: Employee.NotFound → 404, demais → 400."""
    status = 404 if result.has_error(EMPLOYEE_NOT_FOUND.code) else 400
    return json_response(
        success=False,
        errors=result.error_messages,
        details=[error.to_dict() for error in result.errors],
        status=status,
    )


def no_content() -> HttpResponse:
    return HttpResponse(status=204)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("O corpo da requisição deve ser um objeto JSON")

    return normalize_payload(data)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        return get_container()

    def get_handler(self, handler_name: str):
        """Obtém handler do container (nova instância por request)."""
        return getattr(self.get_container(), handler_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Args:
            e: Exceção capturada
        """
        if isinstance(e, BusinessRuleViolationError):
            return error_response(e.message, status=422, code=e.rule or e.code)

        if isinstance(e, DomainException):
            return error_response(e.message, status=400, code=e.code)

        if isinstance(e, ValueError):
            return error_response(str(e), status=400)

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return error_response("Erro interno do servidor", status=500, code='InternalError')


def _form_error_response(form) -> JsonResponse:
    """Erros de validação do form → 400 no formato padrão."""
    return failure_response(Result.fail(form_errors(form)))


# =============================================================================
# Employee API Views
# =============================================================================

class EmployeeListAPIView(BaseAPIView):
    """
    GET /api/employees/ - Lista funcionários (paginado)
    POST /api/employees/ - Cadastra funcionário
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Query params:
        - page: Página (default: 1, máx: 1.000.000)
        - pageSize (ou page_size): Itens por página (default: 10, máx: 100)
        """
        form = EmployeeListQueryForm(data=normalize_payload(request.GET.dict()))
        if not form.is_valid():
            return _form_error_response(form)

        query = GetEmployeeListQuery(
            page=form.cleaned_data['page'] or 1,
            page_size=form.cleaned_data['page_size'] or 0,
        )
        result = self.get_handler('get_employee_list_handler').handle(query)

        if result.is_failure:
            return failure_response(result)
        return json_response(success=True, data=result.value.to_dict())

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "first_name": "string", "last_name": "string",
            "email": "string", "birth_date": "YYYY-MM-DD",
            "document": "CPF ou CNPJ", "position": "string",
            "salary": number, "currency": "BRL"
        }
        """
        form = EmployeeCreateForm(data=self.parse_body(request))
        if not form.is_valid():
            return _form_error_response(form)

        command = CreateEmployeeCommand(**form.cleaned_data)
        result = self.get_handler('create_employee_handler').handle(command)

        if result.is_failure:
            return failure_response(result)

        employee = result.value
        logger.info(f"API: Funcionário cadastrado: {employee.id}")

        response = json_response(success=True, data=employee.to_dict(), status=201)
        response['Location'] = reverse('employees:detail', args=[employee.id])
        return response


class EmployeeDetailAPIView(BaseAPIView):
    """
    GET /api/employees/<id>/ - Obtém funcionário
    PUT /api/employees/<id>/ - Atualiza funcionário
    DELETE /api/employees/<id>/ - Desativa funcionário
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        result = self.get_handler('get_employee_by_id_handler').handle(GetEmployeeByIdQuery(id=pk))

        if result.is_failure:
            return failure_response(result)
        return json_response(success=True, data=result.value.to_dict())

    def put(self, request: HttpRequest, pk: str) -> HttpResponse:
        """O `id` do body é opcional; se enviado deve ser igual ao da rota."""
        data = self.parse_body(request)
        if data.get('id') and data['id'] != pk:
            return error_response(
                "ID da rota não corresponde ao ID do funcionário",
                code='IdMismatch',
                field='id',
            )
        data['id'] = pk

        form = EmployeeUpdateForm(data=data)
        if not form.is_valid():
            return _form_error_response(form)

        command = UpdateEmployeeCommand(**form.cleaned_data)
        result = self.get_handler('update_employee_handler').handle(command)

        if result.is_failure:
            return failure_response(result)
        return no_content()

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        result = self.get_handler('delete_employee_handler').handle(DeleteEmployeeCommand(id=pk))

        if result.is_failure:
            return failure_response(result)
        return no_content()


class EmployeeAddressAPIView(BaseAPIView):
    """POST /api/employees/<id>/addresses/ - Vincula endereço."""

    def post(self, request: HttpRequest, pk: str) -> HttpResponse:
        data = self.parse_body(request)
        if data.get('employee_id') and data['employee_id'] != pk:
            return error_response(
                "ID da rota não corresponde ao ID do funcionário",
                code='IdMismatch',
                field='employee_id',
            )
        data['employee_id'] = pk

        form = EmployeeAddressForm(data=data)
        if not form.is_valid():
            return _form_error_response(form)

        command = AddEmployeeAddressCommand(**form.cleaned_data)
        result = self.get_handler('add_employee_address_handler').handle(command)

        if result.is_failure:
            return failure_response(result)
        return no_content()


class HealthCheckView(View):
    """GET /health/ - Verificação simples de disponibilidade."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse({'status': 'ok'})

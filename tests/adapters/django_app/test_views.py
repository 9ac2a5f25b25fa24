"""
Testes para a API JSON de Funcionários.

Testa:
- CRUD completo via HTTP (status, corpo, cabeçalhos)
- Formato de erro {success: false, errors, details}
- Parsing de JSON e query params
- Integração com Container DI
"""

import json
import uuid

import pytest
from django.test import Client

pytestmark = pytest.mark.django_db

BASE_URL = "/api/employees/"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client(container):
    """Django test client com o container de testes instalado."""
    return Client()


@pytest.fixture
def payload():
    """Payload válido de cadastro (camelCase, como um front-end enviaria)."""
    return {
        "firstName": "Maria",
        "lastName": "Silva",
        "email": "maria.silva@empresa.com.br",
        "birthDate": "1990-05-20",
        "document": "529.982.247-25",
        "position": "Analista de RH",
        "salary": 6500.00,
        "currency": "BRL",
    }


@pytest.fixture
def address_payload():
    return {
        "street": "Avenida Paulista",
        "number": "1000",
        "complement": "Sala 12",
        "neighborhood": "Bela Vista",
        "city": "São Paulo",
        "state": "SP",
        "zipCode": "01310-100",
        "country": "Brasil",
    }


def post_json(client, url, data):
    return client.post(url, data=json.dumps(data), content_type="application/json")


def put_json(client, url, data):
    return client.put(url, data=json.dumps(data), content_type="application/json")


@pytest.fixture
def created(client, payload):
    """Funcionário cadastrado via API (dados da resposta)."""
    response = post_json(client, BASE_URL, payload)
    assert response.status_code == 201
    return response.json()["data"]


# =============================================================================
# POST /api/employees/
# =============================================================================

class TestCreateEmployeeAPI:
    """Testes para cadastro."""

    def test_cadastrar_retorna_201_e_location(self, client, payload, event_publisher):
        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["full_name"] == "Maria Silva"
        assert data["document"] == "52998224725"
        assert data["salary"] == "6500.00"
        assert data["birth_date"] == "1990-05-20"
        assert data["is_active"] is True
        assert response["Location"] == f"/api/employees/{data['id']}/"

        assert [e.event_type for e in event_publisher.published_events] == ["EmployeeCreatedEvent"]

    def test_chaves_snake_case_aceitas(self, client, payload):
        payload = {
            "first_name": payload["firstName"],
            "last_name": payload["lastName"],
            "email": payload["email"],
            "birth_date": payload["birthDate"],
            "document": payload["document"],
            "position": payload["position"],
            "salary": "6500.00",
        }

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 201
        assert response.json()["data"]["currency"] == "BRL"

    def test_rota_sem_barra_final(self, client, payload):
        response = post_json(client, "/api/employees", payload)

        assert response.status_code == 201

    def test_campos_obrigatorios(self, client):
        response = post_json(client, BASE_URL, {})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "O nome é obrigatório" in body["errors"]
        fields = {d["field"] for d in body["details"]}
        assert {"first_name", "last_name", "email", "birth_date", "document", "position", "salary"} <= fields

    def test_email_duplicado(self, client, payload, created):
        payload["document"] = "111.444.777-35"

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["errors"] == ["O email informado já está em uso"]

    def test_documento_duplicado(self, client, payload, created):
        payload["email"] = "outra@empresa.com"

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["details"][0]["code"] == "DocumentInUse"

    def test_data_invalida(self, client, payload):
        payload["birthDate"] = "20-20-2020"

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["errors"] == ["A data de nascimento é inválida"]

    def test_salario_nao_numerico(self, client, payload):
        payload["salary"] = "muito"

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "salary"

    def test_salario_alem_de_decimal_18_2(self, client, payload):
        """Valor que não cabe na coluna é rejeitado antes de gravar."""
        payload["salary"] = "1000000000000000000000.12"

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["details"] == [{
            "code": "PrecisionScale",
            "message": "O salário deve ter no máximo 18 dígitos",
            "field": "salary",
        }]
        assert client.get(BASE_URL).json()["data"]["total_count"] == 0

    def test_salario_com_tres_casas_decimais(self, client, payload):
        payload["salary"] = 1500.125

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["errors"] == ["O salário deve ter no máximo 2 casas decimais"]

    def test_documento_invalido(self, client, payload):
        payload["document"] = "123.456"

        response = post_json(client, BASE_URL, payload)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            "Documento inválido. Deve ser CPF (11 dígitos) ou CNPJ (14 dígitos)"
        ]

    def test_json_invalido(self, client):
        response = client.post(BASE_URL, data="{nao é json", content_type="application/json")

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_corpo_nao_objeto(self, client):
        response = client.post(BASE_URL, data="[1, 2]", content_type="application/json")

        assert response.status_code == 400
        assert response.json()["errors"] == ["O corpo da requisição deve ser um objeto JSON"]


# =============================================================================
# GET /api/employees/ e /api/employees/<id>/
# =============================================================================

class TestReadEmployeeAPI:
    """Testes para consulta."""

    def test_obter_por_id(self, client, created):
        response = client.get(f"{BASE_URL}{created['id']}/")

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "maria.silva@empresa.com.br"

    def test_obter_sem_barra_final(self, client, created):
        assert client.get(f"{BASE_URL}{created['id']}").status_code == 200

    def test_obter_inexistente(self, client):
        response = client.get(f"{BASE_URL}{uuid.uuid4()}/")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "errors": ["Funcionário não encontrado"],
            "details": [{"code": "Employee.NotFound", "message": "Funcionário não encontrado"}],
        }

    def test_listar(self, client, created):
        response = client.get(BASE_URL)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_count"] == 1
        assert data["page"] == 1
        assert data["page_size"] == 10
        assert data["employees"][0]["id"] == created["id"]

    def test_listar_com_page_size(self, client, payload, created):
        payload.update(email="joao@empresa.com", document="111.444.777-35")
        post_json(client, BASE_URL, payload)

        response = client.get(BASE_URL, {"page": 2, "pageSize": 1})

        data = response.json()["data"]
        assert len(data["employees"]) == 1
        assert data["employees"][0]["id"] == created["id"]
        assert data["total_pages"] == 2
        assert data["has_previous"] is True

    def test_page_size_limitado(self, client):
        response = client.get(BASE_URL, {"page_size": 1000})

        assert response.json()["data"]["page_size"] == 100

    def test_pagina_acima_do_limite(self, client):
        response = client.get(BASE_URL, {"page": "99999999999999999999"})

        assert response.status_code == 400
        details = response.json()["details"]
        assert details[0]["field"] == "page"
        assert details[0]["code"] == "LessThanOrEqual"

    def test_ultima_pagina_permitida(self, client, created):
        response = client.get(BASE_URL, {"page": 1000000})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["employees"] == []
        assert data["page"] == 1000000

    @pytest.mark.parametrize("params", [{"page": "abc"}, {"pageSize": "dez"}])
    def test_parametro_nao_numerico(self, client, params):
        response = client.get(BASE_URL, params)

        assert response.status_code == 400
        assert response.json()["success"] is False


# =============================================================================
# PUT /api/employees/<id>/
# =============================================================================

class TestUpdateEmployeeAPI:
    """Testes para atualização."""

    def test_atualizar_retorna_204(self, client, payload, created):
        payload["position"] = "Gerente de RH"

        response = put_json(client, f"{BASE_URL}{created['id']}/", payload)

        assert response.status_code == 204
        detail = client.get(f"{BASE_URL}{created['id']}/").json()["data"]
        assert detail["position"] == "Gerente de RH"
        assert detail["document"] == "52998224725"

    def test_id_do_corpo_igual_ao_da_rota(self, client, payload, created):
        payload["id"] = created["id"]

        assert put_json(client, f"{BASE_URL}{created['id']}/", payload).status_code == 204

    def test_id_divergente(self, client, payload, created):
        payload["id"] = str(uuid.uuid4())

        response = put_json(client, f"{BASE_URL}{created['id']}/", payload)

        assert response.status_code == 400
        assert response.json()["errors"] == ["ID da rota não corresponde ao ID do funcionário"]

    def test_atualizar_inexistente(self, client, payload):
        response = put_json(client, f"{BASE_URL}{uuid.uuid4()}/", payload)

        assert response.status_code == 404

    def test_atualizar_invalido(self, client, payload, created):
        payload["lastName"] = ""

        response = put_json(client, f"{BASE_URL}{created['id']}/", payload)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "last_name"


# =============================================================================
# DELETE /api/employees/<id>/
# =============================================================================

class TestDeleteEmployeeAPI:
    """Testes para exclusão lógica."""

    def test_excluir_retorna_204_e_desativa(self, client, created, event_publisher):
        response = client.delete(f"{BASE_URL}{created['id']}/")

        assert response.status_code == 204
        detail = client.get(f"{BASE_URL}{created['id']}/").json()["data"]
        assert detail["is_active"] is False
        assert event_publisher.get_events_by_type("EmployeeDeactivatedEvent")

    def test_excluir_inexistente(self, client):
        assert client.delete(f"{BASE_URL}{uuid.uuid4()}/").status_code == 404


# =============================================================================
# POST /api/employees/<id>/addresses/
# =============================================================================

class TestEmployeeAddressAPI:
    """Testes para vínculo de endereço."""

    def test_vincular_endereco(self, client, created, address_payload):
        response = post_json(client, f"{BASE_URL}{created['id']}/addresses/", address_payload)

        assert response.status_code == 204
        addresses = client.get(f"{BASE_URL}{created['id']}/").json()["data"]["addresses"]
        assert len(addresses) == 1
        assert addresses[0]["zip_code"] == "01310-100"
        assert addresses[0]["is_main"] is True

    def test_novo_endereco_principal(self, client, created, address_payload):
        url = f"{BASE_URL}{created['id']}/addresses"
        post_json(client, url, address_payload)
        address_payload.update(street="Rua Augusta", isMain=True)

        assert post_json(client, url, address_payload).status_code == 204

        addresses = client.get(f"{BASE_URL}{created['id']}/").json()["data"]["addresses"]
        main = [a["street"] for a in addresses if a["is_main"]]
        assert main == ["Rua Augusta"]

    def test_employee_id_divergente(self, client, created, address_payload):
        address_payload["employeeId"] = str(uuid.uuid4())

        response = post_json(client, f"{BASE_URL}{created['id']}/addresses/", address_payload)

        assert response.status_code == 400

    def test_funcionario_inexistente(self, client, address_payload):
        response = post_json(client, f"{BASE_URL}{uuid.uuid4()}/addresses/", address_payload)

        assert response.status_code == 404

    def test_endereco_invalido(self, client, created, address_payload):
        address_payload["city"] = ""

        response = post_json(client, f"{BASE_URL}{created['id']}/addresses/", address_payload)

        assert response.status_code == 400
        assert response.json()["errors"] == ["A cidade é obrigatória"]


# =============================================================================
# Health check
# =============================================================================

def test_health_check(client):
    response = client.get("/health/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

# tests/test_main.py

from organizador_api.main import app
from organizador_api.routers.tarefa import get_tarefa_service
from organizador_api.services.tarefa_service import MSG_INTERNAL_ERROR, TarefaService

from .test_tarefa_service import BrokenTarefaRepository


def test_root(client):
    body = client.get("/").json()

    assert body["service"] == "organizador_api"
    assert body["status"] == "running"


def test_health_reports_database(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"
    assert body["database"] == "connected"


def test_requests_carry_process_time_header(client):
    assert "x-process-time" in client.get("/Tarefa/ObterTodos").headers


def test_store_failure_is_generic_500(client, nova_tarefa):
    app.dependency_overrides[get_tarefa_service] = lambda: TarefaService(BrokenTarefaRepository())

    responses = [
        client.get("/Tarefa/1"),
        client.get("/Tarefa/ObterTodos"),
        client.get("/Tarefa/ObterPorTitulo", params={"titulo": "a"}),
        client.get("/Tarefa/ObterPorData", params={"data": "2024-03-05T00:00:00"}),
        client.get("/Tarefa/ObterPorStatus", params={"status": 0}),
        client.post("/Tarefa", json=nova_tarefa()),
        client.put("/Tarefa/1", json=nova_tarefa()),
        client.delete("/Tarefa/1"),
    ]

    for response in responses:
        assert response.status_code == 500
        assert response.json() == {"detail": MSG_INTERNAL_ERROR}


def test_validation_precedes_store_failure(client, nova_tarefa):
    app.dependency_overrides[get_tarefa_service] = lambda: TarefaService(BrokenTarefaRepository())

    response = client.post("/Tarefa", json=nova_tarefa(data="0001-01-01T00:00:00"))

    assert response.status_code == 400

import requests
from fastapi.testclient import TestClient


def test_get_health(client: TestClient):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_health_services_endpoint(client: TestClient, requests_mock, urls):
    requests_mock.get(urls["firebase"], json={"device-1": True})
    requests_mock.get(urls["pin_auth"], status_code=401)

    response = client.get("/api/health/services")
    assert response.status_code == 200
    payload = response.json()

    assert set(payload.keys()) == {"telemetry_store", "pinata"}
    assert payload["telemetry_store"] == {"ok": True, "status_code": 200}
    assert payload["pinata"] == {"ok": False, "status_code": 401}
    assert requests_mock.request_history[0].qs["shallow"] == ["true"]


def test_health_services_unreachable(client: TestClient, requests_mock, urls):
    requests_mock.get(urls["firebase"], exc=requests.exceptions.ConnectionError("refused"))
    requests_mock.get(urls["pin_auth"], status_code=200)

    payload = client.get("/api/health/services").json()
    assert payload["telemetry_store"]["ok"] is False
    assert "refused" in payload["telemetry_store"]["error"]
    assert payload["pinata"]["ok"] is True

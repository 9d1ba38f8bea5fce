import pytest
import requests

from app.exceptions import TelemetryStoreError
from app.services.telemetry_client import TelemetryClient


def test_fetch_tree_sends_auth(settings, requests_mock, urls, record_a):
    requests_mock.get(urls["firebase"], json={"a": record_a})

    tree = TelemetryClient(settings).fetch_tree()

    assert tree == {"a": record_a}
    assert requests_mock.last_request.qs["auth"] == ["test-secret"]


def test_fetch_tree_null_body(settings, requests_mock, urls):
    requests_mock.get(urls["firebase"], text="null")
    assert TelemetryClient(settings).fetch_tree() is None


def test_fetch_tree_http_error(settings, requests_mock, urls):
    requests_mock.get(urls["firebase"], status_code=401, json={"error": "Permission denied"})
    with pytest.raises(TelemetryStoreError, match="HTTP 401") as exc:
        TelemetryClient(settings).fetch_tree()
    assert exc.value.retryable is False


def test_fetch_tree_unreachable(settings, requests_mock, urls):
    requests_mock.get(urls["firebase"], exc=requests.exceptions.ConnectionError("down"))
    with pytest.raises(TelemetryStoreError, match="unreachable"):
        TelemetryClient(settings).fetch_tree()


def test_fetch_tree_uses_configured_timeout(settings, mocker, record_a):
    session = mocker.MagicMock()
    session.get.return_value.status_code = 200
    session.get.return_value.json.return_value = {"a": record_a}

    TelemetryClient(settings, session=session).fetch_tree()

    _, kwargs = session.get.call_args
    assert kwargs["timeout"] == (3.0, 30.0)

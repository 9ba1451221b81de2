# tests/test_api.py

import pytest
from fastapi.testclient import TestClient
from app.main import app, settings
import app.main as main_module
import logging
from app.logger import configure_logging
configure_logging()

client = TestClient(app, raise_server_exceptions=False)
test_log = logging.getLogger("tests")

ROUTE = settings.product_updated_route

VALID_EVENT = {
  "id": "p1",
  "name": "Widget",
  "pricePence": 500,
  "description": "",
  "updatedAt": "2024-01-01T00:00:00.000Z",
}


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
  monkeypatch.setenv("APP_ENV", "testing")


def test_route_default_prefix():
  assert ROUTE == "/api/integration/events/product-updated"


def test_valid_event_accepted():
  test_log.debug("Running test_valid_event_accepted.")
  response = client.post(ROUTE, json=VALID_EVENT)
  assert response.status_code == 202
  assert response.json() == {"message": "accepted"}
  test_log.info("test_valid_event_accepted completed successfully.")


def test_invalid_event_reports_all_details():
  body = {"id": "", "name": "Widget", "pricePence": -5, "description": "", "updatedAt": "bad"}
  response = client.post(ROUTE, json=body)
  assert response.status_code == 400
  assert response.json() == {
    "error": "ValidationError",
    "details": [
      "id must be a non-empty string",
      "pricePence must be a non-negative integer",
      "updatedAt must be an ISO 8601 string (YYYY-MM-DDTHH:MM:SS.sssZ)",
    ],
  }


@pytest.mark.parametrize("raw", [b'{"id": "p1", "name": ', b"", b"not json", b"\xff\xfe", b'{"pricePence": NaN}'])
def test_unparsable_body(raw):
  response = client.post(ROUTE, content=raw, headers={"Content-Type": "application/json"})
  assert response.status_code == 400
  assert response.json() == {"error": "Invalid JSON body"}


@pytest.mark.parametrize("raw", [b'"hello"', b"42", b"null", b"[]", b"true"])
def test_non_object_body(raw):
  response = client.post(ROUTE, content=raw, headers={"Content-Type": "application/json"})
  assert response.status_code == 400
  assert response.json() == {"error": "ValidationError", "details": ["Body must be a JSON object."]}


def test_get_not_allowed():
  response = client.get(ROUTE)
  assert response.status_code == 405


def test_accepted_event_is_logged(caplog):
  with caplog.at_level("INFO"):
    response = client.post(ROUTE, json=VALID_EVENT)
  assert response.status_code == 202
  assert "Received product-updated event" in caplog.messages
  assert any(message.startswith("Product updated:") and "'pricePence': 500" in message for message in caplog.messages)


def test_lone_surrogate_id_is_accepted():
  raw = b'{"id": "\\ud800", "name": "Widget", "pricePence": 500, "description": "", "updatedAt": "2024-01-01T00:00:00.000Z"}'
  response = client.post(ROUTE, content=raw, headers={"Content-Type": "application/json"})
  assert response.status_code == 202
  assert response.json() == {"message": "accepted"}


def test_rejected_event_logs_warning(caplog):
  with caplog.at_level("WARNING"):
    response = client.post(ROUTE, json={**VALID_EVENT, "name": "   "})
  assert response.status_code == 400
  assert any(record.levelname == "WARNING" and "Validation failed" in record.getMessage() for record in caplog.records)


def test_global_exception_handler(monkeypatch, caplog):
  def broken_validator(body):
    raise RuntimeError("This is a test error.")

  monkeypatch.setattr(main_module, "validate_payload", broken_validator)
  with caplog.at_level("ERROR"):
    response = client.post(ROUTE, json=VALID_EVENT)
  assert response.status_code == 500
  assert response.json() == {"detail": "Internal Server Error"}
  assert any("Unhandled exception: This is a test error." in message for message in caplog.messages)


def test_service_keeps_serving_after_failure(monkeypatch):
  monkeypatch.setattr(main_module, "validate_payload", lambda body: 1 / 0)
  assert client.post(ROUTE, json=VALID_EVENT).status_code == 500
  monkeypatch.undo()
  assert client.post(ROUTE, json=VALID_EVENT).status_code == 202


def test_healthcheck():
  response = client.get("/health")
  assert response.status_code == 200
  assert response.json() == {"status": "ok"}


def test_root_lists_endpoints():
  response = client.get("/")
  assert response.status_code == 200
  assert ROUTE in response.json()["messages"]

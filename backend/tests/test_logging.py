import json
import logging
import os
from uuid import uuid4

from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", f"sqlite:///./affiliate_{uuid4().hex}.db")
os.environ.setdefault("SKIP_MIGRATIONS", "1")

from app.main import app  # noqa: E402
from app.core.db import Base, engine  # noqa: E402
from app.core.logging import JsonLogFormatter  # noqa: E402

Base.metadata.create_all(bind=engine)


def _capture(caplog, name):
    logger = logging.getLogger(name)
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.INFO)
    return logger


def test_request_log_includes_request_id(caplog):
    logger = _capture(caplog, "api_logger")
    try:
        client = TestClient(app)
        response = client.get("/ping", headers={"X-Request-ID": "req-123"})
        assert response.status_code == 200
        assert response.headers.get("X-Request-ID") == "req-123"

        records = [r for r in caplog.records if r.getMessage() == "request.completed"]
        assert records, "Expected a structured request log entry"
        entry = records[-1]
        assert getattr(entry, "request_id", None) == "req-123"
        assert getattr(entry, "status_code", None) == 200
        assert getattr(entry, "route", None) == "/ping"
        assert getattr(entry, "error_code", "missing") is None
    finally:
        logger.removeHandler(caplog.handler)


def test_request_log_carries_error_code(caplog):
    logger = _capture(caplog, "api_logger")
    try:
        client = TestClient(app)
        response = client.post("/admin/withdrawals/WR_nope/decline")
        assert response.status_code == 404

        entry = [r for r in caplog.records if r.getMessage() == "request.completed"][-1]
        assert getattr(entry, "status_code", None) == 404
        assert getattr(entry, "error_code", None) == "withdrawal_not_found"
        assert getattr(entry, "request_id", None)
    finally:
        logger.removeHandler(caplog.handler)


def test_order_events_are_logged(caplog):
    logger = _capture(caplog, "affiliate_events")
    try:
        client = TestClient(app)
        client.post(
            "/orders/confirm",
            json={"user_id": "log-user", "affiliate_id": "AFF_unknown", "order_amount": 5, "recurring": False},
        )
        entry = [r for r in caplog.records if r.getMessage() == "order.rejected"][-1]
        assert getattr(entry, "reason", None) == "unknown_affiliate"
        assert getattr(entry, "affiliate_id", None) == "AFF_unknown"
    finally:
        logger.removeHandler(caplog.handler)


def test_json_formatter_emits_extra_fields():
    record = logging.LogRecord("api_logger", logging.INFO, __file__, 1, "request.completed", None, None)
    record.request_id = "abc"
    record.status_code = 201
    record.route = None
    record.affiliate_id = None

    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["message"] == "request.completed"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "abc"
    assert payload["status_code"] == 201
    assert "route" in payload and payload["route"] is None
    assert "affiliate_id" not in payload

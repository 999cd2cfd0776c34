import json
import logging

from fastapi import FastAPI
from starlette.testclient import TestClient

from webapi.core.logging.builder import setup_logging
from webapi.core.logging.middleware import REQUEST_ID_HEADER, RequestIDMiddleware

from ..test_fixtures.settings_fixtures import make_settings


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("webapi.test").info("handling hello")
        return {"ok": True}

    return app


def test_generated_request_id_is_echoed():
    client = TestClient(make_app())

    resp = client.get("/hello")

    assert resp.status_code == 200
    assert resp.headers.get(REQUEST_ID_HEADER)


def test_incoming_request_id_is_kept():
    client = TestClient(make_app())

    resp = client.get("/hello", headers={REQUEST_ID_HEADER: "rid-42"})

    assert resp.headers[REQUEST_ID_HEADER] == "rid-42"


def test_request_id_is_stamped_on_log_lines(capsys):
    setup_logging(make_settings(LOG_FORMAT="json"))
    try:
        client = TestClient(make_app())
        resp = client.get("/hello")
        rid = resp.headers[REQUEST_ID_HEADER]

        captured = capsys.readouterr()
        lines = []
        for line in captured.err.splitlines():
            try:
                lines.append(json.loads(line))
            except json.JSONDecodeError:
                continue

        assert any(rec.get("request_id") == rid and rec["message"] == "handling hello" for rec in lines)
    finally:
        setup_logging(make_settings())

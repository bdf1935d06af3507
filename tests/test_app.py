import pytest
from fastapi.testclient import TestClient

from formbuilder.api.app import app
from formbuilder.database import sql
from formbuilder.api.lib.base_responses import successful_response, server_error, user_error


def test_version(client):
    r = client.get("/version")

    assert r.status_code == 200
    assert r.json() == {"success": True, "payload": {"version": "0.0.0-test"}}


def test_health_status(client):
    r = client.post("/health-status")

    assert r.status_code == 200
    assert r.json() == {"success": True}


def test_unknown_route_is_caught(client):
    r = client.get("/api/surveys")

    assert r.status_code == 404
    assert r.json() == {
        "description": "Details not found",
        "request_method": "GET",
        "path_name": "api/surveys"
    }


def test_response_helpers_reject_status_codes_outside_their_range():
    with pytest.raises(ValueError):
        successful_response(status_code=404)
    with pytest.raises(ValueError):
        user_error(status_code=500)
    with pytest.raises(ValueError):
        server_error(status_code=200)


def test_response_helpers_reject_the_next_status_class():
    with pytest.raises(ValueError):
        successful_response(status_code=300)
    with pytest.raises(ValueError):
        user_error(status_code=500)
    with pytest.raises(ValueError):
        server_error(status_code=600)

    assert successful_response(status_code=201).status_code == 201
    assert user_error(status_code=404).status_code == 404
    assert server_error(status_code=503).status_code == 503


def test_missing_body_is_reported_as_required(client, db):
    r = client.post("/api/forms")

    assert r.status_code == 400
    assert r.json() == {"error": "Request body is required"}
    assert db.count("forms") == 0


def test_shutdown_closes_the_pool(pool):
    with TestClient(app) as client:
        assert client.post("/health-status").status_code == 200

    assert pool.closed
    assert sql.connection_pool is None

"""Unit tests for HTTP app wiring and error handling."""

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from app.adapters.inbound.http.errors import register_exception_handlers, status_for
from app.adapters.inbound.http.middleware import REQUEST_ID_HEADER, register_request_logging
from app.adapters.inbound.http.routes import router
from app.domain.errors import (
    ConflictError,
    DomainError,
    FileTooLargeError,
    NotFoundError,
    ServiceUnavailableError,
    UnsupportedMediaError,
    ValidationError,
)


@pytest.fixture
def app():
    """Create FastAPI app with router, handlers and a route that fails."""
    app = FastAPI()
    register_request_logging(app)
    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret details")

    @app.get("/unavailable")
    async def unavailable() -> None:
        raise ServiceUnavailableError("Failed to update lead", OSError("disk full"))

    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app, raise_server_exceptions=False)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_request_id_is_echoed(client):
    """Test that a caller supplied request id is returned."""
    response = client.get("/health", headers={REQUEST_ID_HEADER: "req-42"})

    assert response.headers[REQUEST_ID_HEADER] == "req-42"


def test_request_id_is_generated(client):
    """Test that a request id is generated when absent."""
    response = client.get("/health")

    assert len(response.headers[REQUEST_ID_HEADER]) == 36


def test_unexpected_error_is_hidden(client):
    """Test that unexpected exceptions become a generic 500."""
    response = client.get("/boom")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Internal server error"}


def test_service_unavailable_carries_cause(client):
    """Test that infrastructure failures are 500 with their cause."""
    response = client.get("/unavailable")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Failed to update lead: disk full"}


@pytest.mark.parametrize(
    "error,expected",
    [
        (ValidationError("bad"), 400),
        (UnsupportedMediaError("a.exe", "nope"), 400),
        (FileTooLargeError("a.pdf", 10), 400),
        (NotFoundError("missing"), 404),
        (ConflictError("taken"), 409),
        (ServiceUnavailableError("down"), 500),
        (DomainError("other"), 500),
    ],
)
def test_status_for(error, expected):
    """Test the error to status code mapping."""
    assert status_for(error) == expected


def test_unknown_route_uses_error_body(client):
    """Test that framework errors use the same body as domain errors."""
    response = client.get("/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Not Found"}

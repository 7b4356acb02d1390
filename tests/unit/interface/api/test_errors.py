"""Unit tests for the exception handlers."""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from acadly.domain.error import NotFoundError, ValidationError
from acadly.interface.api.errors import register_error_handlers


class _PointsSnapshot(BaseModel):
    points: int = Field(ge=0)


def _client() -> TestClient:
    """Build a bare app with the handlers installed and a few failing routes."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/domain-rule")
    async def domain_rule():
        raise ValidationError("month: expected format YYYY-MM")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Query", "123")

    @app.get("/model-bug")
    async def model_bug():
        return _PointsSnapshot(points=-1)

    @app.get("/value-error")
    async def value_error():
        return int("not-a-number")

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for the domain error to status mapping."""

    def test_domain_validation_error_is_400_with_message(self):
        response = _client().get("/domain-rule")

        assert response.status_code == 400
        assert response.json() == {"detail": "month: expected format YYYY-MM"}

    def test_not_found_hides_identifier(self):
        response = _client().get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Query not found"}

    def test_internal_model_error_is_generic_500(self):
        """A pydantic error raised by our own code is a bug, not bad input."""
        response = _client().get("/model-bug")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "points" not in response.text

    def test_plain_value_error_is_generic_500(self):
        response = _client().get("/value-error")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

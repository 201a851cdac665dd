"""Unit tests for exception handlers."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.exception_handlers import setup_exception_handlers
from core.exceptions import FormatViolationError, ProfileNotFoundError, ScreenNameTakenError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_exception_returns_error_code_and_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise ProfileNotFoundError("some-id")

        response = await _get(app, "/raise-app")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "PROFILE_NOT_FOUND"
        assert body["message"] == "Profile not found"
        assert body["details"]["profile_id"] == "some-id"

    @pytest.mark.asyncio
    async def test_conflict_maps_to_409(self) -> None:
        app = _create_test_app()

        @app.get("/raise-conflict")
        async def _() -> None:
            raise ScreenNameTakenError("alice")

        response = await _get(app, "/raise-conflict")

        assert response.status_code == 409
        body = response.json()
        assert body["error_code"] == "SCREEN_NAME_TAKEN"
        assert body["details"] == {"sn": "alice"}

    @pytest.mark.asyncio
    async def test_format_violation_carries_configured_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-format")
        async def _() -> None:
            raise FormatViolationError("Screen name must be 3-20 characters", "sn")

        response = await _get(app, "/raise-format")

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "FORMAT_VIOLATION"
        assert body["message"] == "Screen name must be 3-20 characters"
        assert body["details"] == {"field": "sn"}

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=403, detail="Forbidden")

        response = await _get(app, "/raise-http")

        assert response.status_code == 403
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["message"] == "Forbidden"

    @pytest.mark.asyncio
    async def test_validation_error_returns_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            name: str = Field(..., min_length=1)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"name": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert isinstance(body["details"], list)
        assert body["details"][0]["field"] == "body.name"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        import json
        from unittest.mock import MagicMock

        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, RuntimeError("store unreachable"))  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["request_id"] == "test-req-id"

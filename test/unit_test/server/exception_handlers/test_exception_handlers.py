"""
Unit tests for server exception handlers.

Tests cover the global handler for unexpected errors, the mapping of
domain errors to HTTP responses and the flattening of validation errors.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from webeze.core.errors import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    NotFoundError,
    PermissionDeniedError,
    WebezeError,
)
from webeze.server.exception_handlers import setup_exception_handlers
from webeze.server.exception_handlers.domain_handler import (
    flatten_validation_errors,
    validation_exception_handler,
    webeze_error_handler,
)
from webeze.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/v1/test"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


def _body(response: JSONResponse) -> dict:
    return json.loads(response.body.decode())


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("webeze.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert "Unhandled exception" in call_args[0][0]
        extra = call_args[1]["extra"]
        assert extra["error_type"] == "ValueError"
        assert extra["method"] == "GET"
        assert extra["path"] == "/api/v1/test"
        assert extra["client"] == "127.0.0.1"

    @pytest.mark.asyncio
    async def test_exception_handler_response(self, mock_request):
        exc = RuntimeError("Test error")

        with patch("webeze.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = _body(response)
        assert body["detail"] == "Internal server error"
        assert body["error_id"] == id(exc)
        assert body["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        mock_request.client = None

        with patch("webeze.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"

    @pytest.mark.asyncio
    async def test_exception_handler_reports_to_monitoring(self, mock_request):
        with (
            patch("webeze.server.exception_handlers.global_handler.logger"),
            patch("webeze.server.exception_handlers.global_handler.log_error") as mock_log_error,
        ):
            await global_exception_handler(mock_request, KeyError("missing"))

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[0][0] == "KeyError"


class TestDomainErrorHandler:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc,status_code",
        [
            (NotFoundError("Company", 7), 404),
            (EmailAlreadyRegisteredError(), 409),
            (PermissionDeniedError("Not allowed"), 403),
            (WebezeError("Bad request"), 400),
        ],
    )
    async def test_maps_status_and_detail(self, mock_request, exc, status_code):
        response = await webeze_error_handler(mock_request, exc)

        assert response.status_code == status_code
        assert _body(response) == {"detail": exc.message}
        assert "www-authenticate" not in response.headers

    @pytest.mark.asyncio
    async def test_authentication_error_sets_challenge_header(self, mock_request):
        response = await webeze_error_handler(mock_request, AuthenticationError("Not authenticated"))

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


class TestValidationErrors:
    def test_flatten_uses_last_location_and_strips_prefix(self):
        errors = [
            {"loc": ("body", "confirmPassword"), "msg": "Value error, Passwords do not match"},
            {"loc": ("body", "email"), "msg": "Field required"},
        ]

        assert flatten_validation_errors(errors) == {
            "confirmPassword": "Passwords do not match",
            "email": "Field required",
        }

    def test_flatten_prefers_original_value_error(self):
        errors = [{"loc": ("body", "company"), "msg": "ignored", "ctx": {"error": ValueError("Company name bad")}}]

        assert flatten_validation_errors(errors) == {"company": "Company name bad"}

    def test_flatten_first_message_wins(self):
        errors = [
            {"loc": ("body", "password"), "msg": "first"},
            {"loc": ("body", "password"), "msg": "second"},
        ]

        assert flatten_validation_errors(errors) == {"password": "first"}

    def test_flatten_skips_list_indexes(self):
        errors = [{"loc": ("body", "items", 0), "msg": "bad"}, {"loc": (), "msg": "whole body"}]

        assert flatten_validation_errors(errors) == {"items": "bad", "__root__": "whole body"}

    @pytest.mark.asyncio
    async def test_validation_handler_response(self, mock_request):
        exc = RequestValidationError([{"loc": ("query", "limit"), "msg": "too big", "type": "less_than_equal"}])

        response = await validation_exception_handler(mock_request, exc)

        assert response.status_code == 422
        assert _body(response) == {"detail": "Validation failed", "errors": {"limit": "too big"}}


def test_setup_exception_handlers_registers_all():
    app = FastAPI()

    setup_exception_handlers(app)

    assert app.exception_handlers[WebezeError] is webeze_error_handler
    assert app.exception_handlers[RequestValidationError] is validation_exception_handler
    assert app.exception_handlers[Exception] is global_exception_handler

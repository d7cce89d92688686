"""Unit tests for the DRF exception handler."""

from __future__ import annotations

import logging

import pytest
from django.db import OperationalError
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, NotFound, ParseError, ValidationError

from modules.core.exceptions import SERVER_ERROR_MESSAGE, api_exception_handler

pytestmark = pytest.mark.unit


class TestApiExceptionHandler:
    def test_api_exception_uses_error_envelope(self):
        response = api_exception_handler(ParseError("JSON parse error"), {})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {"error": "JSON parse error"}

    def test_method_not_allowed_keeps_status(self):
        response = api_exception_handler(MethodNotAllowed("POST"), {})
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert "error" in response.data

    def test_not_found(self):
        response = api_exception_handler(NotFound("Producto no encontrado"), {})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {"error": "Producto no encontrado"}

    def test_validation_error_uses_errors_list(self):
        exc = ValidationError({"min_price": ["Introduzca un número."]})
        response = api_exception_handler(exc, {})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            "errors": [
                {
                    "type": "field",
                    "msg": "Introduzca un número.",
                    "path": "min_price",
                    "location": "query",
                }
            ]
        }

    def test_unhandled_exception_returns_500(self):
        response = api_exception_handler(RuntimeError("boom"), {})
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": SERVER_ERROR_MESSAGE}

    def test_database_error_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            response = api_exception_handler(OperationalError("db down"), {})
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        messages = [record.getMessage() for record in caplog.records]
        assert any("request.unhandled_error" in m for m in messages)

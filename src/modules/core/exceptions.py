"""DRF exception handler.

Keeps every error response in the API's envelope:

- ``ValidationError`` (e.g. bad list filters) → ``400 {"errors": [...]}``.
- Any other ``APIException`` → its status with ``{"error": detail}``.
- Everything else (database failures included) is logged with its
  traceback and answered with ``500 {"error": ...}``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.validation import format_errors

logger = structlog.get_logger(__name__)

SERVER_ERROR_MESSAGE = "Hubo un error en el servidor"


def _detail_text(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        request = context.get("request")
        logger.error(
            "request.unhandled_error",
            view=type(view).__name__ if view is not None else None,
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
            error=str(exc),
            exc_info=exc,
        )
        return Response(
            {"error": SERVER_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {"errors": format_errors(exc.detail, "query")}
    else:
        response.data = {"error": _detail_text(response.data)}
    return response

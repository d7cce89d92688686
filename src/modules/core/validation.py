"""Field-by-field request validation for DRF views.

Rules are plain DRF validators: callables that raise
``serializers.ValidationError`` carrying their message.  They are attached
to ``RuleField`` instances which, unlike regular DRF fields, never stop at a
missing value: a missing field is validated as an empty one, every rule runs
and every failure is reported.  Clients get the full list of problems in a
single response.

Views declare what to check with ``validate_request``::

    @validate_request(params=ProductIdRules, body=ProductReplaceRules)
    def update(self, request, pk=None): ...

Failures short-circuit with ``400`` and a body of the form::

    {"errors": [{"type": "field", "msg": "...", "path": "price", "location": "body"}]}
"""

from __future__ import annotations

import functools
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.fields import SkipField, empty
from rest_framework.response import Response
from rest_framework.settings import api_settings

logger = structlog.get_logger(__name__)

Rule = Callable[[Any], None]
ErrorList = List[Dict[str, str]]

NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
INT_PATTERN = re.compile(r"[-+]?[0-9]+")
BOOLEAN_VALUES = frozenset({"true", "false", "1", "0"})


def as_text(value: Any) -> str:
    """Textual form of a request value, the one every rule inspects."""
    if value is None or value is empty:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def not_empty(message: str) -> Rule:
    def rule(value: Any) -> None:
        if as_text(value) == "":
            raise serializers.ValidationError(message)

    return rule


def is_numeric(message: str) -> Rule:
    def rule(value: Any) -> None:
        if not NUMERIC_PATTERN.fullmatch(as_text(value)):
            raise serializers.ValidationError(message)

    return rule


def is_int(message: str) -> Rule:
    def rule(value: Any) -> None:
        if not INT_PATTERN.fullmatch(as_text(value)):
            raise serializers.ValidationError(message)

    return rule


def is_boolean(message: str) -> Rule:
    def rule(value: Any) -> None:
        if as_text(value) not in BOOLEAN_VALUES:
            raise serializers.ValidationError(message)

    return rule


def custom(predicate: Callable[[Any], bool], message: str) -> Rule:
    def rule(value: Any) -> None:
        if not predicate(value):
            raise serializers.ValidationError(message)

    return rule


def greater_than_zero(value: Any) -> bool:
    """``value > 0`` for numbers and numeric text; anything else is ``False``."""
    if isinstance(value, (dict, list)):
        return False
    try:
        return Decimal(as_text(value).strip()) > 0
    except (InvalidOperation, ValueError):
        return False


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


class RuleField(serializers.Field):
    """Serializer field that runs every rule, even on missing input.

    The raw value is passed through untouched; conversion to domain types
    happens later in the DTOs.

    With ``optional=True`` a missing field is skipped, while an explicit
    ``null`` still goes through the rules.
    """

    def __init__(
        self, *, rules: Iterable[Rule] = (), optional: bool = False, **kwargs: Any
    ) -> None:
        kwargs.setdefault("required", False)
        self.optional = optional
        super().__init__(validators=list(rules), **kwargs)

    def validate_empty_values(self, data: Any):
        if data is empty:
            if self.optional:
                raise SkipField()
            return (False, None)
        return (False, data)

    def to_internal_value(self, data: Any) -> Any:
        return data

    def to_representation(self, value: Any) -> Any:
        return value


# ---------------------------------------------------------------------------
# Error formatting
# ---------------------------------------------------------------------------


def _error(message: Any, path: str, location: str) -> Dict[str, str]:
    return {"type": "field", "msg": str(message), "path": path, "location": location}


def format_errors(detail: Any, location: str) -> ErrorList:
    """Flatten DRF error details into the public ``errors`` list."""
    if isinstance(detail, dict):
        errors: ErrorList = []
        for path, messages in detail.items():
            if path == api_settings.NON_FIELD_ERRORS_KEY:
                path = ""
            if not isinstance(messages, (list, tuple)):
                messages = [messages]
            errors.extend(_error(message, path, location) for message in messages)
        return errors
    if isinstance(detail, (list, tuple)):
        return [_error(message, "", location) for message in detail]
    return [_error(detail, "", location)]


def format_pydantic_errors(exc: PydanticValidationError, location: str = "body") -> ErrorList:
    errors: ErrorList = []
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        message = str(cause) if cause is not None else err["msg"]
        path = ".".join(str(part) for part in err["loc"])
        errors.append(_error(message, path, location))
    return errors


def validation_error_response(errors: ErrorList) -> Response:
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)


def collect_errors(
    serializer_class: Type[serializers.Serializer], data: Any, location: str
) -> ErrorList:
    serializer = serializer_class(data=data)
    if serializer.is_valid():
        return []
    return format_errors(serializer.errors, location)


# ---------------------------------------------------------------------------
# View decorator
# ---------------------------------------------------------------------------


def _path_params(view: Any, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """URL kwargs with the lookup kwarg (``pk``) exposed as ``id``."""
    lookup = getattr(view, "lookup_url_kwarg", None) or getattr(view, "lookup_field", "pk")
    data = {key: value for key, value in kwargs.items() if key != lookup}
    if lookup in kwargs:
        data["id"] = kwargs[lookup]
    return data


def validate_request(
    params: Optional[Type[serializers.Serializer]] = None,
    body: Optional[Type[serializers.Serializer]] = None,
):
    """Validate path params and body before the action runs.

    Errors from both sources are reported together, path params first.
    """

    def decorator(action):
        @functools.wraps(action)
        def wrapper(view, request, *args, **kwargs):
            errors: ErrorList = []
            if params is not None:
                errors.extend(collect_errors(params, _path_params(view, kwargs), "params"))
            if body is not None:
                errors.extend(collect_errors(body, request.data, "body"))
            if errors:
                logger.info(
                    "request.validation_failed",
                    method=request.method,
                    path=request.path,
                    error_count=len(errors),
                )
                return validation_error_response(errors)
            return action(view, request, *args, **kwargs)

        return wrapper

    return decorator

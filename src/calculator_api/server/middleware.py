"""
Validation of the a and b query parameters before any operation handler runs.

Operands must be whole base-10 literals: "1.5" and "12abc" are rejected
instead of being truncated to their leading digits.
"""
from collections.abc import Iterable, Mapping
import re
from typing import Union

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from calculator_api.common.logger import logger
from calculator_api.common.models import InvalidInput, Operands


OPERAND_NAMES = ("a", "b")

# Base-10 integer literal with an optional sign, ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Default int string conversion limit of CPython 3.11+
MAX_DIGITS = 4300


def _parse_operand(name: str, raw: Union[str, None], allow_zero: bool) -> Union[int, InvalidInput]:
    """
    Parse a single query parameter into an integer operand.

    :param str name: Query parameter name
    :param raw: Raw query parameter value, None when absent
    :param bool allow_zero: Whether 0 is an acceptable operand

    :return: Parsed integer, or the reason it was rejected
    """
    if raw is None or not raw.strip():
        return InvalidInput(parameter=name, message=f"Query parameter '{name}' is required")

    value = raw.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        return InvalidInput(
            parameter=name,
            message=f"Query parameter '{name}' must be an integer, got {raw!r}",
        )

    if len(value.lstrip("+-")) > MAX_DIGITS:
        return InvalidInput(parameter=name, message=f"Query parameter '{name}' has too many digits")

    try:
        number = int(value)
    except ValueError:
        # Conversion limit lowered below MAX_DIGITS for this process
        return InvalidInput(parameter=name, message=f"Query parameter '{name}' has too many digits")

    if number == 0 and not allow_zero:
        return InvalidInput(parameter=name, message=f"Query parameter '{name}' must be a non-zero integer")
    return number


def validate_operands(params: Mapping[str, str], allow_zero: bool = False) -> Union[Operands, InvalidInput]:
    """
    Validate the a and b query parameters of a request.

    Both parameters must be present and parse as base-10 integers. Zero is
    rejected unless allow_zero is set.

    :param Mapping params: Query parameters of the request
    :param bool allow_zero: Whether 0 is an acceptable operand

    :return: Validated operands, or the reason the request was rejected
    :rtype: Union[Operands, InvalidInput]
    """
    parsed = {}
    for name in OPERAND_NAMES:
        outcome = _parse_operand(name, params.get(name), allow_zero)
        if isinstance(outcome, InvalidInput):
            return outcome
        parsed[name] = outcome
    return Operands(**parsed)


def get_operands(request: Request) -> Operands:
    """
    Return the operands validated for this request.

    :raises RuntimeError: If the request did not go through OperandValidationMiddleware
    """
    operands = getattr(request.state, "operands", None)
    if not isinstance(operands, Operands):
        raise RuntimeError(f"No validated operands attached to request for {request.url.path}")
    return operands


class OperandValidationMiddleware(BaseHTTPMiddleware):
    """
    Reject operation requests whose operands are missing or invalid.

    Requests to one of the guarded paths are validated with validate_operands:
        - on failure, a 422 plain-text response is returned and the route is never called
        - on success, the Operands are stored on request.state for get_operands

    Requests to any other path are forwarded untouched.
    """

    def __init__(self, app: ASGIApp, paths: Iterable[str], allow_zero: bool = False) -> None:
        super().__init__(app)
        self.paths = frozenset(paths)
        self.allow_zero = allow_zero

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path not in self.paths:
            return await call_next(request)

        outcome = validate_operands(request.query_params, allow_zero=self.allow_zero)
        if isinstance(outcome, InvalidInput):
            logger.warning(f"🧮❌ Rejected {request.url.path}: {outcome.message}")
            return PlainTextResponse(outcome.message, status_code=422)

        request.state.operands = outcome
        return await call_next(request)

"""Operation handlers mounted as GET routes."""
from collections.abc import Callable, Mapping

from fastapi import APIRouter, Depends

from calculator_api.common.logger import logger
from calculator_api.common.models import OperationResult, Operands
from calculator_api.common.operations import OperationFn
from calculator_api.server.middleware import get_operands


def make_handler(name: str, operation: OperationFn) -> Callable[[Operands], OperationResult]:
    """
    Build the route handler for a single operation.

    The handler trusts the validation middleware: it only reads the typed
    operands and applies the operation to them.

    :param str name: Operation name, used for logging and the handler name
    :param OperationFn operation: Pure function applied to the operands

    :return: FastAPI endpoint returning an OperationResult
    """

    def handler(operands: Operands = Depends(get_operands)) -> OperationResult:
        result = operation(operands.a, operands.b)
        logger.debug(f"🧮✅ {name}({operands.a}, {operands.b}) = {result}")
        return OperationResult(result=result)

    handler.__name__ = f"{name}_handler"
    handler.__doc__ = operation.__doc__
    return handler


def build_router(operations: Mapping[str, OperationFn]) -> APIRouter:
    """Mount every operation at GET /<name>."""
    router = APIRouter()
    for name, operation in operations.items():
        router.add_api_route(
            f"/{name}",
            make_handler(name, operation),
            methods=["GET"],
            response_model=OperationResult,
            name=name,
        )
    return router

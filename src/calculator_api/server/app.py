"""FastAPI application factory."""
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from calculator_api.common.logger import logger
from calculator_api.common.models import ServerSettings
from calculator_api.common.operations import OPERATIONS, OperationFn
from calculator_api.server.middleware import OperandValidationMiddleware
from calculator_api.server.routes import build_router


def create_app(
    settings: Optional[ServerSettings] = None,
    operations: Mapping[str, OperationFn] = OPERATIONS,
) -> FastAPI:
    """
    Build the calculator application.

    Every operation is mounted at GET /<name> and guarded by
    OperandValidationMiddleware.

    :param ServerSettings settings: Server configuration, defaults when omitted
    :param Mapping operations: Operation name to pure function

    :return: Configured FastAPI application
    :rtype: FastAPI
    """
    settings = settings or ServerSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"🖥️ App started for {settings.host}:{settings.port}")
        yield
        logger.info("🖥️ App stopped")

    app = FastAPI(
        title="Calculator API",
        description="Adds and subtracts two integer query parameters.",
        lifespan=lifespan,
    )
    app.include_router(build_router(operations))
    app.add_middleware(
        OperandValidationMiddleware,
        paths=[f"/{name}" for name in operations],
        allow_zero=settings.allow_zero,
    )
    return app

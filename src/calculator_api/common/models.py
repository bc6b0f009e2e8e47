"""Pydantic models for operands, results and server settings."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress


class Operands(BaseModel):
    """Validated integer operands attached to a request before any handler runs."""

    # Operands are produced once by validation and only read afterwards
    model_config = ConfigDict(frozen=True, strict=True)

    a: int = Field(..., description="First operand")
    b: int = Field(..., description="Second operand")


class InvalidInput(BaseModel):
    """Rejected request parameters, rendered as a 422 plain-text response."""

    model_config = ConfigDict(frozen=True)

    parameter: Optional[str] = Field(default=None, description="Offending query parameter, if a single one")
    message: str = Field(..., description="Explanation sent back to the client")


class OperationResult(BaseModel):
    """Represents the JSON body returned by an operation route."""

    result: int = Field(..., description="Computed result of the operation")


class ServerSettings(BaseModel):
    """
    Runtime configuration of the HTTP server.

    Built once from the command line and passed explicitly to the app factory
    and the server runner.
    """

    # Make the Pydantic instance immutable (read-only), so the network
    # configuration cannot change while the server is running.
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", validate_default=True, description="Server host address")
    port: int = Field(default=3000, ge=1, le=65535, description="Server TCP port")
    allow_zero: bool = Field(default=False, description="Accept 0 as a valid operand")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Level of the calculator_api logger"
    )

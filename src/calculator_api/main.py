"""
Command-line entrypoint of the calculator HTTP API.

This script:
- Parses and validates the server configuration
- Builds the FastAPI application explicitly
- Serves it with uvicorn until interrupted
"""

import argparse
from typing import List, Optional

from pydantic import ValidationError
import uvicorn

from calculator_api.common.logger import logger, set_level
from calculator_api.common.models import ServerSettings
from calculator_api.server.app import create_app


def parse_args(argv: Optional[List[str]] = None) -> ServerSettings:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, sys.argv[1:] when omitted

    :return: Validated server settings
    :rtype: ServerSettings
    """
    parser = argparse.ArgumentParser(
        description="Calculator HTTP API exposing /add and /subtract"
    )

    parser.add_argument("--host", default="127.0.0.1", help="Address to bind")
    parser.add_argument("--port", default=3000, type=int, help="TCP port to listen on")
    parser.add_argument(
        "--allow-zero",
        action="store_true",
        help="Accept 0 as an operand instead of answering 422",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        help="DEBUG, INFO, WARNING or ERROR",
    )

    args = parser.parse_args(argv)

    try:
        return ServerSettings(
            host=args.host,
            port=args.port,
            allow_zero=args.allow_zero,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def run_server(settings: ServerSettings) -> None:
    """
    Build the application and serve it until the process is stopped.

    :param ServerSettings settings: Validated server configuration
    """
    set_level(settings.log_level)
    app = create_app(settings)
    logger.info(f"🖥️ Starting server on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=str(settings.host),
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    """
    Main function used by the calculator-api console script.
    """
    run_server(parse_args())


if __name__ == "__main__":
    main()

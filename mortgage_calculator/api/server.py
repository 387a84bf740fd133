"""Run the API with uvicorn.

Usage:
    python -m mortgage_calculator.api.server --port 8000
"""

import argparse
import logging

import uvicorn

from mortgage_calculator.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Mortgage calculator API server")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    uvicorn.run(
        "mortgage_calculator.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

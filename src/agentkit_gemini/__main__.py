"""CLI entry point for agentkit-gemini.

This module provides the command-line interface for serving an action catalog
over HTTP. It can be invoked as `agentkit-gemini` (via the script entry point)
or `python -m agentkit_gemini`.
"""

import argparse
import logging
import os
import sys

import uvicorn

from agentkit_gemini import __version__, create_app
from agentkit_gemini.config import AgentKitGeminiSettings


def main() -> None:
    """Main entry point for the agentkit-gemini CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="agentkit-gemini",
        description="Serve an agent action catalog as Gemini function declarations",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"agentkit-gemini {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via AGENTKIT_GEMINI_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via AGENTKIT_GEMINI_PORT)",
    )

    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Action catalog as module:attribute (can be set via AGENTKIT_GEMINI_CATALOG)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via AGENTKIT_GEMINI_LOG_LEVEL)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.catalog is not None:
        settings_kwargs["catalog"] = args.catalog
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = AgentKitGeminiSettings(**settings_kwargs)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    if args.reload:
        # The reloader imports the app factory in a fresh process, which reads
        # its settings from the environment.
        for key, value in settings_kwargs.items():
            os.environ[f"AGENTKIT_GEMINI_{key.upper()}"] = str(value)

        uvicorn.run(
            "agentkit_gemini.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
        return

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())

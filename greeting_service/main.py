"""Main entrypoint for the greeting service."""

import argparse
import logging
import sys

import uvicorn
from fastapi import FastAPI

from .api import ServiceConfig, create_app
from .config import Settings, load_settings
from .errors import ConfigurationError
from .greeting import GreetingProcessor

logger = logging.getLogger(__name__)


def build_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the greeting application from settings.

    Settings are loaded from the environment and ``application.properties``
    when not given; a missing greeting raises ConfigurationMissing.
    """

    settings = settings or load_settings()
    processor = GreetingProcessor(settings.greeting_text, version=settings.service_version)
    return create_app(
        processor,
        ServiceConfig(
            name=settings.service_name,
            version=settings.service_version,
            description="Returns the configured greeting followed by the caller's name.",
        ),
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="greeting-service",
        description="Serve the configured greeting over HTTP",
    )
    parser.add_argument("--properties", help="Path to the properties file (default: application.properties)")
    parser.add_argument("--host", help="Interface to bind (overrides server.host)")
    parser.add_argument("--port", type=int, help="Port to bind (overrides server.port)")
    parser.add_argument("--log-level", help="Uvicorn log level (overrides log.level)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the greeting service."""
    args = parse_args(argv)

    overrides = {}
    if args.host:
        overrides["server_host"] = args.host
    if args.port is not None:
        overrides["server_port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        settings = load_settings(args.properties, **overrides)
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Startup aborted: %s", exc)
        return 1

    app = build_app(settings)
    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
        log_level=settings.log_level,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

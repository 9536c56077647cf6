# ABOUTME: Process bootstrap: loads Settings, configures logging, wires dependencies and serves with uvicorn.
# ABOUTME: A missing WEATHER_API_KEY stops the process before the server starts.

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from starlette.applications import Starlette

from cep_weather.config import Settings, load_settings
from cep_weather.deps import build_deps
from cep_weather.errors import ConfigError
from cep_weather.http_client import create_http_client
from cep_weather.web import create_app

logger = logging.getLogger(__name__)


def closing_client(http_client: httpx.AsyncClient):
    """Lifespan that closes the shared HTTP client when the app shuts down."""

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        yield
        await http_client.aclose()

    return lifespan


def build_app(settings: Settings) -> Starlette:
    http_client = create_http_client(timeout=settings.http_timeout)
    deps = build_deps(settings, http_client)
    return create_app(deps, lifespan=closing_client(http_client))


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("%s", e)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server starting on port %d", settings.port)
    uvicorn.run(build_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())

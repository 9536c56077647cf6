# ABOUTME: ASGI web entry point exposing GET /weather/{cep}.
# ABOUTME: Runs validate -> ViaCEP lookup -> weather lookup -> unit conversion and maps failures to status codes.

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from cep_weather.cep import require_valid_cep
from cep_weather.deps import WeatherDeps
from cep_weather.errors import InvalidCepError, LookupFailure
from cep_weather.models import ErrorResult, TemperatureResult

logger = logging.getLogger(__name__)

INVALID_ZIPCODE = "invalid zipcode"
ZIPCODE_NOT_FOUND = "can not find zipcode"
WEATHER_UNAVAILABLE = "error getting weather information"


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResult(message=message).model_dump(), status_code=status_code)


async def weather_by_cep(request: Request) -> JSONResponse:
    """Return the current temperature in C/F/K for the CEP in the path.

    Every failure after validation is reported to the caller with a fixed JSON
    message; the cause only goes to the log.
    """
    deps: WeatherDeps = request.app.state.deps

    try:
        cep = require_valid_cep(request.path_params["cep"])
    except InvalidCepError:
        return error_response(INVALID_ZIPCODE, 422)

    try:
        location = await deps.cep_service.get_cep_info(cep)
    except Exception as e:
        logger.warning("CEP lookup failed for %s: %s", cep, e, exc_info=not isinstance(e, LookupFailure))
        return error_response(ZIPCODE_NOT_FOUND, 404)

    try:
        weather = await deps.weather_service.get_temperature(location.localidade, location.uf)
    except Exception:
        logger.exception("Error getting weather info for %s,%s", location.localidade, location.uf)
        return error_response(WEATHER_UNAVAILABLE, 500)

    result = TemperatureResult.from_celsius(weather.current.temp_c)
    return JSONResponse(result.model_dump(by_alias=True), status_code=200)


def create_app(
    deps: WeatherDeps,
    lifespan: Callable[[Starlette], AbstractAsyncContextManager[None]] | None = None,
) -> Starlette:
    """Build the Starlette app with ``deps`` available on ``app.state``."""
    app = Starlette(
        routes=[Route("/weather/{cep}", weather_by_cep, methods=["GET"])],
        lifespan=lifespan,
    )
    app.state.deps = deps
    return app

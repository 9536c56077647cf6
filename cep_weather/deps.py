# ABOUTME: Dependency container for the web handler using Pydantic BaseModel.
# ABOUTME: Holds the ViaCEP and WeatherAPI clients built once at startup from Settings.

from pydantic import BaseModel, ConfigDict

from cep_weather.cep_service import CepService
from cep_weather.config import Settings
from cep_weather.http_client import HttpGetter
from cep_weather.weather_service import WeatherService


class WeatherDeps(BaseModel):
    """Dependencies shared by every request. Read-only after construction."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    cep_service: CepService
    weather_service: WeatherService


def build_deps(settings: Settings, http_client: HttpGetter) -> WeatherDeps:
    """Wire both lookup clients to one shared HTTP client."""
    return WeatherDeps(
        cep_service=CepService(http_client, url_template=settings.viacep_url),
        weather_service=WeatherService(http_client, settings.weather_api_key, base_url=settings.weather_api_url),
    )

# ABOUTME: Process configuration loaded once at startup from the environment and an optional .env file.
# ABOUTME: Produces a frozen Settings model that is passed into the service constructors.

import os
from collections.abc import Mapping
from typing import Literal

import pydantic
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from cep_weather.errors import ConfigError

VIACEP_URL = "https://viacep.com.br/ws/{cep}/json/"
WEATHER_API_URL = "https://api.weatherapi.com/v1/current.json"


class Settings(BaseModel):
    """Immutable startup configuration. Each field is read from the upper-cased env var of the same name."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    weather_api_key: str = Field(min_length=1)
    host: str = "0.0.0.0"
    port: int = 8080
    http_timeout: float = 5.0
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    viacep_url: str = VIACEP_URL
    weather_api_url: str = WEATHER_API_URL

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    When ``environ`` is omitted, a ``.env`` file in the working directory is loaded
    first and ``os.environ`` is read. Unset or empty variables fall back to the
    defaults. Raises ConfigError when WEATHER_API_KEY is missing or any value
    fails validation.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    for name in Settings.model_fields:
        raw = environ.get(name.upper())
        if raw:
            values[name] = raw

    try:
        return Settings(**values)
    except pydantic.ValidationError as e:
        problems = "; ".join(f"{str(err['loc'][0]).upper()}: {err['msg']}" for err in e.errors())
        raise ConfigError(f"invalid configuration: {problems}") from e

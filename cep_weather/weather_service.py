# ABOUTME: Client for the WeatherAPI.com current conditions endpoint.
# ABOUTME: Strips accents from city names, builds the "city,state,Brazil" query, and parses the response.

import logging
import unicodedata

import httpx
import pydantic

from cep_weather.config import WEATHER_API_URL
from cep_weather.errors import DecodeError, TransportError, UpstreamError
from cep_weather.http_client import HttpGetter
from cep_weather.models import WeatherRecord

logger = logging.getLogger(__name__)

COUNTRY = "Brazil"


def remove_accents(text: str) -> str:
    """Drop combining marks so "São Paulo" becomes "Sao Paulo".

    Decomposes to NFD, removes nonspacing marks (category Mn) and recomposes to NFC.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def build_query(city: str, state: str) -> str:
    """Build the WeatherAPI.com ``q`` value for a Brazilian city."""
    return f"{remove_accents(city)},{state},{COUNTRY}"


class WeatherService:
    """Fetches current weather for a city/state pair."""

    def __init__(self, http_client: HttpGetter, api_key: str, base_url: str = WEATHER_API_URL):
        self._http_client = http_client
        self._api_key = api_key
        self._base_url = base_url

    def build_url(self, city: str, state: str) -> str:
        return f"{self._base_url}?key={self._api_key}&q={build_query(city, state)}&aqi=no"

    async def get_temperature(self, city: str, state: str) -> WeatherRecord:
        """Fetch current conditions for ``city``/``state``.

        Raises:
            TransportError: the request did not complete.
            UpstreamError: WeatherAPI.com answered with a non-200 status.
            DecodeError: the body is not a current.json response.
        """
        url = self.build_url(city, state)
        try:
            resp = await self._http_client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"weather API request failed: {e}") from e

        if resp.status_code != httpx.codes.OK:
            raise UpstreamError("weather API", resp.status_code)

        try:
            record = WeatherRecord.model_validate_json(resp.content)
        except pydantic.ValidationError as e:
            raise DecodeError(f"unexpected weather API response for {city},{state}") from e

        logger.debug("weather for %s,%s: %.1fC", city, state, record.current.temp_c)
        return record

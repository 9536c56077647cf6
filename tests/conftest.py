# ABOUTME: Shared test fixtures for the CEP weather test suite.
# ABOUTME: Provides an in-memory HTTP client keyed by exact URL so no test touches the network.

import httpx
import pytest
import pytest_asyncio

from cep_weather.cep_service import CepService
from cep_weather.deps import WeatherDeps
from cep_weather.weather_service import WeatherService
from cep_weather.web import create_app

API_KEY = "test-api-key"

SAO_PAULO_CEP = {
    "cep": "01310-100",
    "logradouro": "Avenida Paulista",
    "complemento": "",
    "bairro": "Bela Vista",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}

SAO_PAULO_WEATHER = {
    "location": {
        "name": "Sao Paulo",
        "region": "Sao Paulo",
        "country": "Brazil",
        "lat": -23.55,
        "lon": -46.64,
        "tz_id": "America/Sao_Paulo",
        "localtime_epoch": 1234567890,
        "localtime": "2023-01-01 12:00",
    },
    "current": {
        "last_updated_epoch": 1234567890,
        "last_updated": "2023-01-01 12:00",
        "temp_c": 25.0,
        "temp_f": 77.0,
        "is_day": 1,
        "condition": {
            "text": "Sunny",
            "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png",
            "code": 1000,
        },
    },
}


def viacep_url(cep: str) -> str:
    return f"https://viacep.com.br/ws/{cep}/json/"


def weather_url(query: str) -> str:
    return f"https://api.weatherapi.com/v1/current.json?key={API_KEY}&q={query}&aqi=no"


class FakeHttpClient:
    """In-memory stand-in for httpx.AsyncClient, keyed by exact request URL.

    Unknown URLs answer 404 with an empty body. Every requested URL is recorded in ``calls``.
    """

    def __init__(self):
        self._responses: dict[str, httpx.Response] = {}
        self._errors: dict[str, Exception] = {}
        self.calls: list[str] = []

    def add_json(self, url: str, data: dict, status_code: int = 200) -> None:
        self._responses[url] = httpx.Response(status_code, json=data)

    def add_text(self, url: str, body: str, status_code: int = 200) -> None:
        self._responses[url] = httpx.Response(status_code, text=body)

    def add_error(self, url: str, error: Exception) -> None:
        self._errors[url] = error

    async def get(self, url: str) -> httpx.Response:
        self.calls.append(url)
        if url in self._errors:
            raise self._errors[url]
        if url in self._responses:
            return self._responses[url]
        return httpx.Response(404, content=b"")


@pytest.fixture
def http_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def cep_service(http_client) -> CepService:
    return CepService(http_client)


@pytest.fixture
def weather_service(http_client) -> WeatherService:
    return WeatherService(http_client, API_KEY)


@pytest.fixture
def app(cep_service, weather_service):
    return create_app(WeatherDeps(cep_service=cep_service, weather_service=weather_service))


@pytest_asyncio.fixture
async def api(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

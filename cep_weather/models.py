# ABOUTME: Pydantic BaseModels for ViaCEP and WeatherAPI.com responses and API payloads.
# ABOUTME: Defines the location/weather records decoded from upstreams and the JSON bodies we return.

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from cep_weather.conversions import celsius_to_fahrenheit, celsius_to_kelvin


class LocationRecord(BaseModel):
    """Address returned by ViaCEP for a postal code.

    When ``erro`` is set the service did not find the CEP and the remaining
    fields carry no meaning.
    """

    model_config = ConfigDict(frozen=True)

    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""
    erro: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class WeatherLocation(BaseModel):
    """Location block of a WeatherAPI.com current-conditions response."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    region: str = ""
    country: str = ""
    lat: float = 0.0
    lon: float = 0.0
    tz_id: str = ""
    localtime_epoch: int = 0
    localtime: str = ""


class Condition(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    icon: str = ""
    code: int = 0


class CurrentConditions(BaseModel):
    """Current block of a WeatherAPI.com response. Only temp_c is required."""

    model_config = ConfigDict(frozen=True)

    last_updated_epoch: int = 0
    last_updated: str = ""
    temp_c: float
    temp_f: float = 0.0
    is_day: int = 0
    condition: Condition = Condition()


class WeatherRecord(BaseModel):
    """Parsed response from the WeatherAPI.com current.json endpoint."""

    model_config = ConfigDict(frozen=True)

    location: WeatherLocation
    current: CurrentConditions


class TemperatureResult(BaseModel):
    """Success body of GET /weather/{cep}."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temp_c: float = Field(alias="temp_C")
    temp_f: float = Field(alias="temp_F")
    temp_k: float = Field(alias="temp_K")

    @classmethod
    def from_celsius(cls, celsius: float) -> "TemperatureResult":
        return cls(
            temp_c=celsius,
            temp_f=celsius_to_fahrenheit(celsius),
            temp_k=celsius_to_kelvin(celsius),
        )


class ErrorResult(BaseModel):
    """Failure body of GET /weather/{cep}."""

    model_config = ConfigDict(frozen=True)

    message: str

# ABOUTME: Client for the ViaCEP location lookup service.
# ABOUTME: Resolves a normalized CEP to a LocationRecord, turning the payload "erro" flag into NotFoundError.

import logging

import httpx
import pydantic

from cep_weather.config import VIACEP_URL
from cep_weather.errors import DecodeError, NotFoundError, TransportError
from cep_weather.http_client import HttpGetter
from cep_weather.models import LocationRecord

logger = logging.getLogger(__name__)


class CepService:
    """Looks up addresses on ViaCEP."""

    def __init__(self, http_client: HttpGetter, url_template: str = VIACEP_URL):
        self._http_client = http_client
        self._url_template = url_template

    def build_url(self, cep: str) -> str:
        return self._url_template.format(cep=cep)

    async def get_cep_info(self, cep: str) -> LocationRecord:
        """Fetch the address for an already normalized CEP.

        ViaCEP answers 200 with ``{"erro": true}`` for unknown codes, so the
        status code is not inspected; absence is read from the payload.

        Raises:
            TransportError: the request did not complete.
            DecodeError: the body is not a ViaCEP JSON object.
            NotFoundError: ViaCEP reports the CEP does not exist.
        """
        url = self.build_url(cep)
        try:
            resp = await self._http_client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"ViaCEP request failed: {e}") from e

        try:
            record = LocationRecord.model_validate_json(resp.content)
        except pydantic.ValidationError as e:
            raise DecodeError(f"unexpected ViaCEP response for {cep}") from e

        if record.erro:
            raise NotFoundError(f"CEP not found: {cep}")

        logger.debug("CEP %s resolved to %s/%s", cep, record.localidade, record.uf)
        return record

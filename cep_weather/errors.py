# ABOUTME: Exception types raised by the lookup clients, validator, and configuration loader.
# ABOUTME: The web handler maps LookupFailure subclasses to 404/500 responses.


class LookupFailure(Exception):
    """Base class for failures talking to an upstream lookup service."""


class TransportError(LookupFailure):
    """The request never produced a response (DNS, connection, timeout)."""


class DecodeError(LookupFailure):
    """The upstream body was not the JSON shape we expected."""


class NotFoundError(LookupFailure):
    """The upstream explicitly reported that the resource does not exist."""


class UpstreamError(LookupFailure):
    """The upstream answered with a non-success status code."""

    def __init__(self, service: str, status_code: int):
        super().__init__(f"{service} error: {status_code}")
        self.service = service
        self.status_code = status_code


class InvalidCepError(ValueError):
    """A postal code that is not 8 digits once separators are removed."""

    def __init__(self, cep: str):
        super().__init__(f"invalid CEP: {cep!r}")
        self.cep = cep


class ConfigError(RuntimeError):
    """Startup configuration is missing or malformed."""

# ABOUTME: Validation and normalization of Brazilian postal codes (CEP).
# ABOUTME: A CEP is valid when, after dropping hyphens and spaces, exactly 8 ASCII digits remain.

import re

from cep_weather.errors import InvalidCepError

_CEP_PATTERN = re.compile(r"^[0-9]{8}$")
_SEPARATORS = ("-", " ")


def normalize_cep(cep: str) -> str:
    """Strip hyphens and spaces from a CEP. Does not validate the result."""
    for sep in _SEPARATORS:
        cep = cep.replace(sep, "")
    return cep


def is_valid_cep(cep: str) -> bool:
    """Return True if the CEP holds exactly 8 digits once separators are removed."""
    return _CEP_PATTERN.fullmatch(normalize_cep(cep)) is not None


def require_valid_cep(cep: str) -> str:
    """Validate and normalize a CEP in one step, raising InvalidCepError if malformed."""
    if not is_valid_cep(cep):
        raise InvalidCepError(cep)
    return normalize_cep(cep)

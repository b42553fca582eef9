"""Country code lookup for holiday providers."""

from __future__ import annotations

import holidays

from .exceptions import UnsupportedCountryError


def supported_countries() -> dict[str, list[str]]:
    """Return supported country codes mapped to their subdivisions."""

    return {code: list(subdivisions) for code, subdivisions in holidays.list_supported_countries().items()}


def provider_identifier(country_code: str) -> str:
    """Resolve a country code to the alpha-2 identifier the engine is built with.

    Alpha-3 codes and other aliases exported by ``holidays`` resolve to their
    alpha-2 code. Unknown codes raise :class:`UnsupportedCountryError`.
    """

    code = (country_code or "").strip().upper()
    if not code or code not in holidays.list_supported_countries():
        raise UnsupportedCountryError(f"Country code {country_code!r} is not supported")
    entity = getattr(holidays, code, None)
    alpha2 = getattr(entity, "country", None)
    if isinstance(alpha2, str) and alpha2:
        return alpha2.upper()
    return code


__all__ = ["provider_identifier", "supported_countries"]

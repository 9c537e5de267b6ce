"""
Lookup configuration and environment overrides.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .address_kinds import GROUP_DEFAULT, GROUP_KEY, NAME_KEYS
from .exceptions import ConfigError
from .titles import DEFAULT_WIKI_HOST

ENV_PREFIX = "MUNIWIKI_"


@dataclass(frozen=True)
class LookupConfig:
    """
    Settings shared by the resolver, index, colouring and geocoder.

    Attributes:
        name_keys: Feature property keys holding the display name, in priority order
        group_key: Feature property used to pick a colour
        group_default: Group value used when the property is missing
        wiki_host: Encyclopedia host used for article links
        saturation: HSL saturation (percent) of feature colours
        lightness: HSL lightness (percent) of feature colours
        nominatim_url: Reverse geocoding endpoint
        language: accept-language hint sent to the geocoder
        zoom: Nominatim zoom level (14 targets municipalities)
        user_agent: User-Agent header, required by the Nominatim usage policy
        timeout_s: HTTP timeout in seconds
    """

    name_keys: tuple[str, ...] = NAME_KEYS
    group_key: str = GROUP_KEY
    group_default: str = GROUP_DEFAULT
    wiki_host: str = DEFAULT_WIKI_HOST
    saturation: int = 65
    lightness: int = 55
    nominatim_url: str = "https://nominatim.openstreetmap.org/reverse"
    language: str = "ja"
    zoom: int = 14
    user_agent: str = "muniwiki/0.1"
    timeout_s: float = 10.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LookupConfig":
        """
        Build a config from ``MUNIWIKI_*`` environment variables.

        Recognised variables: ``MUNIWIKI_NAME_KEYS`` (comma separated),
        ``MUNIWIKI_GROUP_KEY``, ``MUNIWIKI_WIKI_HOST``, ``MUNIWIKI_NOMINATIM_URL``,
        ``MUNIWIKI_LANGUAGE``, ``MUNIWIKI_ZOOM``, ``MUNIWIKI_USER_AGENT``,
        ``MUNIWIKI_TIMEOUT``.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigError: If a numeric variable cannot be parsed or name keys are empty
        """
        env = os.environ if environ is None else environ
        config = cls()
        overrides: dict[str, Any] = {}

        name_keys = env.get(f"{ENV_PREFIX}NAME_KEYS")
        if name_keys is not None:
            keys = tuple(k.strip() for k in name_keys.split(",") if k.strip())
            if not keys:
                raise ConfigError("MUNIWIKI_NAME_KEYS must list at least one key", key="MUNIWIKI_NAME_KEYS")
            overrides["name_keys"] = keys

        for attr in ("group_key", "wiki_host", "nominatim_url", "language", "user_agent"):
            value = env.get(f"{ENV_PREFIX}{attr.upper()}")
            if value:
                overrides[attr] = value

        if f"{ENV_PREFIX}ZOOM" in env:
            overrides["zoom"] = _parse_number(env, f"{ENV_PREFIX}ZOOM", int)
        if f"{ENV_PREFIX}TIMEOUT" in env:
            overrides["timeout_s"] = _parse_number(env, f"{ENV_PREFIX}TIMEOUT", float)

        return replace(config, **overrides)


def _parse_number(env: Mapping[str, str], key: str, kind: type[int] | type[float]) -> int | float:
    raw = env[key]
    try:
        value = kind(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {key}: '{raw}'", key=key) from e
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}", key=key)
    return value

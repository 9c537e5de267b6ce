"""
Nominatim reverse geocoding client.

Failures never propagate: a lookup that cannot be completed yields an empty
address, which the resolver turns into an empty (unresolved) title.
"""

import logging
from typing import Any

import requests

from .config import LookupConfig
from .exceptions import GeocodingError
from .resolver import resolve_title

logger = logging.getLogger(__name__)


class NominatimGeocoder:
    """
    Reverse geocoder backed by the Nominatim ``/reverse`` endpoint.

    Examples:
        >>> geocoder = NominatimGeocoder()
        >>> geocoder.reverse(35.6618, 139.7041)
        {'ward': '渋谷区', 'state': '東京都', ...}
        >>> geocoder.resolve(35.6618, 139.7041)
        '渋谷区'
    """

    def __init__(self, config: LookupConfig | None = None, session: requests.Session | None = None):
        """
        Initialize the geocoder.

        Args:
            config: Endpoint, language, zoom and timeout settings
            session: Optional requests session (shared connection pool, test doubles)
        """
        self.config = config or LookupConfig()
        self.session = session or requests.Session()

    def build_params(self, lat: float, lon: float) -> dict[str, Any]:
        return {
            "format": "jsonv2",
            "lat": lat,
            "lon": lon,
            "accept-language": self.config.language,
            "zoom": self.config.zoom,
        }

    def fetch(self, lat: float, lon: float) -> dict[str, Any]:
        """
        Perform the HTTP request and return the decoded JSON body.

        Raises:
            GeocodingError: On network errors, non-2xx responses or invalid JSON.
        """
        try:
            response = self.session.get(
                self.config.nominatim_url,
                params=self.build_params(lat, lon),
                headers={"Accept": "application/json", "User-Agent": self.config.user_agent},
                timeout=self.config.timeout_s,
            )
        except requests.RequestException as e:
            raise GeocodingError(f"Nominatim request failed: {e}", original_error=e) from e

        if not response.ok:
            raise GeocodingError(
                f"Nominatim error: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingError("Nominatim returned invalid JSON", status_code=response.status_code, original_error=e) from e

        if not isinstance(data, dict):
            raise GeocodingError(f"Unexpected Nominatim payload: {type(data).__name__}", status_code=response.status_code)
        return data

    def reverse(self, lat: float, lon: float) -> dict[str, str]:
        """
        Address components for a point, or ``{}`` if the lookup failed.

        Nominatim reports points it cannot place (open sea, outside coverage)
        with an ``error`` field and no address; those also give ``{}``.
        """
        try:
            data = self.fetch(lat, lon)
        except GeocodingError as e:
            logger.warning("Reverse geocoding failed for (%s, %s): %s", lat, lon, e)
            return {}

        if "error" in data:
            logger.info("Nominatim could not geocode (%s, %s): %s", lat, lon, data["error"])

        address = data.get("address")
        if not isinstance(address, dict):
            return {}
        return {str(k): v for k, v in address.items() if isinstance(v, str)}

    def resolve(self, lat: float, lon: float) -> str:
        """Article title for a point; ``""`` if it could not be resolved."""
        return resolve_title(self.reverse(lat, lon))

"""
Main facade tying the geocoder, the feature index and article links together.
"""

import logging
from typing import Any

from .colors import feature_color
from .config import LookupConfig
from .datasources import FeatureSource
from .geocoding import NominatimGeocoder
from .index import FeatureIndex, build_index
from .models import BoundingRegion, ClickResult, SearchResult
from .resolver import resolve_title
from .titles import article_url, title_to_url

logger = logging.getLogger(__name__)


class MunicipalityLookup:
    """
    Main entry point for the map front end.

    The presentation layer calls one method per user event:
    1. ``at_point`` for a click on the base map (reverse geocoding)
    2. ``search`` for the search box (feature index)
    3. ``url_for_name`` for the "open article" box
    4. ``color_for_feature`` when styling polygons

    Examples:
        >>> from muniwiki.datasources import GeoJSONFileSource
        >>> lookup = MunicipalityLookup.from_source(GeoJSONFileSource("japan.geojson"))
        >>> lookup.at_point(35.6618, 139.7041).title
        '渋谷区'
        >>> lookup.search("札幌").url
        'https://ja.wikipedia.org/wiki/%E6%9C%AD%E5%B9%8C%E5%B8%82'
    """

    def __init__(
        self,
        index: FeatureIndex | None = None,
        geocoder: NominatimGeocoder | None = None,
        config: LookupConfig | None = None,
    ):
        """
        Initialize the lookup.

        Args:
            index: Prebuilt feature index. If None, ``search`` always reports no match
            geocoder: Reverse geocoder. If None, a NominatimGeocoder is created
            config: Shared settings. Defaults to the index's config, then ``LookupConfig()``

        Raises:
            ValueError: If both ``index`` and ``config`` are given and the index was built with another config
        """
        if index is not None and config is not None and index.config != config:
            raise ValueError("config differs from the config the index was built with")
        self.config = config or (index.config if index is not None else LookupConfig())
        self.index = index if index is not None else build_index([], self.config)
        self.geocoder = geocoder or NominatimGeocoder(self.config)

    @classmethod
    def from_source(
        cls,
        source: FeatureSource,
        geocoder: NominatimGeocoder | None = None,
        config: LookupConfig | None = None,
    ) -> "MunicipalityLookup":
        """Load every feature from a source and index it."""
        config = config or LookupConfig()
        index = build_index(source.load_features(), config)
        return cls(index=index, geocoder=geocoder, config=config)

    @property
    def bounds(self) -> BoundingRegion | None:
        """Initial viewport: bounds of the whole collection."""
        return self.index.bounds

    def at_point(self, lat: float, lon: float) -> ClickResult:
        """
        Resolve a clicked point to a municipality and its article URL.

        Never raises on geocoding problems; the result is then unresolved and
        its URL is the encyclopedia home page.
        """
        address = self.geocoder.reverse(lat, lon)
        title = resolve_title(address)
        if not title:
            logger.info("No municipality found at (%s, %s)", lat, lon)
        return ClickResult(
            lat=lat,
            lon=lon,
            title=title,
            url=article_url(title, host=self.config.wiki_host),
            address=address,
        )

    def search(self, query: str) -> SearchResult | None:
        """
        Search the feature index. See :meth:`FeatureIndex.search`.

        Raises:
            InvalidQueryError: If the query is blank.
        """
        return self.index.search(query)

    def url_for_name(self, name: str | None) -> str | None:
        """Article URL for a name typed by hand, or None when the input is blank."""
        stripped = (name or "").strip()
        if not stripped:
            return None
        return title_to_url(stripped, host=self.config.wiki_host)

    def color_for_feature(self, feature: dict[str, Any]) -> str:
        return feature_color(feature, self.config)

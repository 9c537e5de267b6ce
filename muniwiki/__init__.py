"""
muniwiki - Japanese municipality lookup for map clicks and place-name search

Resolve reverse-geocoded addresses and administrative-boundary features to
municipality names and their Japanese Wikipedia articles.
"""

# Main API
from .colors import color_for, feature_color, hue_for, string_hash
from .config import LookupConfig

# Datasources
from .datasources import FeatureCollectionSource, FeatureSource, GeoJSONFileSource

# Exceptions
from .exceptions import (
    ConfigError,
    FeatureDataError,
    GeocodingError,
    InvalidQueryError,
    MuniWikiError,
)
from .geocoding import NominatimGeocoder
from .index import FeatureIndex, build_index, name_of
from .lookup import MunicipalityLookup

# Models (for type hints and result access)
from .models import BoundingRegion, ClickResult, SearchResult
from .resolver import municipality_from_address, resolve_title

# Spatial
from .spatial import feature_bounds, geometry_bounds, merge_bounds
from .titles import article_url, title_to_url

__all__ = [
    # Main API
    "MunicipalityLookup",
    "resolve_title",
    "municipality_from_address",
    "build_index",
    "name_of",
    "FeatureIndex",
    "title_to_url",
    "article_url",
    "color_for",
    "feature_color",
    "hue_for",
    "string_hash",
    "NominatimGeocoder",
    # Models
    "BoundingRegion",
    "SearchResult",
    "ClickResult",
    # Configuration
    "LookupConfig",
    # Exceptions
    "MuniWikiError",
    "InvalidQueryError",
    "GeocodingError",
    "FeatureDataError",
    "ConfigError",
    # Datasources
    "FeatureSource",
    "GeoJSONFileSource",
    "FeatureCollectionSource",
    # Spatial
    "geometry_bounds",
    "feature_bounds",
    "merge_bounds",
]

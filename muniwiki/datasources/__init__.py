"""
Feature data source layer for administrative boundaries.

Provides a Protocol-based interface for data sources plus file-backed and
in-memory implementations.
"""

from .geojson_file import FeatureCollectionSource, GeoJSONFileSource
from .protocol import FeatureSource

__all__ = [
    "FeatureSource",
    "GeoJSONFileSource",
    "FeatureCollectionSource",
]

"""
File-backed feature source (GeoJSON, Shapefile, GeoPackage) read with geopandas.
"""

import json
import logging
from pathlib import Path
from typing import Any

import geopandas as gpd

from ..exceptions import FeatureDataError

logger = logging.getLogger(__name__)

WGS84_EPSG = 4326


class GeoJSONFileSource:
    """
    Load administrative boundaries from a vector file.

    Anything GDAL can read works; GeoJSON is the usual input. Data in another
    CRS (e.g. JGD2011 plane coordinates) is reprojected to WGS84. Loading is
    lazy and happens once.

    Examples:
        >>> source = GeoJSONFileSource("data/N03-20240101.geojson")
        >>> features = source.load_features()
        >>> features[0]["properties"]["N03_004"]
        '札幌市'
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._gdf: gpd.GeoDataFrame | None = None

    def _ensure_loaded(self) -> None:
        if self._gdf is not None:
            return
        if not self.path.exists():
            raise FeatureDataError(f"Feature data not found: {self.path}", path=str(self.path))

        try:
            gdf = gpd.read_file(self.path)
        except Exception as e:
            raise FeatureDataError(f"Failed to read feature data {self.path}: {e}", path=str(self.path)) from e

        if gdf.crs is not None and gdf.crs.to_epsg() != WGS84_EPSG:
            logger.info("Reprojecting %s from %s to EPSG:%d", self.path.name, gdf.crs, WGS84_EPSG)
            gdf = gdf.to_crs(epsg=WGS84_EPSG)

        logger.info("Loaded %d features from %s", len(gdf), self.path)
        self._gdf = gdf

    def load_features(self) -> list[dict[str, Any]]:
        """All features as GeoJSON dicts; null properties are dropped."""
        self._ensure_loaded()
        return list(self._gdf.iterfeatures(na="drop"))


class FeatureCollectionSource:
    """
    Feature source over an already-parsed GeoJSON FeatureCollection dict.

    Used when the collection arrives from somewhere other than disk (an HTTP
    response, a test fixture).
    """

    def __init__(self, collection: dict[str, Any]):
        if not isinstance(collection, dict) or collection.get("type") != "FeatureCollection":
            kind = collection.get("type") if isinstance(collection, dict) else type(collection).__name__
            raise FeatureDataError(f"Expected a FeatureCollection, got {kind!r}")
        self.collection = collection

    @classmethod
    def from_json(cls, text: str) -> "FeatureCollectionSource":
        try:
            return cls(json.loads(text))
        except json.JSONDecodeError as e:
            raise FeatureDataError(f"Invalid GeoJSON: {e}") from e

    def load_features(self) -> list[dict[str, Any]]:
        return list(self.collection.get("features") or [])

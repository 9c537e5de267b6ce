"""
Geometry helpers for bounding regions.

All inputs are GeoJSON geometry dicts in WGS84 (EPSG:4326).
Shapely is used internally to parse and measure geometries.
"""

from collections.abc import Iterable
from typing import Any

from shapely.errors import ShapelyError
from shapely.geometry import shape

from .models import BoundingRegion


def geometry_bounds(geometry: dict[str, Any] | None) -> BoundingRegion | None:
    """
    Bounding region of a GeoJSON geometry.

    Returns None for a missing or empty geometry.

    Raises:
        ValueError: If the geometry cannot be parsed (unknown type, bad coordinates).
    """
    if not geometry:
        return None
    try:
        geom = shape(geometry)
    except (ShapelyError, KeyError, TypeError, AttributeError, IndexError) as e:
        raise ValueError(f"Unreadable geometry: {e}") from e
    if geom.is_empty:
        return None
    return BoundingRegion.from_bounds(geom.bounds)


def feature_bounds(feature: dict[str, Any]) -> BoundingRegion | None:
    """Bounding region of a GeoJSON feature's geometry."""
    return geometry_bounds(feature.get("geometry"))


def merge_bounds(regions: Iterable[BoundingRegion | None]) -> BoundingRegion | None:
    """Union of several regions, skipping None. Returns None if nothing remains."""
    merged = None
    for region in regions:
        if region is None:
            continue
        merged = region if merged is None else merged.union(region)
    return merged

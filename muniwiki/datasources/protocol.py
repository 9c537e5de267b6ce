"""
Protocol definition for feature data sources.

Any class implementing this Protocol can feed a FeatureIndex,
without needing to inherit from a base class (structural typing).
"""

from typing import Any, Protocol


class FeatureSource(Protocol):
    """
    Protocol for administrative-boundary data sources.

    Implementations return the whole collection at once, as standard GeoJSON
    Feature objects (dicts) in WGS84 (EPSG:4326).

    Example of returned feature:
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[141.3, 43.0], ...]]},
            "properties": {
                "N03_001": "北海道",
                "N03_003": "札幌市",
                "N03_004": "中央区",
                ...
            }
        }
    """

    def load_features(self) -> list[dict[str, Any]]:
        """
        Load every feature of the source.

        Returns:
            List of GeoJSON Feature dicts, in source order.

        Raises:
            FeatureDataError: If the source cannot be read.
        """
        ...

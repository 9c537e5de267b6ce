"""
Pydantic models for bounding regions and search results.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .titles import DEFAULT_WIKI_HOST, title_to_url


class BoundingRegion(BaseModel):
    """
    Axis-aligned rectangle in WGS84 degrees.

    Attributes:
        min_lat: Southern edge
        min_lon: Western edge
        max_lat: Northern edge
        max_lon: Eastern edge
    """

    model_config = ConfigDict(frozen=True)

    min_lat: float = Field(ge=-90, le=90)
    min_lon: float = Field(ge=-180, le=180)
    max_lat: float = Field(ge=-90, le=90)
    max_lon: float = Field(ge=-180, le=180)

    @model_validator(mode="after")
    def check_order(self) -> "BoundingRegion":
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise ValueError(
                f"Inverted bounds: lat {self.min_lat}..{self.max_lat}, lon {self.min_lon}..{self.max_lon}"
            )
        return self

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> "BoundingRegion":
        """Build from a shapely-style ``(minx, miny, maxx, maxy)`` tuple (lon/lat order)."""
        minx, miny, maxx, maxy = bounds
        return cls(min_lat=miny, min_lon=minx, max_lat=maxy, max_lon=maxx)

    def union(self, other: "BoundingRegion") -> "BoundingRegion":
        """Smallest region covering both."""
        return BoundingRegion(
            min_lat=min(self.min_lat, other.min_lat),
            min_lon=min(self.min_lon, other.min_lon),
            max_lat=max(self.max_lat, other.max_lat),
            max_lon=max(self.max_lon, other.max_lon),
        )

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    @property
    def center(self) -> tuple[float, float]:
        """(lat, lon) midpoint."""
        return ((self.min_lat + self.max_lat) / 2, (self.min_lon + self.max_lon) / 2)

    def to_leaflet(self) -> list[list[float]]:
        """``[[south, west], [north, east]]`` as accepted by Leaflet's fitBounds."""
        return [[self.min_lat, self.min_lon], [self.max_lat, self.max_lon]]


class SearchResult(BaseModel):
    """
    Outcome of a successful feature search.

    Attributes:
        feature: The representative GeoJSON feature (first of its name bucket)
        bounds: Bounding region of that feature, for viewport fitting
        title: Display/article title
        matched_name: Index key that matched
        match_type: Whether the key matched exactly or by substring
    """

    model_config = ConfigDict(frozen=True)

    feature: dict[str, Any]
    bounds: BoundingRegion | None
    title: str
    matched_name: str
    match_type: Literal["exact", "substring"]
    wiki_host: str = DEFAULT_WIKI_HOST

    @property
    def url(self) -> str:
        return title_to_url(self.title, host=self.wiki_host)


class ClickResult(BaseModel):
    """
    Outcome of resolving a clicked map point.

    An empty ``title`` means no municipality could be identified; ``url`` then
    points at the encyclopedia home page.
    """

    lat: float
    lon: float
    title: str
    url: str
    address: dict[str, str] = Field(default_factory=dict)

    @property
    def resolved(self) -> bool:
        return bool(self.title)

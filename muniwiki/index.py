"""
Name index over a collection of administrative-boundary features.

The index maps each display name to every feature carrying it, in input
order, and tracks the bounding region of the whole collection so a map can
fit its initial viewport. Lookups try an exact name first and then fall back
to a case-insensitive substring scan, which recovers names typed without
their 市/区/町/村 suffix.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .address_kinds import NAME_KEYS
from .config import LookupConfig
from .exceptions import InvalidQueryError
from .models import BoundingRegion, SearchResult
from .spatial import feature_bounds, merge_bounds

logger = logging.getLogger(__name__)


def name_of(properties: Mapping[str, Any] | None, name_keys: tuple[str, ...] = NAME_KEYS) -> str | None:
    """
    Extract the display name from a feature's properties.

    Keys are checked in priority order; the first non-null, non-blank value
    wins. Returns None if no key yields a name.

    Examples:
        >>> name_of({"N03_001": "北海道", "N03_004": "札幌市"})
        '札幌市'
        >>> name_of({"N03_001": "北海道"}) is None
        True
    """
    if not isinstance(properties, Mapping):
        return None
    for key in name_keys:
        value = properties.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


class FeatureIndex:
    """
    Read-only name index plus the global bounding region of a feature collection.

    Build with :func:`build_index`; instances are never mutated afterwards.

    Examples:
        >>> index = build_index(features)
        >>> result = index.search("札幌")
        >>> result.title, result.bounds.to_leaflet()
    """

    def __init__(
        self,
        buckets: dict[str, tuple[dict[str, Any], ...]],
        bounds: BoundingRegion | None,
        feature_count: int,
        config: LookupConfig,
    ):
        self._buckets = MappingProxyType(buckets)
        self._bounds = bounds
        self._feature_count = feature_count
        self.config = config

    @property
    def name_index(self) -> Mapping[str, tuple[dict[str, Any], ...]]:
        """Name -> features, ordered by first occurrence of each name."""
        return self._buckets

    @property
    def bounds(self) -> BoundingRegion | None:
        """Bounding region of every readable geometry, None for an empty collection."""
        return self._bounds

    @property
    def feature_count(self) -> int:
        """Number of features seen during construction, named or not."""
        return self._feature_count

    @property
    def names(self) -> list[str]:
        return list(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, name: object) -> bool:
        return name in self._buckets

    def lookup(self, name: str) -> tuple[dict[str, Any], ...]:
        """All features registered under an exact name (empty tuple if none)."""
        return self._buckets.get(name, ())

    def search(self, query: str) -> SearchResult | None:
        """
        Find the feature for a typed place name.

        1. Exact match on an index key.
        2. Otherwise the first key, in index order, whose lowercase form
           contains the lowercase query. First match wins, not best match.

        Args:
            query: User-typed name. Surrounding whitespace is ignored.

        Returns:
            SearchResult for the first feature of the matching bucket,
            or None if no key matches.

        Raises:
            InvalidQueryError: If the query is empty or whitespace-only.

        Examples:
            >>> index.search("札幌市").match_type
            'exact'
            >>> index.search("札幌").matched_name
            '北海道札幌市中央区'
        """
        q = (query or "").strip()
        if not q:
            raise InvalidQueryError("Search query is empty", query=query or "")

        if q in self._buckets:
            logger.debug("Exact match for '%s'", q)
            return self._result(q, fallback_title=q, match_type="exact")

        needle = q.lower()
        for name in self._buckets:
            if needle in name.lower():
                logger.debug("Substring match for '%s': '%s'", q, name)
                return self._result(name, fallback_title=name, match_type="substring")

        logger.debug("No match for '%s'", q)
        return None

    def _result(self, name: str, fallback_title: str, match_type: str) -> SearchResult:
        feature = self._buckets[name][0]
        title = name_of(feature.get("properties"), self.config.name_keys) or fallback_title
        try:
            bounds = feature_bounds(feature)
        except ValueError:
            bounds = None
        return SearchResult(
            feature=feature,
            bounds=bounds,
            title=title,
            matched_name=name,
            match_type=match_type,
            wiki_host=self.config.wiki_host,
        )


def build_index(features: Iterable[dict[str, Any]], config: LookupConfig | None = None) -> FeatureIndex:
    """
    Build a :class:`FeatureIndex` in a single pass over the features.

    Named features are appended to their name's bucket in input order;
    duplicates are kept. Every feature with a readable geometry widens the
    global bounding region, named or not. Features with unreadable geometry
    are logged and left out of the bounds.

    Args:
        features: GeoJSON Feature dicts, e.g. ``collection["features"]``.
        config: Lookup settings; defaults to ``LookupConfig()``.

    Returns:
        The populated index.

    Raises:
        TypeError: If ``features`` is None.
    """
    if features is None:
        raise TypeError("build_index() requires a feature collection, got None")
    config = config or LookupConfig()

    buckets: dict[str, list[dict[str, Any]]] = {}
    bounds: BoundingRegion | None = None
    count = 0
    skipped = 0

    for position, feature in enumerate(features):
        count += 1
        if not isinstance(feature, Mapping):
            logger.warning("Skipping feature #%d: expected a mapping, got %s", position, type(feature).__name__)
            skipped += 1
            continue

        properties = feature.get("properties")
        if properties is not None and not isinstance(properties, Mapping):
            logger.warning(
                "Feature #%d has %s properties, indexing it as unnamed", position, type(properties).__name__
            )
            skipped += 1
        name = name_of(properties, config.name_keys)
        if name is not None:
            buckets.setdefault(name, []).append(feature)

        try:
            region = feature_bounds(feature)
        except ValueError as e:
            logger.warning("Skipping geometry of feature #%d (%s): %s", position, name or "unnamed", e)
            skipped += 1
            continue
        bounds = merge_bounds((bounds, region))

    logger.info(
        "Indexed %d features under %d names (%d skipped)",
        count,
        len(buckets),
        skipped,
    )
    return FeatureIndex(
        buckets={name: tuple(items) for name, items in buckets.items()},
        bounds=bounds,
        feature_count=count,
        config=config,
    )

"""
Reverse-geocode resolver: pick the municipality name out of an address.
"""

from collections.abc import Mapping

from .address_kinds import PRIMARY_KINDS, REGION_KIND, SECONDARY_KINDS


def _first_present(addr: Mapping[str, str], kinds: tuple[str, ...]) -> str:
    for kind in kinds:
        value = addr.get(kind)
        if value:
            return value
    return ""


def municipality_from_address(addr: Mapping[str, str] | None) -> str:
    """
    Return the most specific municipality name in an address.

    Scans ``PRIMARY_KINDS`` then ``SECONDARY_KINDS``; empty values count as
    absent. Returns ``""`` when nothing matches.
    """
    if not addr:
        return ""
    return _first_present(addr, PRIMARY_KINDS) or _first_present(addr, SECONDARY_KINDS)


def resolve_title(addr: Mapping[str, str] | None) -> str:
    """
    Resolve an address to the title of its Wikipedia article.

    Falls back to the prefecture (``state``) when no municipality is present.
    Never raises: an empty string means the point could not be resolved.

    Args:
        addr: Nominatim ``address`` mapping (component kind -> name).

    Returns:
        The title, or ``""`` if unresolved.

    Examples:
        >>> resolve_title({"ward": "渋谷区", "city": "Tokyo", "state": "東京都"})
        '渋谷区'
        >>> resolve_title({"state": "北海道"})
        '北海道'
    """
    title = municipality_from_address(addr)
    if not title and addr:
        title = addr.get(REGION_KIND) or ""
    return title

"""
Stable display colours for features.

Colours come from a string hash of a grouping property (the prefecture),
so every municipality of the same prefecture shares a hue across sessions
and across the browser and Python renditions of the map.
"""

from collections.abc import Mapping
from typing import Any

from .config import LookupConfig

_INT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _code_units(text: str):
    # JavaScript strings hash per UTF-16 code unit, so astral characters
    # contribute their surrogate pair.
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_hash(text: str) -> int:
    """
    Polynomial rolling hash, ``h = h * 31 + code_unit``, as a signed 32-bit int.

    Overflow wraps after every step exactly like ``(h << 5) - h + c | 0`` in
    JavaScript.
    """
    h = 0
    for unit in _code_units(text):
        h = _to_int32((h << 5) - h + unit)
    return h


def hue_for(key: str) -> int:
    """Hue in ``[0, 360)`` for a group key."""
    return abs(string_hash(key)) % 360


def color_for(key: str, saturation: int = 65, lightness: int = 55) -> str:
    """
    CSS HSL colour for a group key.

    Examples:
        >>> color_for("北海道") == color_for("北海道")
        True
    """
    return f"hsl({hue_for(key)}, {saturation}%, {lightness}%)"


def feature_color(feature: dict[str, Any], config: LookupConfig | None = None) -> str:
    """Colour of a GeoJSON feature, keyed on its group property."""
    config = config or LookupConfig()
    properties = feature.get("properties")
    if not isinstance(properties, Mapping):
        properties = {}
    key = properties.get(config.group_key)
    if key is None or key == "":
        key = config.group_default
    return color_for(str(key), config.saturation, config.lightness)

"""
Address component kinds and property-key vocabularies.

Nominatim returns an ``address`` object whose keys name the kind of each
component (``ward``, ``city``, ``state``, ...). Japanese municipalities show
up under different kinds depending on the city: special wards of Tokyo come
back as ``ward`` or ``city_district``, wards of designated cities as
``city_district`` or ``borough``, and towns/villages as ``town``/``village``.
The orderings below encode "most specific wins".

Boundary datasets have the same problem with their property names: the MLIT
N03 administrative-area data stores the municipality under ``N03_004`` while
hand-made GeoJSON usually carries ``name``.
"""

# Municipality-level kinds, most specific first
PRIMARY_KINDS: tuple[str, ...] = (
    "city_district",  # wards of designated cities
    "borough",
    "ward",  # Tokyo special wards
    "city",
    "town",
    "village",
)

# Looser kinds tried when none of the primary ones is present.
# town/city repeat PRIMARY_KINDS and never match here.
SECONDARY_KINDS: tuple[str, ...] = (
    "county",
    "suburb",
    "municipality",
    "town",
    "city",
)

# Prefecture-level fallback
REGION_KIND = "state"

# Feature property keys holding the display name, in priority order
NAME_KEYS: tuple[str, ...] = (
    "name",
    "N03_004",  # MLIT N03: municipality
    "nam_ja",  # GSI global map
    "NAME",
)

# Property used to group features for colouring (prefecture in N03 data)
GROUP_KEY = "N03_001"
GROUP_DEFAULT = "unknown"

"""
Tests for the feature name index and search.
"""

import logging

import pytest

from muniwiki.config import LookupConfig
from muniwiki.exceptions import InvalidQueryError
from muniwiki.index import build_index, name_of
from muniwiki.models import BoundingRegion


def box(min_lon, min_lat, max_lon, max_lat):
    """GeoJSON polygon for a lon/lat rectangle."""
    return {
        "type": "Polygon",
        "coordinates": [
            [[min_lon, min_lat], [max_lon, min_lat], [max_lon, max_lat], [min_lon, max_lat], [min_lon, min_lat]]
        ],
    }


def feature(properties, geometry):
    return {"type": "Feature", "properties": properties, "geometry": geometry}


G1 = box(141.2, 43.0, 141.4, 43.1)
G2 = box(141.4, 43.1, 141.5, 43.2)


@pytest.fixture
def features():
    """Mixed-schema sample features."""
    return [
        feature({"name": "札幌市", "N03_001": "北海道"}, G1),
        feature({"name": "札幌市", "N03_001": "北海道"}, G2),
        feature({"N03_001": "北海道", "N03_004": "函館市"}, box(140.6, 41.7, 140.9, 41.9)),
        feature({"N03_001": "沖縄県"}, box(127.6, 26.1, 127.8, 26.3)),
        feature({"nam_ja": "Shibuya City", "NAME": "ignored"}, box(139.66, 35.64, 139.72, 35.69)),
    ]


@pytest.fixture
def index(features):
    """Index built from the sample features."""
    return build_index(features)


def test_name_of_priority():
    """Test that name keys are checked in priority order."""
    assert name_of({"name": "A", "N03_004": "B"}) == "A"
    assert name_of({"N03_004": "B", "nam_ja": "C"}) == "B"
    assert name_of({"nam_ja": "C", "NAME": "D"}) == "C"
    assert name_of({"NAME": "D"}) == "D"


def test_name_of_skips_null_and_blank():
    """Test that null and blank values fall through to the next key."""
    assert name_of({"name": None, "N03_004": "函館市"}) == "函館市"
    assert name_of({"name": "  ", "NAME": "Naha"}) == "Naha"
    assert name_of({"N03_001": "北海道"}) is None
    assert name_of({}) is None
    assert name_of(None) is None


def test_name_of_custom_keys():
    """Test extraction with caller-supplied keys."""
    assert name_of({"city": "那覇市", "name": "x"}, name_keys=("city", "name")) == "那覇市"


def test_buckets_keep_duplicates_in_order(index, features):
    """Test that duplicate names share a bucket in input order."""
    bucket = index.lookup("札幌市")
    assert len(bucket) == 2
    assert bucket[0]["geometry"] == G1
    assert bucket[1]["geometry"] == G2


def test_unnamed_features_excluded(index, features):
    """Test that K named of N features give K indexed entries."""
    total = sum(len(bucket) for bucket in index.name_index.values())
    named = sum(1 for f in features if name_of(f["properties"]) is not None)
    assert named == 4
    assert total == named
    assert index.feature_count == 5
    assert index.names == ["札幌市", "函館市", "Shibuya City"]


def test_unnamed_features_in_global_bounds(index):
    """Test that the unnamed Okinawa polygon still widens the bounds."""
    assert index.bounds == BoundingRegion(min_lat=26.1, min_lon=127.6, max_lat=43.2, max_lon=141.5)


def test_no_names_still_bounded():
    """Test an index where nothing has a name."""
    index = build_index([feature({"code": "47201"}, box(127.6, 26.1, 127.8, 26.3))])
    assert len(index) == 0
    assert index.bounds == BoundingRegion(min_lat=26.1, min_lon=127.6, max_lat=26.3, max_lon=127.8)


def test_empty_collection():
    """Test that an empty collection has no bounds."""
    index = build_index([])
    assert len(index) == 0
    assert index.bounds is None
    assert index.search("札幌") is None


def test_none_collection_rejected():
    """Test that None is a precondition violation."""
    with pytest.raises(TypeError):
        build_index(None)


def test_index_is_read_only(index):
    """Test that the name index cannot be modified."""
    with pytest.raises(TypeError):
        index.name_index["新しい市"] = ()
    assert isinstance(index.lookup("札幌市"), tuple)


def test_malformed_features_skipped(caplog):
    """Test that broken entries are logged and skipped without failing."""
    features = [
        "not a feature",
        feature({"name": "壊れた町"}, {"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]}),
        feature({"name": "那覇市"}, box(127.6, 26.1, 127.8, 26.3)),
        feature({"name": "座標なし"}, None),
    ]
    with caplog.at_level(logging.WARNING, logger="muniwiki.index"):
        index = build_index(features)

    assert "壊れた町" in index
    assert "座標なし" in index
    assert index.feature_count == 4
    assert index.bounds == BoundingRegion(min_lat=26.1, min_lon=127.6, max_lat=26.3, max_lon=127.8)
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


@pytest.mark.parametrize("properties", ["札幌市", ["name", "x"], 42])
def test_non_mapping_properties_indexed_as_unnamed(caplog, properties):
    """Test that features with non-mapping properties don't abort the build."""
    features = [
        feature(properties, box(141.2, 43.0, 141.4, 43.1)),
        feature({"name": "那覇市"}, box(127.6, 26.1, 127.8, 26.3)),
    ]
    with caplog.at_level(logging.WARNING, logger="muniwiki.index"):
        index = build_index(features)

    assert index.names == ["那覇市"]
    assert index.feature_count == 2
    assert index.bounds == BoundingRegion(min_lat=26.1, min_lon=127.6, max_lat=43.1, max_lon=141.4)
    assert any("indexing it as unnamed" in r.getMessage() for r in caplog.records)
    assert name_of(properties) is None


def test_search_exact_returns_first(index):
    """Test that exact search returns the first feature of the bucket."""
    result = index.search("札幌市")
    assert result is not None
    assert result.match_type == "exact"
    assert result.feature["geometry"] == G1
    assert result.title == "札幌市"
    assert result.bounds == BoundingRegion(min_lat=43.0, min_lon=141.2, max_lat=43.1, max_lon=141.4)


def test_search_strips_query(index):
    """Test that surrounding whitespace is ignored."""
    assert index.search("  函館市\n").matched_name == "函館市"


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_search_blank_is_invalid(index, query):
    """Test that blank queries are invalid input, not a miss."""
    with pytest.raises(InvalidQueryError):
        index.search(query)


def test_search_substring_fallback(index):
    """Test that a name without its suffix is found by substring."""
    result = index.search("函館")
    assert result.match_type == "substring"
    assert result.matched_name == "函館市"
    assert result.title == "函館市"


def test_search_substring_case_insensitive(index):
    """Test that substring matching ignores case."""
    result = index.search("shibuya")
    assert result.matched_name == "Shibuya City"
    # title comes from the properties, not the query
    assert result.title == "Shibuya City"


def test_search_substring_first_in_index_order():
    """Test that ties go to the earliest-inserted name, not the alphabetically first."""
    index = build_index(
        [
            feature({"name": "中央区 (札幌市)"}, G1),
            feature({"name": "中央区 (大阪市)"}, G2),
            feature({"name": "中央区 (札幌市)"}, G2),
        ]
    )
    assert index.names == ["中央区 (札幌市)", "中央区 (大阪市)"]
    assert index.search("中央").matched_name == "中央区 (札幌市)"
    assert index.search("大阪").matched_name == "中央区 (大阪市)"


def test_search_not_found(index):
    """Test that an unknown name is a miss."""
    assert index.search("アトランティス") is None


def test_search_result_url(index):
    """Test the article URL on a search result."""
    assert index.search("札幌市").url == "https://ja.wikipedia.org/wiki/%E6%9C%AD%E5%B9%8C%E5%B8%82"


def test_end_to_end_sapporo_duplicates():
    """Test two features sharing a name: the first wins."""
    index = build_index([feature({"name": "札幌市"}, G1), feature({"name": "札幌市"}, G2)])
    assert len(index.lookup("札幌市")) == 2
    assert index.lookup("札幌市")[0]["geometry"] == G1
    assert index.search("札幌市").feature["geometry"] == G1


def test_end_to_end_substring_ward():
    """Test finding a fully qualified ward name from a short query."""
    ward = feature({"name": "北海道札幌市中央区"}, box(141.30, 43.03, 141.36, 43.07))
    index = build_index([feature({"name": "函館市"}, G2), ward])
    result = index.search("札幌")
    assert result.feature == ward
    assert result.match_type == "substring"


def test_config_name_keys_and_host():
    """Test an index built with custom name keys and wiki host."""
    config = LookupConfig(name_keys=("city",), wiki_host="en.wikipedia.org")
    index = build_index([feature({"city": "Sapporo", "name": "札幌市"}, G1)], config)
    assert index.names == ["Sapporo"]
    assert index.search("sapporo").url == "https://en.wikipedia.org/wiki/Sapporo"

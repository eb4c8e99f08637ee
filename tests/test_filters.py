from realestate_calc.data.filters import (
    DEFAULT_FILTERS,
    ListingFilters,
    active_filter_labels,
    apply_filters,
    bedroom_count,
    serialize_filters,
)


def test_no_filters_returns_everything_in_order(sample_properties):
    result = apply_filters(sample_properties, DEFAULT_FILTERS)
    assert list(result) == sample_properties
    assert isinstance(result, tuple)


def test_bedroom_filter(sample_properties):
    result = apply_filters(sample_properties, ListingFilters(bedrooms="3"))
    assert [p.price for p in result] == [450_000, 600_000, 320_000]
    assert all(p.beds == 3 for p in result)


def test_zip_filter_is_exact(sample_properties):
    assert [p.price for p in apply_filters(sample_properties, ListingFilters(zip_code="98102"))] == [250_000, 320_000]
    assert apply_filters(sample_properties, ListingFilters(zip_code="9810")) == ()


def test_filters_combine_with_and(sample_properties):
    result = apply_filters(sample_properties, ListingFilters(bedrooms="3", zip_code="98102"))
    assert [p.price for p in result] == [320_000]


def test_unparsable_bedroom_filter_is_inactive(sample_properties):
    result = apply_filters(sample_properties, ListingFilters(bedrooms="abc"))
    assert list(result) == sample_properties
    assert bedroom_count(ListingFilters(bedrooms="abc")) is None


def test_bedroom_filter_uses_leading_integer():
    assert bedroom_count(ListingFilters(bedrooms="3.5")) == 3
    assert bedroom_count(ListingFilters(bedrooms="")) is None


def test_source_collection_untouched(sample_properties):
    before = list(sample_properties)
    apply_filters(sample_properties, ListingFilters(bedrooms="4"))
    assert sample_properties == before


def test_empty_collection():
    assert apply_filters([], ListingFilters(bedrooms="2", zip_code="98101")) == ()


def test_active_filter_labels():
    assert active_filter_labels(DEFAULT_FILTERS) == []
    assert active_filter_labels(ListingFilters(bedrooms="2", zip_code="98101")) == ["Bedrooms: 2", "ZIP: 98101"]
    assert active_filter_labels(ListingFilters(bedrooms="x")) == []


def test_serialize_filters():
    assert serialize_filters(ListingFilters(bedrooms="x", zip_code="98101")) == {
        "bedrooms": "x",
        "zip_code": "98101",
        "bedrooms_active": False,
    }

"""Тесты дефолтов пагинации."""

from postmark_client.core.pagination import (
    DEFAULT_PAGINATION_COUNT,
    DEFAULT_PAGINATION_OFFSET,
    apply_default_pagination,
)
from postmark_client.models import BounceFilteringParameters, StatisticsFilteringParameters


def test_defaults_filled_on_empty_model():
    f = apply_default_pagination(BounceFilteringParameters())
    assert f.count == DEFAULT_PAGINATION_COUNT == 100
    assert f.offset == DEFAULT_PAGINATION_OFFSET == 0


def test_only_missing_values_filled():
    f = apply_default_pagination(BounceFilteringParameters(count=10))
    assert f.count == 10
    assert f.offset == 0


def test_explicit_zero_kept():
    f = apply_default_pagination(BounceFilteringParameters(count=0, offset=5))
    assert f.count == 0
    assert f.offset == 5


def test_other_fields_untouched():
    f = apply_default_pagination(BounceFilteringParameters(tag="welcome"))
    assert f.tag == "welcome"


def test_mapping_filter():
    assert apply_default_pagination({"offset": 20}) == {"count": 100, "offset": 20}


def test_mapping_none_values_filled():
    assert apply_default_pagination({"count": None}) == {"count": 100, "offset": 0}


def test_returns_same_object():
    f = BounceFilteringParameters()
    assert apply_default_pagination(f) is f


def test_filter_without_paging_fields_passes_through():
    f = StatisticsFilteringParameters(tag="x")
    apply_default_pagination(f)
    assert f.to_query() == {"tag": "x"}

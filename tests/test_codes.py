"""Tests for wire-code enums: round trips and rejection of unknown codes."""
import pytest

from core.errors import InvalidCodeError
from models.locale import Language, Region
from models.status import Status
from models.travel import Avoid, TrafficModel, TransitMode, TransitRoutePreference, TravelMode, UnitSystem
from places.field import Field
from places.sort_order import SortOrder

ALL_CODE_TYPES = [
    TravelMode, Avoid, TrafficModel, TransitMode, TransitRoutePreference,
    UnitSystem, Language, Region, Status, Field, SortOrder,
]


@pytest.mark.parametrize("code_type", ALL_CODE_TYPES, ids=lambda t: t.__name__)
def test_every_variant_round_trips(code_type):
    for variant in code_type:
        assert code_type.from_code(variant.code) is variant


@pytest.mark.parametrize("code_type", ALL_CODE_TYPES, ids=lambda t: t.__name__)
def test_unknown_code_is_rejected(code_type):
    with pytest.raises(InvalidCodeError) as exc_info:
        code_type.from_code("not-a-real-code")
    assert exc_info.value.code == "not-a-real-code"
    assert exc_info.value.type_name == code_type.__name__
    assert "not-a-real-code" in str(exc_info.value)


def test_codes_are_case_sensitive():
    with pytest.raises(InvalidCodeError):
        TravelMode.from_code("DRIVING")
    with pytest.raises(InvalidCodeError):
        Status.from_code("ok")


def test_invalid_code_error_is_a_value_error():
    with pytest.raises(ValueError):
        SortOrder.from_code("oldest")


def test_str_is_the_wire_code():
    assert str(TravelMode.TRANSIT) == "transit"
    assert f"{Avoid.TOLLS}" == "tolls"
    assert str(Language.CHINESE_TRADITIONAL) == "zh-TW"
    assert str(Region.UNITED_KINGDOM) == "uk"


def test_codes_lists_every_variant_in_order():
    assert TransitRoutePreference.codes() == ["less_walking", "fewer_transfers"]
    assert UnitSystem.codes() == ["imperial", "metric"]


def test_sort_order_label():
    assert SortOrder.MOST_RELEVANT.label == "Most Relevant"
    assert SortOrder.NEWEST.label == "Newest"


def test_status_success():
    assert Status.OK.is_success
    assert Status.ZERO_RESULTS.is_success
    assert not Status.REQUEST_DENIED.is_success
    assert not Status.OVER_QUERY_LIMIT.is_success

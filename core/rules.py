"""Validation rules, one function per incompatibility.

Each rule inspects which structured parameters are present (and, for the
travel mode, which variant) and returns an error instance, or None when the
request is compliant. Families list the rules that apply to them in their
``rules`` table. Opaque strings such as addresses, place IDs and polylines
are never inspected.
"""
from typing import Optional

from core.errors import (
    ArrivalTimeIsForTransitOnlyError,
    EitherDepartureTimeOrArrivalTimeError,
    EmptyPathError,
    ReviewsFieldNotRequestedError,
    TrafficModelRequiresDepartureTimeError,
    TransitModeIsForTransitOnlyError,
    TransitRoutePreferenceIsForTransitOnlyError,
    ValidationError,
)
from core.request_core import RequestCore
from models.timing import format_moment
from models.travel import TravelMode


def _non_transit_mode(request: RequestCore) -> Optional[TravelMode]:
    """The configured travel mode if it is set and is not transit."""
    travel_mode = request.get("TRAVEL_MODE")
    if travel_mode is not None and travel_mode != TravelMode.TRANSIT:
        return travel_mode
    return None


def arrival_time_requires_transit(request: RequestCore) -> Optional[ValidationError]:
    travel_mode = _non_transit_mode(request)
    arrival_time = request.get("ARRIVAL_TIME")
    if travel_mode is not None and arrival_time is not None:
        return ArrivalTimeIsForTransitOnlyError(travel_mode.code, format_moment(arrival_time))
    return None


def transit_modes_require_transit(request: RequestCore) -> Optional[ValidationError]:
    travel_mode = _non_transit_mode(request)
    transit_modes = request.get("TRANSIT_MODES")
    if travel_mode is not None and transit_modes:
        return TransitModeIsForTransitOnlyError(
            travel_mode.code, "|".join(mode.code for mode in transit_modes)
        )
    return None


def transit_route_preference_requires_transit(request: RequestCore) -> Optional[ValidationError]:
    travel_mode = _non_transit_mode(request)
    preference = request.get("TRANSIT_ROUTE_PREFERENCE")
    if travel_mode is not None and preference is not None:
        return TransitRoutePreferenceIsForTransitOnlyError(travel_mode.code, preference.code)
    return None


def single_time_anchor(request: RequestCore) -> Optional[ValidationError]:
    arrival_time = request.get("ARRIVAL_TIME")
    departure_time = request.get("DEPARTURE_TIME")
    if arrival_time is not None and departure_time is not None:
        return EitherDepartureTimeOrArrivalTimeError(format_moment(arrival_time), str(departure_time))
    return None


def traffic_model_requires_departure_time(request: RequestCore) -> Optional[ValidationError]:
    traffic_model = request.get("TRAFFIC_MODEL")
    if traffic_model is not None and request.get("DEPARTURE_TIME") is None:
        return TrafficModelRequiresDepartureTimeError(traffic_model.code)
    return None


ROUTING_RULES = (
    arrival_time_requires_transit,
    transit_modes_require_transit,
    transit_route_preference_requires_transit,
    single_time_anchor,
    traffic_model_requires_departure_time,
)
"""Rules shared by Directions and Distance Matrix, checked in this order."""


def reviews_options_require_reviews_field(request: RequestCore) -> Optional[ValidationError]:
    fields = request.get("FIELDS")
    # No field list means every field, reviews included
    if not fields or any(field.code == "reviews" for field in fields):
        return None
    joined = ",".join(field.code for field in fields)
    if request.get("REVIEWS_SORT") is not None:
        return ReviewsFieldNotRequestedError("reviews_sort", joined)
    if request.get("REVIEWS_NO_TRANSLATIONS") is not None:
        return ReviewsFieldNotRequestedError("reviews_no_translations", joined)
    return None


def path_must_not_be_empty(request: RequestCore) -> Optional[ValidationError]:
    if not request.path:
        return EmptyPathError()
    return None

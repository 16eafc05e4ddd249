from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.params import parse_departure_time, parse_waypoint, preview_or_send
from directions.request import DirectionsRequest
from models.locale import Language, Region
from models.location import parse_location
from models.travel import Avoid, TrafficModel, TransitMode, TransitRoutePreference, TravelMode, UnitSystem
from providers.base import BaseMapsProvider
from providers.factory import get_provider

router = APIRouter(prefix="/directions", tags=["directions"])


@router.get("")
async def get_directions(
    origin: str,
    destination: str,
    mode: Optional[str] = None,
    alternatives: Optional[bool] = None,
    arrival_time: Optional[datetime] = None,
    departure_time: Optional[str] = None,
    language: Optional[str] = None,
    region: Optional[str] = None,
    avoid: list[str] = Query(default=[]),
    traffic_model: Optional[str] = None,
    transit_mode: list[str] = Query(default=[]),
    transit_routing_preference: Optional[str] = None,
    units: Optional[str] = None,
    waypoints: list[str] = Query(default=[]),
    optimize_waypoints: Optional[bool] = None,
    preview: bool = False,
    provider: BaseMapsProvider = Depends(get_provider),
):
    request = DirectionsRequest(parse_location(origin), parse_location(destination))
    if mode is not None:
        request.with_travel_mode(TravelMode.from_code(mode))
    if alternatives is not None:
        request.with_alternatives(alternatives)
    if arrival_time is not None:
        request.with_arrival_time(arrival_time)
    if departure_time is not None:
        request.with_departure_time(parse_departure_time(departure_time))
    if language is not None:
        request.with_language(Language.from_code(language))
    if region is not None:
        request.with_region(Region.from_code(region))
    request.with_restrictions(Avoid.from_code(code) for code in avoid)
    if traffic_model is not None:
        request.with_traffic_model(TrafficModel.from_code(traffic_model))
    request.with_transit_modes(TransitMode.from_code(code) for code in transit_mode)
    if transit_routing_preference is not None:
        request.with_transit_route_preference(TransitRoutePreference.from_code(transit_routing_preference))
    if units is not None:
        request.with_unit_system(UnitSystem.from_code(units))
    request.with_waypoints(parse_waypoint(text) for text in waypoints)
    if optimize_waypoints is not None:
        request.with_waypoint_optimization(optimize_waypoints)

    return await preview_or_send(request, provider, preview)

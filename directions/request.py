"""Directions API request builder.

Build a request from the two required locations, chain ``with_*`` calls for
anything optional, then validate and send::

    request = (
        DirectionsRequest(Address("New York"), Address("Boston"))
        .with_travel_mode(TravelMode.TRANSIT)
        .with_arrival_time(datetime(2024, 1, 1, 9, 0))
    )
    response = await request.execute(get_provider())

Restrictions, transit modes and waypoints append on repeated calls. Every
other kind replaces the value set before.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Iterable

from core.request_core import (
    QueryParam,
    RequestCore,
    pipe_joined,
    render_bool,
    render_code,
    render_wire,
)
from core.rules import ROUTING_RULES
from directions.response import DirectionsResponse
from models.locale import Language, Region
from models.location import Location, Waypoint
from models.timing import DepartureTime, render_timestamp
from models.travel import Avoid, TrafficModel, TransitMode, TransitRoutePreference, TravelMode, UnitSystem


class DirectionsParam(Enum):
    ALTERNATIVES = QueryParam("alternatives", render_bool)
    ARRIVAL_TIME = QueryParam("arrival_time", render_timestamp)
    DEPARTURE_TIME = QueryParam("departure_time", render_wire)
    LANGUAGE = QueryParam("language", render_code)
    REGION = QueryParam("region", render_code)
    RESTRICTIONS = QueryParam("avoid", pipe_joined(render_code), sequence=True)
    TRAFFIC_MODEL = QueryParam("traffic_model", render_code)
    TRANSIT_MODES = QueryParam("transit_mode", pipe_joined(render_code), sequence=True)
    TRANSIT_ROUTE_PREFERENCE = QueryParam("transit_routing_preference", render_code)
    TRAVEL_MODE = QueryParam("mode", render_code)
    UNIT_SYSTEM = QueryParam("units", render_code)
    # Sent as the "optimize:true" prefix of the waypoints parameter
    WAYPOINT_OPTIMIZATION = QueryParam(None, render_bool)
    WAYPOINTS = QueryParam("waypoints", pipe_joined(render_wire), sequence=True)


class DirectionsRequest(RequestCore):
    family = "directions"
    endpoint = "directions/json"
    params = DirectionsParam
    rules = ROUTING_RULES
    response_model = DirectionsResponse

    def __init__(self, origin: Location, destination: Location):
        super().__init__()
        self._origin = origin
        self._destination = destination

    @property
    def origin(self) -> Location:
        return self._origin

    @property
    def destination(self) -> Location:
        return self._destination

    def _required_pairs(self) -> list[tuple[str, str]]:
        return [
            ("destination", self._destination.to_wire()),
            ("origin", self._origin.to_wire()),
        ]

    def _render(self, kind: Enum, value: Any) -> str:
        rendered = super()._render(kind, value)
        if kind is DirectionsParam.WAYPOINTS and self.get(DirectionsParam.WAYPOINT_OPTIMIZATION):
            return f"optimize:true|{rendered}"
        return rendered

    def with_alternatives(self, alternatives: bool) -> "DirectionsRequest":
        """Allow the service to return more than one route. Single-leg routes only."""
        return self._set(DirectionsParam.ALTERNATIVES, alternatives)

    def with_arrival_time(self, arrival_time: datetime) -> "DirectionsRequest":
        """Desired arrival time. Transit directions only."""
        return self._set(DirectionsParam.ARRIVAL_TIME, arrival_time)

    def with_departure_time(self, departure_time: DepartureTime) -> "DirectionsRequest":
        return self._set(DirectionsParam.DEPARTURE_TIME, departure_time)

    def with_language(self, language: Language) -> "DirectionsRequest":
        return self._set(DirectionsParam.LANGUAGE, language)

    def with_region(self, region: Region) -> "DirectionsRequest":
        return self._set(DirectionsParam.REGION, region)

    def with_restriction(self, restriction: Avoid) -> "DirectionsRequest":
        return self._extend(DirectionsParam.RESTRICTIONS, [restriction])

    def with_restrictions(self, restrictions: Iterable[Avoid]) -> "DirectionsRequest":
        return self._extend(DirectionsParam.RESTRICTIONS, restrictions)

    def with_traffic_model(self, traffic_model: TrafficModel) -> "DirectionsRequest":
        """Traffic assumptions for ``duration_in_traffic``. Needs a departure time."""
        return self._set(DirectionsParam.TRAFFIC_MODEL, traffic_model)

    def with_transit_mode(self, transit_mode: TransitMode) -> "DirectionsRequest":
        return self._extend(DirectionsParam.TRANSIT_MODES, [transit_mode])

    def with_transit_modes(self, transit_modes: Iterable[TransitMode]) -> "DirectionsRequest":
        return self._extend(DirectionsParam.TRANSIT_MODES, transit_modes)

    def with_transit_route_preference(self, preference: TransitRoutePreference) -> "DirectionsRequest":
        return self._set(DirectionsParam.TRANSIT_ROUTE_PREFERENCE, preference)

    def with_travel_mode(self, travel_mode: TravelMode) -> "DirectionsRequest":
        return self._set(DirectionsParam.TRAVEL_MODE, travel_mode)

    def with_unit_system(self, unit_system: UnitSystem) -> "DirectionsRequest":
        return self._set(DirectionsParam.UNIT_SYSTEM, unit_system)

    def with_waypoint_optimization(self, optimize: bool) -> "DirectionsRequest":
        """Let the service reorder the waypoints into the most efficient route."""
        return self._set(DirectionsParam.WAYPOINT_OPTIMIZATION, optimize)

    def with_waypoint(self, waypoint: Waypoint) -> "DirectionsRequest":
        return self._extend(DirectionsParam.WAYPOINTS, [waypoint])

    def with_waypoints(self, waypoints: Iterable[Waypoint]) -> "DirectionsRequest":
        return self._extend(DirectionsParam.WAYPOINTS, waypoints)

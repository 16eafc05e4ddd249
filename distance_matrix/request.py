"""Distance Matrix API request builder.

Same shape as the Directions builder, with lists of origins and destinations
in place of a single pair and no waypoints or alternatives. The transit and
time-anchor rules are the same.
"""
from datetime import datetime
from enum import Enum
from typing import Iterable

from core.request_core import QueryParam, RequestCore, pipe_joined, render_code, render_wire
from core.rules import ROUTING_RULES
from distance_matrix.response import DistanceMatrixResponse
from models.locale import Language, Region
from models.location import MatrixLocation
from models.timing import DepartureTime, render_timestamp
from models.travel import Avoid, TrafficModel, TransitMode, TransitRoutePreference, TravelMode, UnitSystem


class DistanceMatrixParam(Enum):
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


_render_locations = pipe_joined(render_wire)


class DistanceMatrixRequest(RequestCore):
    family = "distance_matrix"
    endpoint = "distancematrix/json"
    params = DistanceMatrixParam
    rules = ROUTING_RULES
    response_model = DistanceMatrixResponse

    def __init__(self, origins: Iterable[MatrixLocation], destinations: Iterable[MatrixLocation]):
        super().__init__()
        self._origins = tuple(origins)
        self._destinations = tuple(destinations)

    @property
    def origins(self) -> tuple[MatrixLocation, ...]:
        return self._origins

    @property
    def destinations(self) -> tuple[MatrixLocation, ...]:
        return self._destinations

    def _required_pairs(self) -> list[tuple[str, str]]:
        return [
            ("destinations", _render_locations(self._destinations)),
            ("origins", _render_locations(self._origins)),
        ]

    def with_arrival_time(self, arrival_time: datetime) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.ARRIVAL_TIME, arrival_time)

    def with_departure_time(self, departure_time: DepartureTime) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.DEPARTURE_TIME, departure_time)

    def with_language(self, language: Language) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.LANGUAGE, language)

    def with_region(self, region: Region) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.REGION, region)

    def with_restriction(self, restriction: Avoid) -> "DistanceMatrixRequest":
        return self._extend(DistanceMatrixParam.RESTRICTIONS, [restriction])

    def with_restrictions(self, restrictions: Iterable[Avoid]) -> "DistanceMatrixRequest":
        return self._extend(DistanceMatrixParam.RESTRICTIONS, restrictions)

    def with_traffic_model(self, traffic_model: TrafficModel) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.TRAFFIC_MODEL, traffic_model)

    def with_transit_mode(self, transit_mode: TransitMode) -> "DistanceMatrixRequest":
        return self._extend(DistanceMatrixParam.TRANSIT_MODES, [transit_mode])

    def with_transit_modes(self, transit_modes: Iterable[TransitMode]) -> "DistanceMatrixRequest":
        return self._extend(DistanceMatrixParam.TRANSIT_MODES, transit_modes)

    def with_transit_route_preference(self, preference: TransitRoutePreference) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.TRANSIT_ROUTE_PREFERENCE, preference)

    def with_travel_mode(self, travel_mode: TravelMode) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.TRAVEL_MODE, travel_mode)

    def with_unit_system(self, unit_system: UnitSystem) -> "DistanceMatrixRequest":
        return self._set(DistanceMatrixParam.UNIT_SYSTEM, unit_system)

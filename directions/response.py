from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from models.responses import Bounds, LatLngLiteral, StatusResponse, TextValue


class GeocodedWaypoint(BaseModel):
    geocoder_status: str
    place_id: Optional[str] = None
    types: List[str] = []
    partial_match: Optional[bool] = None


class Polyline(BaseModel):
    points: str


class Step(BaseModel):
    distance: TextValue
    duration: TextValue
    start_location: LatLngLiteral
    end_location: LatLngLiteral
    html_instructions: str = ""
    polyline: Optional[Polyline] = None
    travel_mode: str = ""
    maneuver: Optional[str] = None
    transit_details: Optional[Dict[str, Any]] = None


class Leg(BaseModel):
    distance: TextValue
    duration: TextValue
    duration_in_traffic: Optional[TextValue] = None
    start_address: str = ""
    end_address: str = ""
    start_location: LatLngLiteral
    end_location: LatLngLiteral
    steps: List[Step] = []
    # Transit legs only
    arrival_time: Optional[Dict[str, Any]] = None
    departure_time: Optional[Dict[str, Any]] = None


class Route(BaseModel):
    summary: str = ""
    legs: List[Leg] = []
    bounds: Optional[Bounds] = None
    copyrights: str = ""
    overview_polyline: Optional[Polyline] = None
    warnings: List[str] = []
    waypoint_order: List[int] = []
    fare: Optional[Dict[str, Any]] = None


class DirectionsResponse(StatusResponse):
    geocoded_waypoints: List[GeocodedWaypoint] = []
    routes: List[Route] = []
    # Upper-case mode names, returned with ZERO_RESULTS when another mode would work
    available_travel_modes: List[str] = []

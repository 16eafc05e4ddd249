"""Helpers that turn query-string input into typed request values."""
from datetime import datetime

from fastapi import HTTPException

from api.schemas import QueryPreview
from core.request_core import RequestCore
from models.location import EncodedPolyline, MatrixLocation, Waypoint, parse_location
from models.timing import DepartureTime
from providers.base import BaseMapsProvider


def parse_departure_time(text: str) -> DepartureTime:
    if text == "now":
        return DepartureTime.now()
    try:
        return DepartureTime.at(datetime.fromisoformat(text))
    except ValueError:
        raise HTTPException(
            status_code=422, detail=f"departure_time must be 'now' or an ISO 8601 datetime, got '{text}'"
        )


def parse_matrix_location(text: str) -> MatrixLocation:
    if text.startswith("enc:") and text.endswith(":") and len(text) > 5:
        return EncodedPolyline(text[4:-1])
    return parse_location(text)


def parse_waypoint(text: str) -> Waypoint:
    if text.startswith("via:"):
        return Waypoint.via(parse_matrix_location(text[4:]))
    return Waypoint(parse_matrix_location(text))


async def preview_or_send(request: RequestCore, provider: BaseMapsProvider, preview: bool):
    request.validate()
    if preview:
        return QueryPreview(family=request.family, endpoint=request.endpoint, query=request.query_string())
    return await provider.send(request)

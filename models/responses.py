"""Pydantic building blocks shared by the response models of every family."""
from typing import Optional

from pydantic import BaseModel

from models.status import Status


class TextValue(BaseModel):
    """A quantity as both a display string and a machine value (meters or seconds)."""
    text: str
    value: int


class LatLngLiteral(BaseModel):
    lat: float
    lng: float


class Bounds(BaseModel):
    northeast: LatLngLiteral
    southwest: LatLngLiteral


class StatusResponse(BaseModel):
    status: Status
    error_message: Optional[str] = None

    model_config = {"extra": "ignore"}

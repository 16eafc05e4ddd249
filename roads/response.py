from typing import List, Optional

from pydantic import BaseModel, Field


class SnappedLocation(BaseModel):
    latitude: float
    longitude: float


class SnappedPoint(BaseModel):
    location: SnappedLocation
    # Index into the request path. Absent for interpolated points.
    original_index: Optional[int] = Field(default=None, alias="originalIndex")
    place_id: str = Field(alias="placeId")

    model_config = {"populate_by_name": True}


class SnapToRoadsResponse(BaseModel):
    snapped_points: List[SnappedPoint] = Field(default_factory=list, alias="snappedPoints")
    warning_message: Optional[str] = Field(default=None, alias="warningMessage")

    model_config = {"populate_by_name": True}

from typing import List, Optional

from pydantic import BaseModel

from models.responses import Bounds, LatLngLiteral, StatusResponse


class Geometry(BaseModel):
    location: LatLngLiteral
    viewport: Optional[Bounds] = None


class Review(BaseModel):
    author_name: str
    rating: int
    text: str = ""
    time: int
    relative_time_description: str = ""
    language: Optional[str] = None
    original_language: Optional[str] = None
    translated: Optional[bool] = None


class PlaceDetails(BaseModel):
    place_id: Optional[str] = None
    name: Optional[str] = None
    formatted_address: Optional[str] = None
    geometry: Optional[Geometry] = None
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = None
    reviews: List[Review] = []
    types: List[str] = []
    url: Optional[str] = None
    website: Optional[str] = None
    business_status: Optional[str] = None
    formatted_phone_number: Optional[str] = None

    model_config = {"extra": "allow"}


class PlaceDetailsResponse(StatusResponse):
    html_attributions: List[str] = []
    result: Optional[PlaceDetails] = None

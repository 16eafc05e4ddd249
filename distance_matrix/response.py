from typing import List, Optional

from pydantic import BaseModel

from models.responses import StatusResponse, TextValue
from models.status import Status


class Fare(BaseModel):
    currency: str
    value: float
    text: str


class Element(BaseModel):
    """One origin/destination pair. Distance and duration are absent unless status is OK."""
    status: Status
    distance: Optional[TextValue] = None
    duration: Optional[TextValue] = None
    duration_in_traffic: Optional[TextValue] = None
    fare: Optional[Fare] = None


class Row(BaseModel):
    elements: List[Element] = []


class DistanceMatrixResponse(StatusResponse):
    origin_addresses: List[str] = []
    destination_addresses: List[str] = []
    rows: List[Row] = []

    def element(self, origin_index: int, destination_index: int) -> Element:
        return self.rows[origin_index].elements[destination_index]

"""Locations, in each of the forms the web services accept.

A location is a tagged union: a coordinate pair, a free-text address or an
opaque place ID. Each variant knows its own wire form. Address, place ID and
polyline contents are passed through untouched.
"""
import re
from dataclasses import dataclass
from typing import Union

from core.errors import InvalidLatLngError

_LATLNG_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float

    def __post_init__(self):
        if not (-90.0 <= self.lat <= 90.0 and -180.0 <= self.lng <= 180.0):
            raise InvalidLatLngError(self.lat, self.lng)

    def to_wire(self) -> str:
        return f"{self.lat:.6f},{self.lng:.6f}"

    @classmethod
    def parse(cls, text: str) -> "LatLng":
        """Parse a ``"lat,lng"`` string."""
        match = _LATLNG_RE.match(text)
        if not match:
            raise ValueError(f"'{text}' is not a 'lat,lng' coordinate pair")
        return cls(float(match.group(1)), float(match.group(2)))


@dataclass(frozen=True)
class Address:
    text: str

    def to_wire(self) -> str:
        return self.text


@dataclass(frozen=True)
class PlaceId:
    place_id: str

    def to_wire(self) -> str:
        return f"place_id:{self.place_id}"


@dataclass(frozen=True)
class EncodedPolyline:
    """A set of points in encoded polyline form. Only valid where several points are accepted."""
    points: str

    def to_wire(self) -> str:
        return f"enc:{self.points}:"


Location = Union[LatLng, Address, PlaceId]
MatrixLocation = Union[LatLng, Address, PlaceId, EncodedPolyline]


def parse_location(text: str) -> Location:
    """Interpret user-supplied text as a place ID, a coordinate pair or an address."""
    if text.startswith("place_id:"):
        return PlaceId(text[len("place_id:"):])
    if _LATLNG_RE.match(text):
        return LatLng.parse(text)
    return Address(text)


@dataclass(frozen=True)
class Waypoint:
    """An intermediate Directions location.

    A stopover splits the route into separate legs. A pass-through
    (``stopover=False``) only shapes the route and is sent with a ``via:``
    prefix.
    """
    location: MatrixLocation
    stopover: bool = True

    @classmethod
    def via(cls, location: MatrixLocation) -> "Waypoint":
        return cls(location, stopover=False)

    def to_wire(self) -> str:
        wire = self.location.to_wire()
        return wire if self.stopover else f"via:{wire}"

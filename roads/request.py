"""Snap To Roads request builder.

The path is the only required parameter. Points are sent as pipe-separated
``lat,lng`` pairs, e.g.
``path=60.170880,24.942795|60.170879,24.942796``.
"""
from enum import Enum
from typing import Iterable

from core.request_core import QueryParam, RequestCore, pipe_joined, render_bool, render_wire
from core.rules import path_must_not_be_empty
from models.location import LatLng
from roads.response import SnapToRoadsResponse

_render_path = pipe_joined(render_wire)


class SnapToRoadsParam(Enum):
    INTERPOLATE = QueryParam("interpolate", render_bool)


class SnapToRoadsRequest(RequestCore):
    family = "snap_to_roads"
    api = "roads"
    endpoint = "snapToRoads"
    params = SnapToRoadsParam
    rules = (path_must_not_be_empty,)
    response_model = SnapToRoadsResponse

    def __init__(self, path: Iterable[LatLng]):
        super().__init__()
        self._path = tuple(path)

    @property
    def path(self) -> tuple[LatLng, ...]:
        return self._path

    def _required_pairs(self) -> list[tuple[str, str]]:
        return [("path", _render_path(self._path))]

    def with_path(self, path: Iterable[LatLng]) -> "SnapToRoadsRequest":
        """Replace the whole path."""
        self._path = tuple(path)
        self._invalidate()
        return self

    def with_interpolation(self, interpolate: bool) -> "SnapToRoadsRequest":
        """Also return the points that make up the full road geometry between the given ones.

        Interpolated paths follow the road smoothly, around corners and through
        tunnels, and usually hold more points than the original path.
        """
        return self._set(SnapToRoadsParam.INTERPOLATE, interpolate)

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.params import preview_or_send
from models.location import LatLng
from providers.base import BaseMapsProvider
from providers.factory import get_provider
from roads.request import SnapToRoadsRequest

router = APIRouter(prefix="/roads", tags=["roads"])


@router.get("/snap")
async def snap_to_roads(
    path: str,
    interpolate: Optional[bool] = None,
    preview: bool = False,
    provider: BaseMapsProvider = Depends(get_provider),
):
    try:
        points = [LatLng.parse(pair) for pair in path.split("|") if pair.strip()]
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    request = SnapToRoadsRequest(points)
    if interpolate is not None:
        request.with_interpolation(interpolate)

    return await preview_or_send(request, provider, preview)

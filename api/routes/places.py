from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.params import preview_or_send
from models.locale import Language, Region
from places.field import Field
from places.request import PlaceDetailsRequest
from places.sort_order import SortOrder
from providers.base import BaseMapsProvider
from providers.factory import get_provider

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/details")
async def get_place_details(
    place_id: str,
    fields: list[str] = Query(default=[]),
    language: Optional[str] = None,
    region: Optional[str] = None,
    reviews_no_translations: Optional[bool] = None,
    reviews_sort: Optional[str] = None,
    sessiontoken: Optional[str] = None,
    preview: bool = False,
    provider: BaseMapsProvider = Depends(get_provider),
):
    request = PlaceDetailsRequest(place_id)
    request.with_fields(Field.from_code(code) for code in fields)
    if language is not None:
        request.with_language(Language.from_code(language))
    if region is not None:
        request.with_region(Region.from_code(region))
    if reviews_no_translations is not None:
        request.with_reviews_no_translations(reviews_no_translations)
    if reviews_sort is not None:
        request.with_reviews_sort(SortOrder.from_code(reviews_sort))
    if sessiontoken is not None:
        request.with_session_token(sessiontoken)

    return await preview_or_send(request, provider, preview)

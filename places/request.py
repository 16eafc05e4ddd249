"""Place Details API request builder."""
from enum import Enum
from typing import Iterable

from core.request_core import QueryParam, RequestCore, comma_joined, render_bool, render_code, render_text
from core.rules import reviews_options_require_reviews_field
from models.locale import Language, Region
from places.field import Field
from places.response import PlaceDetailsResponse
from places.sort_order import SortOrder


class PlaceDetailsParam(Enum):
    FIELDS = QueryParam("fields", comma_joined(render_code), sequence=True)
    LANGUAGE = QueryParam("language", render_code)
    REGION = QueryParam("region", render_code)
    REVIEWS_NO_TRANSLATIONS = QueryParam("reviews_no_translations", render_bool)
    REVIEWS_SORT = QueryParam("reviews_sort", render_code)
    SESSION_TOKEN = QueryParam("sessiontoken", render_text)


class PlaceDetailsRequest(RequestCore):
    family = "place_details"
    endpoint = "place/details/json"
    params = PlaceDetailsParam
    rules = (reviews_options_require_reviews_field,)
    response_model = PlaceDetailsResponse

    def __init__(self, place_id: str):
        super().__init__()
        self.place_id = place_id

    def _required_pairs(self) -> list[tuple[str, str]]:
        return [("place_id", self.place_id)]

    def with_field(self, field: Field) -> "PlaceDetailsRequest":
        return self._extend(PlaceDetailsParam.FIELDS, [field])

    def with_fields(self, fields: Iterable[Field]) -> "PlaceDetailsRequest":
        """Restrict the response to these fields. Without any, every field is returned."""
        return self._extend(PlaceDetailsParam.FIELDS, fields)

    def with_language(self, language: Language) -> "PlaceDetailsRequest":
        return self._set(PlaceDetailsParam.LANGUAGE, language)

    def with_region(self, region: Region) -> "PlaceDetailsRequest":
        return self._set(PlaceDetailsParam.REGION, region)

    def with_reviews_no_translations(self, no_translations: bool) -> "PlaceDetailsRequest":
        """Return reviews in their original language instead of translating them."""
        return self._set(PlaceDetailsParam.REVIEWS_NO_TRANSLATIONS, no_translations)

    def with_reviews_sort(self, sort_order: SortOrder) -> "PlaceDetailsRequest":
        return self._set(PlaceDetailsParam.REVIEWS_SORT, sort_order)

    def with_session_token(self, session_token: str) -> "PlaceDetailsRequest":
        """Group this request with the autocomplete session that produced the place ID."""
        return self._set(PlaceDetailsParam.SESSION_TOKEN, session_token)

import copy

from providers.base import BaseMapsProvider

_LEG = {
    "distance": {"text": "346 km", "value": 346185},
    "duration": {"text": "3 hours 52 mins", "value": 13920},
    "start_address": "New York, NY, USA",
    "end_address": "Boston, MA, USA",
    "start_location": {"lat": 40.7127753, "lng": -74.0059728},
    "end_location": {"lat": 42.3600825, "lng": -71.0588801},
    "steps": [],
}

CANNED_RESPONSES = {
    "directions": {
        "status": "OK",
        "geocoded_waypoints": [
            {"geocoder_status": "OK", "place_id": "ChIJOwg_06VPwokRYv534QaPC8g", "types": ["locality", "political"]},
            {"geocoder_status": "OK", "place_id": "ChIJGzE9DS1l44kRoOhiASS_fHg", "types": ["locality", "political"]},
        ],
        "routes": [
            {
                "summary": "I-95 N",
                "legs": [_LEG],
                "copyrights": "Map data ©2024 Google",
                "warnings": [],
                "waypoint_order": [],
            }
        ],
    },
    "distance_matrix": {
        "status": "OK",
        "origin_addresses": ["New York, NY, USA"],
        "destination_addresses": ["Boston, MA, USA", "Philadelphia, PA, USA"],
        "rows": [
            {
                "elements": [
                    {"status": "OK", "distance": _LEG["distance"], "duration": _LEG["duration"]},
                    {
                        "status": "OK",
                        "distance": {"text": "151 km", "value": 151128},
                        "duration": {"text": "1 hour 51 mins", "value": 6660},
                    },
                ]
            }
        ],
    },
    "place_details": {
        "status": "OK",
        "html_attributions": [],
        "result": {
            "place_id": "ChIJN1t_tDeuEmsRUsoyG83frY4",
            "name": "Google Sydney",
            "formatted_address": "48 Pirrama Rd, Pyrmont NSW 2009, Australia",
            "geometry": {"location": {"lat": -33.866489, "lng": 151.1958561}},
            "rating": 4.0,
            "user_ratings_total": 1000,
            "types": ["point_of_interest", "establishment"],
        },
    },
    "snap_to_roads": {
        "snappedPoints": [
            {
                "location": {"latitude": 60.170880, "longitude": 24.942795},
                "originalIndex": 0,
                "placeId": "ChIJNX9BrM0LkkYRIM-cQg265e8",
            },
            {
                "location": {"latitude": 60.170879, "longitude": 24.942796},
                "originalIndex": 1,
                "placeId": "ChIJNX9BrM0LkkYRIM-cQg265e8",
            },
        ]
    },
}


class MockMapsProvider(BaseMapsProvider):
    """Answers every request family with a canned payload; never touches the network."""

    def __init__(self, api_key: str = "mock-key", **kwargs):
        super().__init__(api_key=api_key, **kwargs)
        self.requested_urls: list[str] = []

    async def fetch(self, family: str, url: str) -> dict:
        self.requested_urls.append(url)
        return copy.deepcopy(CANNED_RESPONSES[family])

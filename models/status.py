from models.codes import WireCode


class Status(WireCode):
    """Top-level (and per-element) status codes returned by the Maps web services."""
    OK = "OK"
    INVALID_REQUEST = "INVALID_REQUEST"
    MAX_DIMENSIONS_EXCEEDED = "MAX_DIMENSIONS_EXCEEDED"
    MAX_ELEMENTS_EXCEEDED = "MAX_ELEMENTS_EXCEEDED"
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    MAX_WAYPOINTS_EXCEEDED = "MAX_WAYPOINTS_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    ZERO_RESULTS = "ZERO_RESULTS"

    @property
    def is_success(self) -> bool:
        # ZERO_RESULTS is a valid answer with an empty result set
        return self in (Status.OK, Status.ZERO_RESULTS)

"""Error taxonomy for request building, validation and dispatch."""


class MapsError(Exception):
    """Base class for every error raised by this package."""


# ── Validation ────────────────────────────────────────────────────────────────

class ValidationError(MapsError):
    """A combination of parameters the remote service would reject.

    ``values`` holds the conflicting values, already formatted for display.
    """

    def __init__(self, message: str, **values: str):
        self.values = values
        super().__init__(message)


class ArrivalTimeIsForTransitOnlyError(ValidationError):
    def __init__(self, travel_mode: str, arrival_time: str):
        self.travel_mode = travel_mode
        self.arrival_time = arrival_time
        super().__init__(
            f"Arrival time ({arrival_time}) may only be set when the travel mode "
            f"is transit, but the travel mode is {travel_mode}.",
            travel_mode=travel_mode,
            arrival_time=arrival_time,
        )


class TransitModeIsForTransitOnlyError(ValidationError):
    def __init__(self, travel_mode: str, transit_modes: str):
        self.travel_mode = travel_mode
        self.transit_modes = transit_modes
        super().__init__(
            f"Transit modes ({transit_modes}) may only be set when the travel mode "
            f"is transit, but the travel mode is {travel_mode}.",
            travel_mode=travel_mode,
            transit_modes=transit_modes,
        )


class TransitRoutePreferenceIsForTransitOnlyError(ValidationError):
    def __init__(self, travel_mode: str, transit_route_preference: str):
        self.travel_mode = travel_mode
        self.transit_route_preference = transit_route_preference
        super().__init__(
            f"Transit route preference ({transit_route_preference}) may only be set "
            f"when the travel mode is transit, but the travel mode is {travel_mode}.",
            travel_mode=travel_mode,
            transit_route_preference=transit_route_preference,
        )


class EitherDepartureTimeOrArrivalTimeError(ValidationError):
    def __init__(self, arrival_time: str, departure_time: str):
        self.arrival_time = arrival_time
        self.departure_time = departure_time
        super().__init__(
            f"Only one of arrival time ({arrival_time}) or departure time "
            f"({departure_time}) may be set.",
            arrival_time=arrival_time,
            departure_time=departure_time,
        )


class TrafficModelRequiresDepartureTimeError(ValidationError):
    def __init__(self, traffic_model: str):
        self.traffic_model = traffic_model
        super().__init__(
            f"Traffic model ({traffic_model}) requires a departure time.",
            traffic_model=traffic_model,
        )


class ReviewsFieldNotRequestedError(ValidationError):
    def __init__(self, option: str, fields: str):
        self.option = option
        self.fields = fields
        super().__init__(
            f"'{option}' has no effect unless the 'reviews' field is requested "
            f"(requested fields: {fields}).",
            option=option,
            fields=fields,
        )


class EmptyPathError(ValidationError):
    def __init__(self):
        super().__init__("The path to snap must contain at least one point.")


# ── Request state ─────────────────────────────────────────────────────────────

class NotValidatedError(MapsError):
    """Raised when a request is serialized or dispatched before validate() succeeded."""

    def __init__(self, family: str):
        self.family = family
        super().__init__(
            f"The {family} request must be validated before it is serialized or sent."
        )


# ── Decoding ──────────────────────────────────────────────────────────────────

class InvalidCodeError(MapsError, ValueError):
    """Raised when a wire code is not in the documented code set of its type."""

    def __init__(self, type_name: str, code: str):
        self.type_name = type_name
        self.code = code
        super().__init__(f"'{code}' is not a valid {type_name} code")


class InvalidLatLngError(MapsError, ValueError):
    def __init__(self, lat: float, lng: float):
        self.lat = lat
        self.lng = lng
        super().__init__(
            f"Invalid coordinate ({lat}, {lng}): latitude must be within [-90, 90] "
            f"and longitude within [-180, 180]"
        )


# ── Transport ─────────────────────────────────────────────────────────────────

class MapsApiError(MapsError):
    """The service answered, but with a non-success status."""

    def __init__(self, status: str, error_message: str = ""):
        self.status = status
        self.error_message = error_message
        detail = f": {error_message}" if error_message else ""
        super().__init__(f"Maps API returned {status}{detail}")


class RetriesExhaustedError(MapsError):
    def __init__(self, family: str, attempts: int):
        self.family = family
        self.attempts = attempts
        super().__init__(f"Maps API ({family}): max retries exceeded after {attempts} attempts")

"""Routing enumerations shared by the Directions and Distance Matrix requests."""
from models.codes import WireCode


class TravelMode(WireCode):
    """Mode of transportation. The service assumes driving when unset."""
    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Avoid(WireCode):
    """Features that calculated routes should avoid."""
    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"
    INDOOR = "indoor"


class TrafficModel(WireCode):
    """Assumptions used when calculating duration in traffic."""
    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


class TransitMode(WireCode):
    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    # Equivalent to train|tram|subway
    RAIL = "rail"


class TransitRoutePreference(WireCode):
    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class UnitSystem(WireCode):
    """Unit system for the human-readable distances in a response."""
    IMPERIAL = "imperial"
    METRIC = "metric"

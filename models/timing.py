"""Time specifications and their wire/display formats."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

DISPLAY_FORMAT = "%Y-%m-%d %I:%M:%S %p"


def to_timestamp(moment: datetime) -> int:
    """Seconds since the epoch. Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())


def render_timestamp(moment: datetime) -> str:
    return str(to_timestamp(moment))


def format_moment(moment: datetime) -> str:
    return moment.strftime(DISPLAY_FORMAT)


@dataclass(frozen=True)
class DepartureTime:
    """Either "now" or a specific moment."""
    at_time: Optional[datetime] = None

    @classmethod
    def now(cls) -> "DepartureTime":
        return cls()

    @classmethod
    def at(cls, moment: datetime) -> "DepartureTime":
        return cls(at_time=moment)

    def to_wire(self) -> str:
        if self.at_time is None:
            return "now"
        return render_timestamp(self.at_time)

    def __str__(self) -> str:
        if self.at_time is None:
            return "now"
        return format_moment(self.at_time)

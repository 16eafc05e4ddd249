"""Base enum for closed sets of wire codes.

Each member's value is the exact token the web services send and expect, so
the enum class itself is the code table: built once at import and never
mutated afterwards.
"""
from enum import Enum

from core.errors import InvalidCodeError


class WireCode(str, Enum):
    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "WireCode":
        """Parse a wire code. Raises InvalidCodeError for anything outside the code set."""
        try:
            return cls(code)
        except ValueError:
            raise InvalidCodeError(cls.__name__, code) from None

    @classmethod
    def codes(cls) -> list[str]:
        return [member.value for member in cls]

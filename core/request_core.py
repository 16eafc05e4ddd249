"""Generic request accumulator shared by every request family.

A family subclasses ``RequestCore`` and supplies:

* ``params``: an Enum of its optional parameter kinds. Each member's value is
  a ``QueryParam`` (wire key + renderer), and member order is the canonical
  emission order.
* ``rules``: the family's validation table (see ``core.rules``).
* ``_required_pairs()``: the required parameters, in fixed order.

Configuration goes through ``_set`` / ``_extend``. Both drop the validated
flag and the cached query string. Serialization is only available after
``validate()`` has succeeded.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Optional, Union

import httpx

from core.errors import NotValidatedError, ValidationError

if TYPE_CHECKING:
    from providers.base import BaseMapsProvider

Rule = Callable[["RequestCore"], Optional[ValidationError]]


@dataclass(frozen=True)
class QueryParam:
    # None: the kind is folded into another parameter instead of being sent itself
    key: Optional[str]
    render: Callable[[Any], str]
    sequence: bool = False


def render_code(value) -> str:
    return value.code


def render_bool(value: bool) -> str:
    return "true" if value else "false"


def render_text(value: str) -> str:
    return value


def render_wire(value) -> str:
    return value.to_wire()


def pipe_joined(render: Callable[[Any], str]) -> Callable[[list], str]:
    def _render(values: list) -> str:
        return "|".join(render(v) for v in values)
    return _render


def comma_joined(render: Callable[[Any], str]) -> Callable[[list], str]:
    def _render(values: list) -> str:
        return ",".join(render(v) for v in values)
    return _render


class RequestCore(ABC):
    family: ClassVar[str] = ""
    # "maps" or "roads": selects the base URL the provider sends to
    api: ClassVar[str] = "maps"
    endpoint: ClassVar[str] = ""
    params: ClassVar[type[Enum]]
    rules: ClassVar[tuple[Rule, ...]] = ()
    response_model: ClassVar[type]

    def __init__(self):
        self._values: dict[Enum, Any] = {}
        self._query: Optional[str] = None
        self.validated: bool = False

    def __repr__(self) -> str:
        values = ", ".join(f"{kind.name.lower()}={value!r}" for kind, value in self._values.items())
        return f"{type(self).__name__}({values}, validated={self.validated})"

    # ── Configuration ─────────────────────────────────────────────────────────

    def _invalidate(self) -> None:
        self.validated = False
        self._query = None

    def _set(self, kind: Enum, value: Any):
        """Replace the value held for ``kind``."""
        self._values[kind] = value
        self._invalidate()
        return self

    def _extend(self, kind: Enum, values: Iterable):
        """Append to a sequence-valued kind, keeping order and duplicates."""
        combined = [*self._values.get(kind, []), *values]
        if combined:
            self._values[kind] = combined
        self._invalidate()
        return self

    def get(self, kind: Union[Enum, str]) -> Any:
        """Current value of ``kind`` (an enum member or its name), or None.

        Sequence kinds come back as a copy; change them through ``with_*``.
        """
        if isinstance(kind, str):
            kind = self.params[kind]
        value = self._values.get(kind)
        if value is not None and kind.value.sequence:
            return list(value)
        return value

    def values(self) -> dict[Enum, Any]:
        """A shallow snapshot of the configured optional parameters."""
        return {
            kind: list(value) if kind.value.sequence else value
            for kind, value in self._values.items()
        }

    # ── Validation ────────────────────────────────────────────────────────────

    def validate(self):
        """Run the family's rules in order and raise the first error found.

        On failure nothing is modified. On success the request is marked
        validated and returned.
        """
        for rule in self.rules:
            error = rule(self)
            if error is not None:
                raise error
        self.validated = True
        return self

    # ── Serialization ─────────────────────────────────────────────────────────

    @abstractmethod
    def _required_pairs(self) -> list[tuple[str, str]]:
        pass

    def _render(self, kind: Enum, value: Any) -> str:
        return kind.value.render(value)

    def _ensure_validated(self) -> None:
        if not self.validated:
            raise NotValidatedError(self.family)

    def query_pairs(self) -> list[tuple[str, str]]:
        """Required pairs in fixed order, then every set optional kind in canonical order."""
        self._ensure_validated()
        pairs = list(self._required_pairs())
        for kind in self.params:
            if kind in self._values and kind.value.key is not None:
                pairs.append((kind.value.key, self._render(kind, self._values[kind])))
        return pairs

    def query_string(self) -> str:
        self._ensure_validated()
        if self._query is None:
            self._query = str(httpx.QueryParams(self.query_pairs()))
        return self._query

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.endpoint}?{self.query_string()}"

    async def execute(self, provider: "BaseMapsProvider"):
        """Validate, then send through ``provider`` and return the typed response."""
        self.validate()
        return await provider.send(self)

"""Sorted, filtered views of request headers and parameters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from geoinfo.core.models.request import RequestData

VALUE_SEPARATOR = "; "


class NameValue(NamedTuple):
    """Single output line of a header or parameter."""

    name: str
    value: str


def _joined(items: Mapping[str, list[str]], names: Iterable[str]) -> list[NameValue]:
    return sorted(NameValue(name, VALUE_SEPARATOR.join(items[name])) for name in names)


class HeaderFilter:
    """Renders request metadata without the configured ignored headers."""

    def __init__(self, ignore_set: Iterable[str] = ()) -> None:
        self.ignore_set = frozenset(name.upper() for name in ignore_set)

    def is_ignored(self, name: str) -> bool:
        """Whether a header is hidden, compared case-insensitively."""
        return name.upper() in self.ignore_set

    def headers(self, request: RequestData) -> list[NameValue]:
        """Visible headers sorted by name, multiple values joined."""
        names = [name for name in request.headers if not self.is_ignored(name)]
        return _joined(request.headers, names)

    def params(self, request: RequestData) -> list[NameValue]:
        """Form and query parameters sorted by name, multiple values joined."""
        params = request.params
        return _joined(params, params)

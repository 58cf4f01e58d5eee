"""Transport-neutral view of an inbound HTTP request."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl

if TYPE_CHECKING:
    from starlette.requests import Request

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
MULTIPART_CONTENT_TYPE = "multipart/form-data"
BODY_METHODS = ("POST", "PUT", "PATCH")


def canonical_header_key(name: str) -> str:
    """Canonical MIME header form: ``x-real-ip`` becomes ``X-Real-Ip``."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.strip().split("-"))


def media_type(content_type: str) -> str:
    """Bare lowercase media type of a Content-Type value."""
    return content_type.split(";", 1)[0].strip().lower()


def _multi_dict(pairs: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    result: dict[str, list[str]] = {}
    for name, value in pairs:
        result.setdefault(name, []).append(value)
    return result


@dataclass
class RequestData:
    """Snapshot of the request fields needed for resolution and rendering.

    Headers are multi-valued and keyed by canonical header name. Params
    are parsed from the urlencoded body and the query string on first
    access only. Multipart text fields arrive already decoded in ``form``.
    """

    remote_addr: str
    headers: Mapping[str, list[str]] = field(default_factory=dict)
    method: str = "GET"
    uri: str = "/"
    proto: str = "HTTP/1.1"
    query: str = ""
    body: bytes = b""
    content_type: str = ""
    form: tuple[tuple[str, str], ...] = ()

    @classmethod
    def build(
        cls,
        remote_addr: str,
        headers: Iterable[tuple[str, str]] | Mapping[str, str] = (),
        **kwargs: object,
    ) -> RequestData:
        """Create from raw ``(name, value)`` pairs, canonicalizing names."""
        items = headers.items() if isinstance(headers, Mapping) else headers
        return cls(
            remote_addr=remote_addr,
            headers=_multi_dict((canonical_header_key(k), v) for k, v in items),
            **kwargs,  # type: ignore[arg-type]
        )

    @classmethod
    def from_request(
        cls,
        request: Request,
        body: bytes = b"",
        form: Iterable[tuple[str, str]] = (),
    ) -> RequestData:
        """Adapt a Starlette request."""
        client = request.client
        if client is None:
            remote_addr = ""
        elif ":" in client.host:
            remote_addr = f"[{client.host}]:{client.port}"
        else:
            remote_addr = f"{client.host}:{client.port}"

        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"

        return cls.build(
            remote_addr,
            request.headers.items(),
            method=request.method,
            uri=uri,
            proto=f"HTTP/{request.scope.get('http_version', '1.1')}",
            query=request.url.query,
            body=body,
            content_type=request.headers.get("content-type", ""),
            form=tuple(form),
        )

    def header_values(self, name: str) -> list[str]:
        """All values of a header, empty when absent."""
        return list(self.headers.get(canonical_header_key(name), []))

    @cached_property
    def params(self) -> dict[str, list[str]]:
        """Form and query parameters.

        Urlencoded body values come before query values, multipart fields
        after them.
        """
        pairs: list[tuple[str, str]] = []
        if (
            self.body
            and media_type(self.content_type) == FORM_CONTENT_TYPE
            and self.method in BODY_METHODS
        ):
            pairs.extend(parse_qsl(self.body.decode("utf-8", "replace"), keep_blank_values=True))
        pairs.extend(parse_qsl(self.query, keep_blank_values=True))
        pairs.extend(self.form)
        return _multi_dict(pairs)

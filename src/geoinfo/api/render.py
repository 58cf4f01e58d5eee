"""Plain text renderers for resolved locations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geoinfo.core.geo.headers import HeaderFilter, NameValue
    from geoinfo.core.models.location import LocationInfo
    from geoinfo.core.models.request import RequestData

SECTION_RULE = "---------"


def _section(title: str, items: list[NameValue]) -> list[str]:
    return ["", title, SECTION_RULE, *(f"{item.name}: {item.value}" for item in items)]


def render_full(request: RequestData, header_filter: HeaderFilter, info: LocationInfo) -> str:
    """Request details, visible headers, params and location."""
    lines = [
        f"IP: {info.ip}",
        f"Proto: {request.proto}",
        f"Method: {request.method}",
        f"URI: {request.uri}",
    ]
    lines += _section("Headers", header_filter.headers(request))
    lines += _section("Params", header_filter.params(request))
    lines += [
        "",
        "Locations",
        SECTION_RULE,
        f"Country: {info.country}",
        f"City: {info.city}",
        f"Latitude: {info.latitude}",
        f"Longitude: {info.longitude}",
        f"TimeZone: {info.time_zone}",
        f"TimeUTC: {info.utc_time}",
    ]
    return "\n".join(lines) + "\n"


def render_short(info: LocationInfo) -> str:
    """IP, country, city and both clocks."""
    return (
        f"IP:         {info.ip}\n"
        f"Country:    {info.country}\n"
        f"City:       {info.city}\n"
        f"Local time: {info.local_time()}\n"
        f"UTC time:   {info.utc_time}\n"
    )


def render_compact(info: LocationInfo) -> str:
    _, local_time = info.local_date_time()
    return f"{info.country} {info.city}\n{info.ip}\n{local_time}\n"

"""Core interfaces (protocols) for pluggable collaborators."""

from geoinfo.core.interfaces.store import ILocationStore

__all__ = [
    "ILocationStore",
]

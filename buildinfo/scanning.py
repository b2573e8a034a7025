"""
Marker-based type scanning.

Classes are tagged with marker instances through the `marker` decorator:

    class Plugin:
        def __init__(self, name):
            self.name = name

    @marker(Plugin("csv"))
    class CsvExporter:
        ...

`decorated_types(artifact, Plugin)` then yields CsvExporter, and any class
inheriting from it.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Type, TypeVar

from .artifacts import Artifact

MARKERS_ATTRIBUTE = "__buildinfo_markers__"

T = TypeVar("T", bound=type)


def marker(*instances: Any) -> Callable[[T], T]:
    """Class decorator attaching marker instances to the decorated class."""

    def decorate(cls: T) -> T:
        own = list(cls.__dict__.get(MARKERS_ATTRIBUTE, ()))
        setattr(cls, MARKERS_ATTRIBUTE, tuple(own + list(instances)))
        return cls

    return decorate


def markers_of(cls: type, inherit: bool = True) -> List[Any]:
    """Marker instances on `cls`, base classes included when `inherit`."""
    classes = cls.__mro__ if inherit else (cls,)
    found: List[Any] = []
    for klass in classes:
        found.extend(klass.__dict__.get(MARKERS_ATTRIBUTE, ()))
    return found


def decorated_types(artifact: Artifact, marker_type: Type[Any]) -> Iterator[type]:
    """Yield the artifact's types carrying at least one `marker_type` marker."""
    for cls in artifact.types():
        if any(isinstance(m, marker_type) for m in markers_of(cls)):
            yield cls

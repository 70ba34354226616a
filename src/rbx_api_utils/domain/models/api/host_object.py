#!/usr/bin/env python3

"""Interface of the live objects whose properties are read and written."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HostObject(Protocol):
    """Object exposed by the host object system.

    Only ``ClassName`` and ``IsA`` are required; properties are plain
    attributes read with ``getattr`` and written with ``setattr``.
    """

    ClassName: str

    def IsA(self, class_name: str) -> bool:  # noqa: N802 - host API naming
        """Return True if the object is ``class_name`` or inherits from it."""
        ...

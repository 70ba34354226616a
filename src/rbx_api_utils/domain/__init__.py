#!/usr/bin/env python3

"""Domain layer containing the API index, type checking and property access."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]

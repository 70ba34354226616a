#!/usr/bin/env python3

"""Domain models for the API utilities."""

from . import api

__all__ = [
    "api",
]

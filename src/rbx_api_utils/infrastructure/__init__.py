#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import config, logging
from .dump_loader import load_api_dump

__all__ = [
    "config",
    "load_api_dump",
    "logging",
]

#!/usr/bin/env python3

"""Top-level API dump document."""

from typing import TypedDict

from .class_descriptor import ApiClass
from .enum_descriptor import ApiEnum

# Dump versions the index knows how to ingest
SUPPORTED_DUMP_VERSIONS: frozenset[int] = frozenset([1])


class ApiDump(TypedDict):
    """JSON API dump as produced by the engine."""

    Classes: list[ApiClass]
    Enums: list[ApiEnum]
    Version: int

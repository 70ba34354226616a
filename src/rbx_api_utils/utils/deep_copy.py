#!/usr/bin/env python3

"""Recursive copying of nested dump structures."""

from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def deep_copy(value: T) -> T:
    """Copy nested mappings and sequences so the result shares no containers.

    Mappings (keys included) become dicts, lists and tuples keep their type.
    Anything else, such as callables or host objects, is returned as-is.

    Args:
        value: Structure to copy

    Returns:
        Independent copy of ``value``
    """
    if isinstance(value, Mapping):
        return {deep_copy(k): deep_copy(v) for k, v in value.items()}  # type: ignore[return-value]
    if isinstance(value, list):
        return [deep_copy(item) for item in value]  # type: ignore[return-value]
    if isinstance(value, tuple):
        return tuple(deep_copy(item) for item in value)  # type: ignore[return-value]
    return value

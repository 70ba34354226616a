#!/usr/bin/env python3

"""Domain services layer."""

from .api_index import ApiIndex
from .property_accessor import (
    BehaviorAccess,
    NativeAccess,
    PropertyAccessor,
    PropertyBehavior,
    PropertyResolution,
    SafeResult,
)
from .type_checker import check_type, type_tag

__all__ = [
    "ApiIndex",
    "BehaviorAccess",
    "NativeAccess",
    "PropertyAccessor",
    "PropertyBehavior",
    "PropertyResolution",
    "SafeResult",
    "check_type",
    "type_tag",
]

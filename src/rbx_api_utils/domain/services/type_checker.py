#!/usr/bin/env python3

"""Validation of property values against value-type descriptors.

Each value-type category is handled by its own function; unsupported
categories fail closed.
"""

import math
import re
from collections.abc import Callable, Mapping
from numbers import Real
from typing import Any

from ...infrastructure.config import get_config
from ...infrastructure.logging import get_logger
from ..models.api import CONTENT_PROTOCOLS, EnumItem, HostObject, ValueTypeCategory

logger = get_logger(__name__)

ClassCheck = Callable[[Any, str], bool]

_CONTENT_PATTERN = re.compile(r"(?P<protocol>[^:/]+)://.+", re.DOTALL)


def is_number(value: object) -> bool:
    """Check for a real number; booleans are not numbers."""
    return isinstance(value, Real) and not isinstance(value, bool)


def type_tag(value: object) -> str:
    """Return the runtime type tag of a value.

    Host data types (Vector3, Color3, ...) are tagged with their class name.

    Examples:
        - True -> "boolean"
        - 1.5 -> "number"
        - "abc" -> "string"
        - None -> "nil"
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, EnumItem):
        return "EnumItem"
    if isinstance(value, HostObject):
        return "Instance"
    return type(value).__name__


def _default_class_check(value: Any, class_name: str) -> bool:
    return bool(value.IsA(class_name))


def check_class(name: str, value: object, class_check: ClassCheck | None = None) -> bool:
    """Accept host objects that are ``name`` or a subclass of it."""
    if not isinstance(value, HostObject):
        return False
    return (class_check or _default_class_check)(value, name)


def check_content(value: object) -> bool:
    """Accept ``<protocol>://<rest>`` strings with an allowed protocol."""
    if not isinstance(value, str):
        return False

    match = _CONTENT_PATTERN.fullmatch(value)
    if match is None:
        return False

    return match.group("protocol") in CONTENT_PROTOCOLS


def check_data_type(name: str, value: object) -> bool:
    if name == "Content":
        return check_content(value)
    return type_tag(value) == name


def check_enum(name: str, value: object) -> bool:
    """Accept enum items belonging to the enum ``name``."""
    if not isinstance(value, EnumItem):
        return False
    return value.EnumType == name


def _floor_non_number(value: Any) -> bool:
    # Known defect kept for compatibility with the dump tooling: numbers are
    # rejected and only non-numbers are floored. Numeric strings floor to a
    # number that never equals the string; anything else cannot be floored.
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            raise TypeError(f"Cannot floor string {value!r}") from None
        return False
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Cannot floor {type_tag(value)} value")
    return bool(math.floor(value) == value)


def check_primitive(name: str, value: Any) -> bool:
    if name in ("double", "float"):
        return is_number(value)

    if name in ("int", "int64"):
        if not is_number(value):
            return _floor_non_number(value)
        return False

    if name == "bool":
        return type_tag(value) == "boolean"

    return type_tag(value) == name


def check_type(
    value_type: Mapping[str, Any],
    value: Any,
    class_check: ClassCheck | None = None,
) -> bool:
    """Check a value against a value-type descriptor.

    Args:
        value_type: Descriptor with ``Category`` and ``Name``
        value: Candidate value
        class_check: Replacement for ``value.IsA(name)`` in the Class category

    Returns:
        True if the value is acceptable for the descriptor
    """
    raw_category = value_type.get("Category")
    name = value_type.get("Name", "")
    category = ValueTypeCategory.parse(raw_category)

    if category is ValueTypeCategory.CLASS:
        result = check_class(name, value, class_check)
    elif category is ValueTypeCategory.DATA_TYPE:
        result = check_data_type(name, value)
    elif category is ValueTypeCategory.ENUM:
        result = check_enum(name, value)
    elif category is ValueTypeCategory.PRIMITIVE:
        result = check_primitive(name, value)
    else:
        logger.warning(f"Value type category {raw_category} is not supported")
        return False

    if not result and get_config()["LOG_TYPE_CHECK_FAILURES"]:
        logger.debug(f"Value of type {type_tag(value)} rejected for {category}:{name}")

    return result

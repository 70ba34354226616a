#!/usr/bin/env python3

"""Value-type descriptors used for property type checking."""

from enum import Enum
from typing import TypedDict


class ValueType(TypedDict):
    """Tagged value-type descriptor (``Category`` + concrete ``Name``)."""

    Category: str
    Name: str


class ValueTypeCategory(str, Enum):
    """Categories a value-type descriptor can belong to."""

    CLASS = "Class"
    DATA_TYPE = "DataType"
    ENUM = "Enum"
    PRIMITIVE = "Primitive"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, category: object) -> "ValueTypeCategory | None":
        """Convert a ``Category`` tag, returning None when it is not supported."""
        if isinstance(category, ValueTypeCategory):
            return category
        for member in cls:
            if member.value == category:
                return member
        return None


# Content strings are case-sensitive: "rbxassetid://1" is valid, "RBXASSETID://1" is not
CONTENT_PROTOCOLS: frozenset[str] = frozenset(
    [
        "rbxasset",
        "rbxassetid",
        "rbxgameasset",
        "rbxhttp",
        "rbxthumb",
        "http",
        "https",
    ]
)

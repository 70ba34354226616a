#!/usr/bin/env python3

"""Enum descriptor shapes and the enum item reference type."""

from dataclasses import dataclass
from typing import TypedDict


class ApiEnumItem(TypedDict):
    """Single item of an enumeration."""

    Name: str
    Value: int


class ApiEnum(TypedDict):
    """Enumeration entry of the API dump."""

    Items: list[ApiEnumItem]
    Name: str


@dataclass(frozen=True)
class EnumItem:
    """Reference to a concrete enumeration item.

    This is the value shape the type checker accepts for ``Enum`` value
    types: the item is valid when ``EnumType`` names the expected enum.
    """

    Name: str
    Value: int
    EnumType: str

    def __str__(self) -> str:
        return f"Enum.{self.EnumType}.{self.Name}"

#!/usr/bin/env python3

"""Class descriptor shape and hierarchy constants."""

from typing import TypedDict

from .member_descriptor import ApiClassMember

# Superclass value marking the top of an inheritance chain
ROOT_SENTINEL = "<<<ROOT>>>"


class ApiClass(TypedDict, total=False):
    """Class entry of the API dump.

    ``Name``, ``Superclass`` and ``Members`` are interpreted by the index;
    every other field is carried through untouched.
    """

    Members: list[ApiClassMember]
    MemoryCategory: str
    Name: str
    Superclass: str
    Tags: list[str]

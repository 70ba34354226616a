#!/usr/bin/env python3

"""Member descriptor shapes as they appear in the API dump."""

from typing import TypedDict, Union

from .value_type import ValueType


class ParameterDescriptor(TypedDict):
    """Parameter of an event or callback."""

    Name: str
    Type: ValueType


class FunctionParameterDescriptor(ParameterDescriptor, total=False):
    """Function parameter, optionally carrying a default value."""

    Default: str


class PropertySecurity(TypedDict):
    Read: str
    Write: str


class PropertySerialization(TypedDict):
    CanLoad: bool
    CanSave: bool


class _MemberBase(TypedDict):
    MemberType: str
    Name: str


class ApiCallback(_MemberBase, total=False):
    """Callback member (Lua-side handler invoked by the engine)."""

    Parameters: list[ParameterDescriptor]
    ReturnType: ValueType
    Security: str
    ThreadSafety: str
    Tags: list[str]


class ApiEvent(_MemberBase, total=False):
    """Event member."""

    Parameters: list[ParameterDescriptor]
    Security: str
    ThreadSafety: str
    Tags: list[str]


class ApiFunction(_MemberBase, total=False):
    """Function member."""

    Parameters: list[FunctionParameterDescriptor]
    ReturnType: ValueType
    Security: str
    ThreadSafety: str
    Tags: list[str]


class ApiProperty(_MemberBase, total=False):
    """Property member; ``ValueType`` drives write validation."""

    Category: str
    Security: PropertySecurity
    Serialization: PropertySerialization
    Tags: list[str]
    ValueType: ValueType
    ThreadSafety: str


ApiClassMember = Union[ApiCallback, ApiEvent, ApiFunction, ApiProperty]

#!/usr/bin/env python3

"""API dump domain models."""

from .api_dump import SUPPORTED_DUMP_VERSIONS, ApiDump
from .class_descriptor import ROOT_SENTINEL, ApiClass
from .enum_descriptor import ApiEnum, ApiEnumItem, EnumItem
from .host_object import HostObject
from .member_descriptor import (
    ApiCallback,
    ApiClassMember,
    ApiEvent,
    ApiFunction,
    ApiProperty,
    FunctionParameterDescriptor,
    ParameterDescriptor,
)
from .member_filter import MemberFilter, MemberFilterCallback
from .member_kind import MemberKind
from .value_type import CONTENT_PROTOCOLS, ValueType, ValueTypeCategory

__all__ = [
    "ApiCallback",
    "ApiClass",
    "ApiClassMember",
    "ApiDump",
    "ApiEnum",
    "ApiEnumItem",
    "ApiEvent",
    "ApiFunction",
    "ApiProperty",
    "CONTENT_PROTOCOLS",
    "EnumItem",
    "FunctionParameterDescriptor",
    "HostObject",
    "MemberFilter",
    "MemberFilterCallback",
    "MemberKind",
    "ParameterDescriptor",
    "ROOT_SENTINEL",
    "SUPPORTED_DUMP_VERSIONS",
    "ValueType",
    "ValueTypeCategory",
]

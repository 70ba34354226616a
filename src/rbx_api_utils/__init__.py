"""RBX API Utils - indexed API dump lookups and type-checked property access."""

from .domain.errors import (
    ApiUtilsError,
    HierarchyCycleError,
    InvalidApiDumpError,
    MemberNotFoundError,
    MissingBehaviorError,
    TypeCheckError,
    UnsupportedDumpVersionError,
)
from .domain.models.api import ROOT_SENTINEL, EnumItem, HostObject, MemberFilter, MemberKind
from .domain.services import (
    ApiIndex,
    PropertyAccessor,
    PropertyBehavior,
    SafeResult,
    check_type,
)
from .infrastructure.config import Config
from .main import main

create_api_index = ApiIndex
create_property_accessor = PropertyAccessor

__all__ = [
    "ApiIndex",
    "ApiUtilsError",
    "Config",
    "EnumItem",
    "HierarchyCycleError",
    "HostObject",
    "InvalidApiDumpError",
    "MemberFilter",
    "MemberKind",
    "MemberNotFoundError",
    "MissingBehaviorError",
    "PropertyAccessor",
    "PropertyBehavior",
    "ROOT_SENTINEL",
    "SafeResult",
    "TypeCheckError",
    "UnsupportedDumpVersionError",
    "check_type",
    "create_api_index",
    "create_property_accessor",
    "main",
]

#!/usr/bin/env python3

"""Error types raised by the API index and property accessor.

Lookups that simply find nothing return None/False; the errors below are
reserved for contract violations where continuing would be meaningless.
"""


class ApiUtilsError(Exception):
    """Base error for API index and accessor failures."""

    pass


class UnsupportedDumpVersionError(ApiUtilsError, ValueError):
    """API dump declares a version the index cannot ingest."""

    def __init__(self, version: object) -> None:
        super().__init__(f"API dump version {version} is not supported")
        self.version = version


class InvalidApiDumpError(ApiUtilsError, ValueError):
    """API dump is structurally malformed."""

    pass


class HierarchyCycleError(ApiUtilsError, RuntimeError):
    """Superclass links loop back onto an already visited class."""

    def __init__(self, class_name: str, chain: list[str]) -> None:
        super().__init__(
            f"Inheritance cycle detected at class {class_name}: {' -> '.join(chain)}"
        )
        self.class_name = class_name
        self.chain = chain


class MemberNotFoundError(ApiUtilsError, LookupError):
    """Requested class or member is not present in the index."""

    def __init__(self, class_name: str, member_type: str, member_name: str) -> None:
        super().__init__(
            f"{member_type} {member_name} does not exist, "
            f"or class {class_name} does not exist"
        )
        self.class_name = class_name
        self.member_type = member_type
        self.member_name = member_name


class MissingBehaviorError(ApiUtilsError, LookupError):
    """Non-native member has no registered behavior."""

    def __init__(self, class_name: str, member_name: str | None = None) -> None:
        if member_name is None:
            message = f"No behavior table is defined for class {class_name}"
        else:
            message = f"No behavior is defined for {class_name}.{member_name}"
        super().__init__(message)
        self.class_name = class_name
        self.member_name = member_name


class TypeCheckError(ApiUtilsError, TypeError):
    """Value rejected by the type checker before a property write."""

    def __init__(self, property_name: str, value_type_name: str, value: object) -> None:
        super().__init__(
            f"Type check failed for {property_name}, expected {value_type_name} "
            f"(got {type(value).__name__})"
        )
        self.property_name = property_name
        self.value_type_name = value_type_name
        self.value = value

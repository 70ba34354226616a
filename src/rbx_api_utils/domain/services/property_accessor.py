#!/usr/bin/env python3

"""Property reads and writes on host objects, driven by an API index.

Native properties are read and written directly on the host object.
Properties added to the index after ingestion have no host-side storage;
they are served by behaviors registered on the accessor.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ...infrastructure.logging import get_logger
from ..errors import MemberNotFoundError, MissingBehaviorError, TypeCheckError
from ..models.api import HostObject, MemberKind, ValueType
from .api_index import ApiIndex
from .type_checker import check_type

logger = get_logger(__name__)

ClassCheckBehavior = Callable[[Any], bool]


@dataclass(frozen=True)
class PropertyBehavior:
    """Getter/setter pair standing in for a non-native property."""

    get: Callable[[Any], Any]
    set: Callable[[Any, Any], None]


class SafeResult(NamedTuple):
    """Outcome of a ``safe`` property access.

    ``value`` holds the read value (None for writes) on success, or the
    raised exception on failure.
    """

    success: bool
    value: Any


@dataclass(frozen=True)
class NativeAccess:
    """Property is stored on the host object itself."""


@dataclass(frozen=True)
class BehaviorAccess:
    """Property is served by a registered behavior."""

    behavior: PropertyBehavior


@dataclass(frozen=True)
class PropertyResolution:
    """Where a property lives and how to reach it."""

    property_name: str
    owner_class_name: str
    value_type: ValueType | None
    access: NativeAccess | BehaviorAccess


@dataclass
class _ClassBehaviors:
    members: dict[MemberKind, dict[str, PropertyBehavior]] = field(
        default_factory=lambda: {kind: {} for kind in MemberKind}
    )


class PropertyAccessor:
    """Reads and writes properties of host objects through an ApiIndex.

    The index is shared and only read. Behaviors registered here are
    private to this accessor.
    """

    def __init__(self, api_index: ApiIndex):
        """Initialize accessor.

        Args:
            api_index: Index describing the host's classes
        """
        self.api_index = api_index
        self._class_checks: dict[str, ClassCheckBehavior] = {}
        self._member_behaviors: dict[str, _ClassBehaviors] = {}

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_property(
        self,
        obj: HostObject,
        property_name: str,
        override_class_name: str | None = None,
        no_check: bool = False,
    ) -> PropertyResolution:
        """Resolve the owning class and access path of a property.

        Args:
            obj: Host object the property belongs to
            property_name: Name of the property
            override_class_name: Class to resolve against instead of ``obj.ClassName``
            no_check: Skip the inheritance walk and assume the class itself
                declares the property

        Returns:
            PropertyResolution for the property

        Raises:
            MemberNotFoundError: If the property does not exist on the class
            MissingBehaviorError: If a non-native property has no behavior
        """
        api_index = self.api_index
        class_name = override_class_name or obj.ClassName

        owner_class_name = api_index.find_member_owner(
            class_name, MemberKind.PROPERTY, property_name, include_inherited=not no_check
        )
        if owner_class_name is None:
            raise MemberNotFoundError(class_name, MemberKind.PROPERTY.value, property_name)

        member = api_index.get_class_member_data(
            owner_class_name, MemberKind.PROPERTY, property_name
        )
        value_type = member.get("ValueType") if member is not None else None

        access: NativeAccess | BehaviorAccess
        if api_index.is_class_member_native(owner_class_name, MemberKind.PROPERTY, property_name):
            access = NativeAccess()
        else:
            access = BehaviorAccess(self._get_property_behavior(owner_class_name, property_name))

        return PropertyResolution(
            property_name=property_name,
            owner_class_name=owner_class_name,
            value_type=value_type,
            access=access,
        )

    def _get_property_behavior(self, class_name: str, property_name: str) -> PropertyBehavior:
        class_behaviors = self._member_behaviors.get(class_name)
        if class_behaviors is None:
            raise MissingBehaviorError(class_name)

        behavior = class_behaviors.members[MemberKind.PROPERTY].get(property_name)
        if behavior is None:
            raise MissingBehaviorError(class_name, property_name)

        return behavior

    # ------------------------------------------------------------------
    # Property access
    # ------------------------------------------------------------------

    def get_property(
        self,
        obj: HostObject,
        property_name: str,
        override_class_name: str | None = None,
        no_check: bool = False,
        safe: bool = False,
    ) -> Any:
        """Read a property.

        Args:
            obj: Host object
            property_name: Name of the property
            override_class_name: Class to resolve against instead of ``obj.ClassName``
            no_check: Assume the resolved class declares the property itself
            safe: Capture read failures and return a SafeResult instead

        Returns:
            Property value, or SafeResult when ``safe`` is set
        """
        resolution = self.resolve_property(obj, property_name, override_class_name, no_check)

        if isinstance(resolution.access, NativeAccess):
            def read() -> Any:
                return getattr(obj, property_name)
        else:
            behavior = resolution.access.behavior

            def read() -> Any:
                return behavior.get(obj)

        if not safe:
            return read()

        try:
            return SafeResult(True, read())
        except Exception as e:
            logger.debug(f"Safe read of {resolution.owner_class_name}.{property_name} failed: {e}")
            return SafeResult(False, e)

    def set_property(
        self,
        obj: HostObject,
        property_name: str,
        new_value: Any,
        override_class_name: str | None = None,
        no_check: bool = False,
        safe: bool = False,
    ) -> SafeResult | None:
        """Validate and write a property.

        The value is type-checked before anything is written, for native
        and behavior-backed properties alike. ``safe`` only covers the
        write itself.

        Args:
            obj: Host object
            property_name: Name of the property
            new_value: Value to write
            override_class_name: Class to resolve against instead of ``obj.ClassName``
            no_check: Assume the resolved class declares the property itself
            safe: Capture write failures and return a SafeResult instead

        Returns:
            SafeResult when ``safe`` is set, otherwise None

        Raises:
            TypeCheckError: If ``new_value`` does not match the property's type
        """
        resolution = self.resolve_property(obj, property_name, override_class_name, no_check)
        value_type = resolution.value_type or {}

        if not check_type(value_type, new_value, class_check=self.is_a):
            raise TypeCheckError(property_name, str(value_type.get("Name")), new_value)

        if isinstance(resolution.access, NativeAccess):
            def write() -> None:
                setattr(obj, property_name, new_value)
        else:
            behavior = resolution.access.behavior

            def write() -> None:
                behavior.set(obj, new_value)

        if not safe:
            write()
            return None

        try:
            write()
            return SafeResult(True, None)
        except Exception as e:
            logger.debug(
                f"Safe write of {resolution.owner_class_name}.{property_name} failed: {e}"
            )
            return SafeResult(False, e)

    def is_a(self, obj: Any, class_name: str) -> bool:
        """Capability check honoring registered class-check behaviors."""
        class_check = self._class_checks.get(class_name)
        if class_check is not None:
            return bool(class_check(obj))
        return bool(obj.IsA(class_name))

    # ------------------------------------------------------------------
    # Behavior registration
    # ------------------------------------------------------------------

    def add_class_check_behavior(self, class_name: str, behavior: ClassCheckBehavior) -> bool:
        """Register a capability check for a non-native class.

        Returns:
            True if registered; False if the class is unknown, native, or
            already has a check
        """
        api_index = self.api_index

        if not api_index.does_class_exist(class_name):
            return False
        if api_index.is_class_native(class_name):
            return False
        if class_name in self._class_checks:
            return False

        self._class_checks[class_name] = behavior
        logger.debug(f"Registered class check behavior for {class_name}")
        return True

    def add_class_member_behavior(
        self,
        class_name: str,
        member_type: str | MemberKind,
        member_name: str,
        behavior: PropertyBehavior,
    ) -> bool:
        """Register get/set behavior for a non-native property.

        The property must be declared on ``class_name`` itself.

        Returns:
            True if registered
        """
        if MemberKind.parse(member_type) is not MemberKind.PROPERTY:
            logger.warning(
                f"Non-Property behaviors are not supported "
                f"(got {member_type} for {class_name}.{member_name})"
            )
            return False

        api_index = self.api_index
        kind = MemberKind.PROPERTY

        if not api_index.does_class_member_exist(
            class_name, kind, member_name, include_inherited=False
        ):
            return False
        if api_index.is_class_member_native(class_name, kind, member_name):
            return False

        class_behaviors = self._member_behaviors.setdefault(class_name, _ClassBehaviors())
        kind_behaviors = class_behaviors.members[kind]
        if member_name in kind_behaviors:
            return False

        kind_behaviors[member_name] = behavior
        logger.debug(f"Registered {kind} behavior for {class_name}.{member_name}")
        return True

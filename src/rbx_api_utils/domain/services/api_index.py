#!/usr/bin/env python3

"""In-memory index over a versioned API dump.

The index deep-copies the dump it is given and builds name->position
mappings for classes, class members, enums and enum items, alongside
nativity flags recording whether each entry came from the ingested dump
or was added afterwards. All queries are answered from these mappings;
the dump is never rescanned.

Positions and flags grow append-only in lock-step with the underlying
class/member sequences. Nothing is ever removed or edited in place.
"""

from collections.abc import Iterator, Mapping
from typing import Any, cast

from ...infrastructure.config import get_config
from ...infrastructure.logging import get_logger, log_timing
from ...utils import deep_copy
from ..errors import HierarchyCycleError, InvalidApiDumpError, UnsupportedDumpVersionError
from ..models.api import (
    ROOT_SENTINEL,
    SUPPORTED_DUMP_VERSIONS,
    ApiClass,
    ApiClassMember,
    ApiEnum,
    ApiEnumItem,
    EnumItem,
    MemberFilter,
    MemberKind,
)

logger = get_logger(__name__)

MemberFilterParams = MemberFilter | Mapping[str, Any] | None


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ApiIndex:
    """Lookup structures over the classes and enums of an API dump.

    Example:
        >>> index = ApiIndex({"Version": 1, "Classes": [...], "Enums": [...]})
        >>> index.get_class_hierarchy("Part")
        ['Part', 'BasePart', 'PVInstance', 'Instance']
    """

    @log_timing
    def __init__(
        self,
        api_dump: Mapping[str, Any],
        strict_enum_validation: bool | None = None,
    ):
        """Index an API dump.

        Args:
            api_dump: Dump document with ``Version``, ``Classes`` and ``Enums``
            strict_enum_validation: Reject enums with duplicate item names or
                values and non-integer item values. Defaults to the
                ``STRICT_ENUM_VALIDATION`` configuration value.

        Raises:
            UnsupportedDumpVersionError: If ``Version`` is not supported
            InvalidApiDumpError: If the dump is malformed
        """
        if not isinstance(api_dump, Mapping):
            raise InvalidApiDumpError(
                f"API dump must be a mapping, got {type(api_dump).__name__}"
            )

        if strict_enum_validation is None:
            strict_enum_validation = bool(get_config()["STRICT_ENUM_VALIDATION"])

        # The index owns its copy; the caller's document is never touched
        dump: dict[str, Any] = deep_copy(dict(api_dump))

        version = dump.get("Version")
        if not _is_integer(version) or version not in SUPPORTED_DUMP_VERSIONS:
            raise UnsupportedDumpVersionError(version)

        self._version: int = cast(int, version)
        self._classes: list[ApiClass] = []
        self._enums: list[ApiEnum] = []

        # Position mappings
        self._class_positions: dict[str, int] = {}
        self._member_positions: list[dict[MemberKind, dict[str, int]]] = []
        self._enum_positions: dict[str, int] = {}
        self._enum_item_name_positions: list[dict[str, int]] = []
        self._enum_item_value_positions: list[dict[int, int]] = []

        # Child name -> superclass name, for indexed (first-declared) classes
        self._superclasses: dict[str, str] = {}

        # Nativity flags, parallel to the data sequences
        self._class_nativity: list[bool] = []
        self._member_nativity: list[list[bool]] = []
        self._enum_nativity: list[bool] = []
        self._enum_item_nativity: list[list[bool]] = []

        for class_data in self._require_sequence(dump, "Classes"):
            self._register_class(class_data, native=True)

        for enum_data in self._require_sequence(dump, "Enums"):
            if strict_enum_validation:
                self._validate_enum(enum_data)
            self._register_enum(enum_data, native=True)

        member_count = sum(len(flags) for flags in self._member_nativity)
        item_count = sum(len(flags) for flags in self._enum_item_nativity)
        logger.info(
            f"Indexed API dump v{self._version}: {len(self._classes)} classes "
            f"({member_count} members), {len(self._enums)} enums ({item_count} items)"
        )

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    @staticmethod
    def _require_sequence(dump: dict[str, Any], key: str) -> list[Any]:
        entries = dump.get(key)
        if isinstance(entries, tuple):
            entries = list(entries)
        if not isinstance(entries, list):
            raise InvalidApiDumpError(
                f"API dump field {key} must be a sequence, got {type(entries).__name__}"
            )
        return entries

    @staticmethod
    def _require_name(descriptor: object, what: str) -> str:
        if not isinstance(descriptor, dict):
            raise InvalidApiDumpError(
                f"{what} descriptor must be a mapping, got {type(descriptor).__name__}"
            )
        name = descriptor.get("Name")
        if not isinstance(name, str):
            raise InvalidApiDumpError(f"{what} descriptor has no string Name: {descriptor!r}")
        return name

    def _register_class(self, class_data: ApiClass, native: bool) -> int:
        """Append a class and index its members. Returns its position."""
        class_name = self._require_name(class_data, "Class")

        members = class_data.get("Members")
        if members is None or isinstance(members, tuple):
            class_data["Members"] = list(members or [])
        elif not isinstance(members, list):
            raise InvalidApiDumpError(f"Members of class {class_name} must be a sequence")

        position = len(self._classes)
        self._classes.append(class_data)
        self._class_nativity.append(native)
        self._member_positions.append({kind: {} for kind in MemberKind})
        self._member_nativity.append([])

        if class_name in self._class_positions:
            logger.warning(
                f"Duplicate class {class_name} at position {position}; "
                f"keeping the first declaration"
            )
        else:
            self._class_positions[class_name] = position
            self._superclasses[class_name] = class_data.get("Superclass", ROOT_SENTINEL)

        for member_position, member in enumerate(class_data["Members"]):
            self._register_member(position, member_position, member, native)

        return position

    def _register_member(
        self,
        class_position: int,
        member_position: int,
        member: ApiClassMember,
        native: bool,
    ) -> None:
        """Index a member already present in its class's member list."""
        class_name = self._classes[class_position]["Name"]
        member_name = self._require_name(member, f"Member of class {class_name}")

        self._member_nativity[class_position].append(native)

        kind = MemberKind.parse(member.get("MemberType"))
        if kind is None:
            logger.warning(
                f"Member {class_name}.{member_name} has unknown MemberType "
                f"{member.get('MemberType')!r}; it will not be indexed"
            )
            return

        # First declaration wins for duplicate (kind, name) pairs
        self._member_positions[class_position][kind].setdefault(member_name, member_position)

    def _validate_enum(self, enum_data: ApiEnum) -> None:
        enum_name = self._require_name(enum_data, "Enum")
        seen_names: set[str] = set()
        seen_values: set[int] = set()

        items = enum_data.get("Items") or []
        if not isinstance(items, (list, tuple)):
            raise InvalidApiDumpError(f"Items of enum {enum_name} must be a sequence")

        for item in items:
            item_name = self._require_name(item, f"Item of enum {enum_name}")
            item_value = item.get("Value")

            if not _is_integer(item_value):
                raise InvalidApiDumpError(
                    f"EnumItem {enum_name}.{item_name} has non-integer value {item_value!r}"
                )
            if item_name in seen_names:
                raise InvalidApiDumpError(f"Enum {enum_name} declares item {item_name} twice")
            if item_value in seen_values:
                raise InvalidApiDumpError(
                    f"Enum {enum_name} declares value {item_value} twice (at {item_name})"
                )

            seen_names.add(item_name)
            seen_values.add(item_value)

    def _register_enum(self, enum_data: ApiEnum, native: bool) -> int:
        enum_name = self._require_name(enum_data, "Enum")

        items = enum_data.get("Items")
        if items is None or isinstance(items, tuple):
            enum_data["Items"] = list(items or [])
        elif not isinstance(items, list):
            raise InvalidApiDumpError(f"Items of enum {enum_name} must be a sequence")

        position = len(self._enums)
        self._enums.append(enum_data)
        self._enum_nativity.append(native)

        name_positions: dict[str, int] = {}
        value_positions: dict[int, int] = {}
        item_nativity: list[bool] = []

        for item_position, item in enumerate(enum_data["Items"]):
            item_name = self._require_name(item, f"Item of enum {enum_name}")
            item_nativity.append(native)
            name_positions.setdefault(item_name, item_position)

            item_value = item.get("Value")
            if _is_integer(item_value):
                value_positions.setdefault(item_value, item_position)

        self._enum_item_name_positions.append(name_positions)
        self._enum_item_value_positions.append(value_positions)
        self._enum_item_nativity.append(item_nativity)
        self._enum_positions.setdefault(enum_name, position)

        return position

    # ------------------------------------------------------------------
    # Hierarchy traversal
    # ------------------------------------------------------------------

    def _iter_lineage(self, class_name: str, include_inherited: bool = True) -> Iterator[int]:
        """Yield class positions from ``class_name`` up to the root.

        A superclass that is not indexed ends the walk. Revisiting a class
        raises HierarchyCycleError, so a walk never exceeds the number of
        indexed classes.
        """
        position = self._class_positions.get(class_name)
        visited: set[str] = set()
        chain: list[str] = []

        while position is not None:
            current_name = self._classes[position]["Name"]
            if current_name in visited:
                raise HierarchyCycleError(current_name, chain + [current_name])

            visited.add(current_name)
            chain.append(current_name)
            yield position

            if not include_inherited:
                return

            superclass = self._superclasses.get(current_name, ROOT_SENTINEL)
            if superclass == ROOT_SENTINEL:
                return

            position = self._class_positions.get(superclass)

    # ------------------------------------------------------------------
    # Class queries
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        """Version tag of the ingested dump."""
        return self._version

    def class_names(self) -> list[str]:
        """Names of all indexed classes, in index order."""
        return list(self._class_positions)

    def enum_names(self) -> list[str]:
        """Names of all indexed enums, in index order."""
        return list(self._enum_positions)

    def get_class_data(self, class_name: str) -> ApiClass | None:
        """Return the class descriptor, or None if the class is unknown."""
        position = self._class_positions.get(class_name)
        if position is None:
            return None
        return self._classes[position]

    def get_class_hierarchy(self, class_name: str) -> list[str] | None:
        """Return class names from ``class_name`` up to its root class.

        Returns:
            ``[class_name, superclass, ..., root_class]`` or None if unknown

        Raises:
            HierarchyCycleError: If the superclass chain loops
        """
        if class_name not in self._class_positions:
            return None
        return [self._classes[position]["Name"] for position in self._iter_lineage(class_name)]

    def get_class_members(
        self,
        class_name: str,
        member_type: str | MemberKind,
        filter_params: MemberFilterParams = None,
    ) -> dict[str, list[ApiClassMember]] | None:
        """Collect members of one kind along the inheritance chain.

        Args:
            class_name: Class to start from
            member_type: Member kind to collect
            filter_params: MemberFilter or mapping of PascalCase filter options

        Returns:
            Mapping of each visited class name to its accepted members, in
            declaration order, or None if the class or kind is unknown
        """
        kind = MemberKind.parse(member_type)
        if kind is None or class_name not in self._class_positions:
            return None

        member_filter = MemberFilter.from_params(filter_params)
        members: dict[str, list[ApiClassMember]] = {}
        yielded_names: set[str] = set()

        for position in self._iter_lineage(class_name, member_filter.include_inherited_members):
            class_data = self._classes[position]
            owner_name = class_data["Name"]
            class_members = members[owner_name] = []

            for member in class_data["Members"]:
                if member.get("MemberType") != kind.value:
                    continue
                if not member_filter.accepts(owner_name, member):
                    continue

                if member_filter.remove_overridden_members:
                    if member["Name"] in yielded_names:
                        continue
                    yielded_names.add(member["Name"])

                class_members.append(member)

        return members

    def get_class_callbacks(
        self, class_name: str, filter_params: MemberFilterParams = None
    ) -> dict[str, list[ApiClassMember]] | None:
        return self.get_class_members(class_name, MemberKind.CALLBACK, filter_params)

    def get_class_events(
        self, class_name: str, filter_params: MemberFilterParams = None
    ) -> dict[str, list[ApiClassMember]] | None:
        return self.get_class_members(class_name, MemberKind.EVENT, filter_params)

    def get_class_functions(
        self, class_name: str, filter_params: MemberFilterParams = None
    ) -> dict[str, list[ApiClassMember]] | None:
        return self.get_class_members(class_name, MemberKind.FUNCTION, filter_params)

    def get_class_properties(
        self, class_name: str, filter_params: MemberFilterParams = None
    ) -> dict[str, list[ApiClassMember]] | None:
        return self.get_class_members(class_name, MemberKind.PROPERTY, filter_params)

    def _member_position(
        self, class_name: str, member_type: str | MemberKind, member_name: str
    ) -> tuple[int, int] | None:
        kind = MemberKind.parse(member_type)
        if kind is None:
            return None

        class_position = self._class_positions.get(class_name)
        if class_position is None:
            return None

        member_position = self._member_positions[class_position][kind].get(member_name)
        if member_position is None:
            return None

        return class_position, member_position

    def get_class_member_data(
        self, class_name: str, member_type: str | MemberKind, member_name: str
    ) -> ApiClassMember | None:
        """Return a member declared directly on ``class_name`` (no inheritance)."""
        positions = self._member_position(class_name, member_type, member_name)
        if positions is None:
            return None

        class_position, member_position = positions
        return self._classes[class_position]["Members"][member_position]

    def find_member_owner(
        self,
        class_name: str,
        member_type: str | MemberKind,
        member_name: str,
        include_inherited: bool = True,
    ) -> str | None:
        """Find the nearest class, starting at ``class_name``, declaring a member.

        Returns:
            Name of the declaring class, or None if no class in the walked
            chain declares it
        """
        kind = MemberKind.parse(member_type)
        if kind is None:
            return None

        for position in self._iter_lineage(class_name, include_inherited):
            if member_name in self._member_positions[position][kind]:
                return self._classes[position]["Name"]

        return None

    def does_class_exist(self, class_name: str) -> bool:
        return class_name in self._class_positions

    def does_class_member_exist(
        self,
        class_name: str,
        member_type: str | MemberKind,
        member_name: str,
        include_inherited: bool = True,
    ) -> bool:
        """Check whether a member exists on a class or, optionally, its ancestors."""
        owner = self.find_member_owner(class_name, member_type, member_name, include_inherited)
        return owner is not None

    # ------------------------------------------------------------------
    # Nativity
    # ------------------------------------------------------------------

    def is_class_native(self, class_name: str) -> bool | None:
        """Return True if the class came from the ingested dump, None if unknown."""
        position = self._class_positions.get(class_name)
        if position is None:
            return None
        return self._class_nativity[position]

    def is_class_member_native(
        self, class_name: str, member_type: str | MemberKind, member_name: str
    ) -> bool | None:
        """Return True if the member came from the ingested dump, None if unknown.

        Only members declared directly on ``class_name`` are considered.
        """
        positions = self._member_position(class_name, member_type, member_name)
        if positions is None:
            return None

        class_position, member_position = positions
        return self._member_nativity[class_position][member_position]

    def is_enum_native(self, enum_name: str) -> bool | None:
        position = self._enum_positions.get(enum_name)
        if position is None:
            return None
        return self._enum_nativity[position]

    def _enum_item_position(
        self, enum_name: str, item_name_or_value: str | int
    ) -> tuple[int, int] | None:
        enum_position = self._enum_positions.get(enum_name)
        if enum_position is None:
            return None

        item_position: int | None = None
        if isinstance(item_name_or_value, str):
            item_position = self._enum_item_name_positions[enum_position].get(item_name_or_value)
        elif _is_integer(item_name_or_value):
            item_position = self._enum_item_value_positions[enum_position].get(item_name_or_value)

        if item_position is None:
            return None
        return enum_position, item_position

    def is_enum_item_native(self, enum_name: str, item_name_or_value: str | int) -> bool | None:
        """Return the nativity of an enum item looked up by name or by value."""
        positions = self._enum_item_position(enum_name, item_name_or_value)
        if positions is None:
            return None

        enum_position, item_position = positions
        return self._enum_item_nativity[enum_position][item_position]

    # ------------------------------------------------------------------
    # Enum queries
    # ------------------------------------------------------------------

    def get_enum_data(self, enum_name: str) -> ApiEnum | None:
        position = self._enum_positions.get(enum_name)
        if position is None:
            return None
        return self._enums[position]

    def get_enum_item_data(
        self, enum_name: str, item_name_or_value: str | int
    ) -> ApiEnumItem | None:
        """Return an enum item descriptor looked up by name or by value."""
        positions = self._enum_item_position(enum_name, item_name_or_value)
        if positions is None:
            return None

        enum_position, item_position = positions
        return self._enums[enum_position]["Items"][item_position]

    def get_enum_item(self, enum_name: str, item_name_or_value: str | int) -> EnumItem | None:
        """Return an EnumItem reference suitable for ``Enum`` typed properties."""
        item = self.get_enum_item_data(enum_name, item_name_or_value)
        if item is None:
            return None
        return EnumItem(Name=item["Name"], Value=item["Value"], EnumType=enum_name)

    # ------------------------------------------------------------------
    # Additive mutation
    # ------------------------------------------------------------------

    def add_class(self, api_class: ApiClass) -> bool:
        """Add a non-native class.

        The superclass is not required to exist. Members carried by the
        descriptor are indexed as non-native as well.

        Returns:
            True if the class was added, False if the name is already taken
        """
        class_name = self._require_name(api_class, "Class")
        if class_name in self._class_positions:
            logger.debug(f"Class {class_name} already exists; not adding")
            return False

        self._register_class(deep_copy(api_class), native=False)
        logger.debug(f"Added class {class_name}")
        return True

    def add_class_member(self, class_name: str, api_class_member: ApiClassMember) -> bool:
        """Add a non-native member to an existing class.

        Shadowing a member inherited from an ancestor is allowed; only an
        existing (kind, name) pair on this exact class blocks the addition.

        Returns:
            True if the member was added
        """
        kind = MemberKind.parse(api_class_member.get("MemberType"))
        if kind is None:
            return False

        class_position = self._class_positions.get(class_name)
        if class_position is None:
            return False

        member_name = self._require_name(api_class_member, f"Member of class {class_name}")
        if member_name in self._member_positions[class_position][kind]:
            logger.debug(f"{kind} {class_name}.{member_name} already exists; not adding")
            return False

        members = self._classes[class_position]["Members"]
        members.append(deep_copy(api_class_member))
        self._register_member(class_position, len(members) - 1, members[-1], native=False)

        logger.debug(f"Added {kind} {class_name}.{member_name}")
        return True

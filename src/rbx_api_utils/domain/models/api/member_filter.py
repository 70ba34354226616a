#!/usr/bin/env python3

"""Filter options for inherited member resolution."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .member_descriptor import ApiClassMember

MemberFilterCallback = Callable[[str, ApiClassMember], bool]


@dataclass(frozen=True)
class MemberFilter:
    """Controls how members are collected along an inheritance chain."""

    include_inherited_members: bool = True
    """Keep walking superclasses after the starting class."""
    remove_overridden_members: bool = True
    """Drop ancestor members whose name was already yielded by a subclass."""
    filter_callback: MemberFilterCallback | None = None
    """Predicate over (owning class name, member); None accepts everything."""

    def accepts(self, class_name: str, member: ApiClassMember) -> bool:
        """Apply the filter callback, if any."""
        if self.filter_callback is None:
            return True
        return bool(self.filter_callback(class_name, member))

    @classmethod
    def from_params(
        cls, params: "MemberFilter | Mapping[str, Any] | None"
    ) -> "MemberFilter":
        """Build a filter from an instance, a PascalCase option mapping, or None.

        Mapping keys follow the dump tooling's naming: ``IncludeInheritedMembers``,
        ``RemoveOverridenMembers`` and ``FilterCallback``. Missing or None values
        fall back to the defaults.

        Args:
            params: Filter configuration

        Returns:
            MemberFilter instance
        """
        if params is None:
            return cls()
        if isinstance(params, MemberFilter):
            return params

        include_inherited = params.get("IncludeInheritedMembers")
        remove_overridden = params.get("RemoveOverridenMembers")

        return cls(
            include_inherited_members=True if include_inherited is None else bool(include_inherited),
            remove_overridden_members=True if remove_overridden is None else bool(remove_overridden),
            filter_callback=params.get("FilterCallback"),
        )

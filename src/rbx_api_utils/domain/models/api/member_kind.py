#!/usr/bin/env python3

"""Class member kinds and their lookup helpers."""

from enum import Enum


class MemberKind(str, Enum):
    """Kinds of members a class descriptor may declare.

    The value of each kind is the ``MemberType`` tag used by the API dump.
    """

    CALLBACK = "Callback"
    EVENT = "Event"
    FUNCTION = "Function"
    PROPERTY = "Property"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, member_type: "str | MemberKind | None") -> "MemberKind | None":
        """Convert a ``MemberType`` tag to a MemberKind.

        Args:
            member_type: Tag from a member descriptor (e.g. "Property")

        Returns:
            Matching MemberKind, or None for unrecognized tags
        """
        if isinstance(member_type, MemberKind):
            return member_type
        if not isinstance(member_type, str):
            return None
        return _KIND_BY_TAG.get(member_type)

    @classmethod
    def is_valid(cls, member_type: "str | MemberKind | None") -> bool:
        """Check whether a tag names a recognized member kind."""
        return cls.parse(member_type) is not None


_KIND_BY_TAG: dict[str, MemberKind] = {kind.value: kind for kind in MemberKind}

"""Pytest configuration and shared fixtures."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from rbx_api_utils.domain.models.api import ROOT_SENTINEL
from rbx_api_utils.domain.services import ApiIndex, PropertyAccessor


@dataclass
class Vector3:
    """Host data type used by the sample dump's Vector3 properties."""

    X: float = 0.0
    Y: float = 0.0
    Z: float = 0.0


class FakeInstance:
    """Minimal host object: class name, IsA over the index hierarchy, plain fields."""

    def __init__(self, api_index: ApiIndex, class_name: str, **fields: Any):
        self.ClassName = class_name
        self._hierarchy = api_index.get_class_hierarchy(class_name) or [class_name]
        for name, value in fields.items():
            setattr(self, name, value)

    def IsA(self, class_name: str) -> bool:  # noqa: N802
        return class_name in self._hierarchy


def make_property(name: str, category: str, type_name: str, **extra: Any) -> dict[str, Any]:
    prop = {
        "MemberType": "Property",
        "Name": name,
        "Category": "Data",
        "Security": {"Read": "None", "Write": "None"},
        "Serialization": {"CanLoad": True, "CanSave": True},
        "ThreadSafety": "ReadSafe",
        "ValueType": {"Category": category, "Name": type_name},
    }
    prop.update(extra)
    return prop


def build_sample_dump() -> dict[str, Any]:
    return {
        "Version": 1,
        "Classes": [
            {
                "Name": "Instance",
                "Superclass": ROOT_SENTINEL,
                "MemoryCategory": "Instances",
                "Tags": ["NotCreatable"],
                "Members": [
                    make_property("Name", "Primitive", "string"),
                    make_property("Archivable", "Primitive", "bool"),
                    {
                        "MemberType": "Function",
                        "Name": "IsA",
                        "Parameters": [
                            {"Name": "className", "Type": {"Category": "Primitive", "Name": "string"}}
                        ],
                        "ReturnType": {"Category": "Primitive", "Name": "bool"},
                        "Security": "None",
                        "ThreadSafety": "Safe",
                    },
                    {
                        "MemberType": "Event",
                        "Name": "Changed",
                        "Parameters": [
                            {"Name": "property", "Type": {"Category": "Primitive", "Name": "string"}}
                        ],
                        "Security": "None",
                        "ThreadSafety": "Unsafe",
                    },
                ],
            },
            {
                "Name": "PVInstance",
                "Superclass": "Instance",
                "MemoryCategory": "Instances",
                "Members": [],
            },
            {
                "Name": "BasePart",
                "Superclass": "PVInstance",
                "MemoryCategory": "PhysicsParts",
                "Members": [
                    make_property("Size", "DataType", "Vector3"),
                    make_property("Anchored", "Primitive", "bool"),
                    make_property("Transparency", "Primitive", "float"),
                    make_property("Material", "Enum", "Material"),
                    make_property("Name", "Primitive", "string", Tags=["Hidden"]),
                ],
            },
            {
                "Name": "Part",
                "Superclass": "BasePart",
                "MemoryCategory": "PhysicsParts",
                "Members": [
                    make_property("Shape", "Enum", "PartType"),
                    {
                        "MemberType": "Function",
                        "Name": "Resize",
                        "Parameters": [],
                        "ReturnType": {"Category": "Primitive", "Name": "bool"},
                        "Security": "None",
                        "ThreadSafety": "Unsafe",
                    },
                ],
            },
            {
                "Name": "Widget",
                "Superclass": "Instance",
                "MemoryCategory": "Instances",
                "Members": [
                    make_property("Size", "DataType", "Vector3"),
                    make_property("Texture", "DataType", "Content"),
                    make_property("Count", "Primitive", "int"),
                    make_property("Target", "Class", "BasePart"),
                    {
                        "MemberType": "Callback",
                        "Name": "OnActivate",
                        "Parameters": [],
                        "ReturnType": {"Category": "Primitive", "Name": "void"},
                        "Security": "None",
                        "ThreadSafety": "Unsafe",
                    },
                ],
            },
        ],
        "Enums": [
            {
                "Name": "Material",
                "Items": [
                    {"Name": "Plastic", "Value": 256},
                    {"Name": "Wood", "Value": 512},
                ],
            },
            {
                "Name": "PartType",
                "Items": [
                    {"Name": "Ball", "Value": 0},
                    {"Name": "Block", "Value": 1},
                ],
            },
        ],
    }


@pytest.fixture
def sample_dump() -> dict[str, Any]:
    """Return a fresh sample API dump."""
    return build_sample_dump()


@pytest.fixture
def api_index(sample_dump: dict[str, Any]) -> ApiIndex:
    """Return an index built from the sample dump."""
    return ApiIndex(sample_dump)


@pytest.fixture
def accessor(api_index: ApiIndex) -> PropertyAccessor:
    """Return a property accessor over the sample index."""
    return PropertyAccessor(api_index)


@pytest.fixture
def widget(api_index: ApiIndex) -> FakeInstance:
    """Return a Widget host object with its native fields populated."""
    return FakeInstance(
        api_index,
        "Widget",
        Name="Widget",
        Archivable=True,
        Size=Vector3(1, 2, 3),
        Texture="rbxassetid://1",
        Count=0,
        Target=None,
    )


@pytest.fixture
def part(api_index: ApiIndex) -> FakeInstance:
    """Return a Part host object with its native fields populated."""
    return FakeInstance(
        api_index,
        "Part",
        Name="Part",
        Archivable=True,
        Size=Vector3(4, 1, 2),
        Anchored=False,
        Transparency=0.0,
        Material=None,
        Shape=None,
    )

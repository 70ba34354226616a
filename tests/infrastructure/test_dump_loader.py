#!/usr/bin/env python3

"""Tests for loading API dumps from disk."""

import json
from pathlib import Path

import pytest

from rbx_api_utils.domain.errors import InvalidApiDumpError
from rbx_api_utils.domain.services import ApiIndex
from rbx_api_utils.infrastructure.dump_loader import load_api_dump


@pytest.mark.unit
def test_load_dump_round_trips_into_index(tmp_path: Path, sample_dump) -> None:
    """Test that a dump written to disk loads and indexes."""
    dump_file = tmp_path / "API-Dump.json"
    dump_file.write_text(json.dumps(sample_dump), encoding="utf-8")

    loaded = load_api_dump(dump_file)
    assert loaded == sample_dump

    index = ApiIndex(loaded)
    assert index.get_class_hierarchy("Part")[-1] == "Instance"


@pytest.mark.unit
def test_load_missing_file(tmp_path: Path) -> None:
    """Test that unreadable files raise InvalidApiDumpError."""
    with pytest.raises(InvalidApiDumpError, match="Failed to load API dump"):
        load_api_dump(tmp_path / "missing.json")


@pytest.mark.unit
def test_load_malformed_json(tmp_path: Path) -> None:
    """Test that malformed JSON raises InvalidApiDumpError."""
    dump_file = tmp_path / "broken.json"
    dump_file.write_text('{"Version": 1, "Classes": [', encoding="utf-8")

    with pytest.raises(InvalidApiDumpError):
        load_api_dump(dump_file)


@pytest.mark.unit
def test_load_non_object_json(tmp_path: Path) -> None:
    """Test that a JSON array is rejected."""
    dump_file = tmp_path / "array.json"
    dump_file.write_text("[]", encoding="utf-8")

    with pytest.raises(InvalidApiDumpError, match="must be a JSON object"):
        load_api_dump(dump_file)

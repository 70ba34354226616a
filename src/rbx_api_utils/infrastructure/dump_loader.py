#!/usr/bin/env python3

"""Loading of JSON API dumps from disk."""

import json
from pathlib import Path
from typing import Any

from ..domain.errors import InvalidApiDumpError
from .logging import get_logger, log_timing

logger = get_logger(__name__)


@log_timing
def load_api_dump(dump_file_path: str | Path) -> dict[str, Any]:
    """Read a JSON API dump.

    Only the document shape is checked here; version and content checks
    happen when the dump is indexed.

    Args:
        dump_file_path: Path to the dump file

    Returns:
        Parsed dump document

    Raises:
        InvalidApiDumpError: If the file cannot be read or is not a JSON object
    """
    path = Path(dump_file_path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise InvalidApiDumpError(f"Failed to load API dump from {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidApiDumpError(
            f"API dump {path} must be a JSON object, got {type(data).__name__}"
        )

    logger.info(
        f"Loaded API dump from {path} "
        f"({len(data.get('Classes', []))} classes, {len(data.get('Enums', []))} enums)"
    )
    return data

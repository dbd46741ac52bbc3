"""
Loading the consolidated legacy services document.

The legacy document is a single JSON file shaped like
``{"blocked_services": [{"id": "...", ...}, ...]}``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..domain.names import normalize_name
from ..infra.exceptions import LegacyLoadError
from ..infra.logging import get_logger

DEFAULT_COLLECTION_KEY = "blocked_services"


def read_legacy_document(json_file_path: Path | str) -> Any:
    """Read and parse the legacy JSON document.

    Raises LegacyLoadError if the file cannot be read or is not valid JSON.
    """
    path = Path(json_file_path)
    try:
        content = path.read_text(encoding="utf-8")
        return json.loads(content)
    except (OSError, ValueError, RecursionError) as e:
        raise LegacyLoadError(f"Cannot load legacy services from {path}: {e}") from e


def load_legacy_services(
    json_file_path: Path | str,
    collection_key: str = DEFAULT_COLLECTION_KEY,
) -> Any | None:
    """Return the value stored under ``collection_key`` in the legacy document.

    Returns None when the document cannot be loaded or is null (logged), or
    has no such key (not logged). The caller is responsible for checking
    that the value is a list.
    """
    try:
        document = read_legacy_document(json_file_path)
        if document is None:
            raise LegacyLoadError(f"Legacy services document {json_file_path} is null")
    except LegacyLoadError as e:
        get_logger(__name__).error(
            "legacy_load_failed",
            path=str(json_file_path),
            error=str(e),
            exc_info=True,
        )
        return None

    # Any other non-mapping document has no services array; silently ignored.
    if not isinstance(document, Mapping):
        return None
    return document.get(collection_key)


def legacy_service_keys(records: list[Any]) -> list[str]:
    """Normalized, sorted ids of the legacy records.

    Entries that are not mappings with a string ``id`` cannot be matched to a
    file name and are skipped.
    """
    keys = []
    for index, record in enumerate(records):
        service_id = record.get("id") if isinstance(record, Mapping) else None
        if not isinstance(service_id, str):
            get_logger(__name__).warning("legacy_record_skipped", index=index, reason="missing string id")
            continue
        keys.append(normalize_name(service_id))
    keys.sort()
    return keys

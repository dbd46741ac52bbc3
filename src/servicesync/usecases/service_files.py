"""
Listing and writing individual service files.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml

from ..domain.names import normalize_name, strip_extension
from ..infra.exceptions import MissingServiceRecordError, ServiceWriteError
from ..infra.logging import get_logger

DEFAULT_FILE_EXTENSION = ".yml"


def list_service_file_keys(services_dir: Path | str) -> list[str]:
    """Normalized, sorted names of every entry in ``services_dir``.

    The listing is not recursive and keeps duplicates.
    """
    names = os.listdir(services_dir)
    keys = [normalize_name(strip_extension(name)) for name in names]
    keys.sort()
    return keys


def dump_service_record(record: Mapping[str, Any]) -> str:
    """Serialize a legacy record to YAML without folding long lines."""
    return yaml.safe_dump(
        dict(record),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )


def service_file_path(services_dir: Path | str, service_id: str, extension: str = DEFAULT_FILE_EXTENSION) -> Path:
    """Path of the individual file for ``service_id`` (original, un-normalized id)."""
    return Path(services_dir) / f"{service_id}{extension}"


def write_removed_services(
    removed: Iterable[tuple[str, Mapping[str, Any] | None]],
    services_dir: Path | str,
    extension: str = DEFAULT_FILE_EXTENSION,
) -> Iterator[Path]:
    """Write each resolved record to its own file, one after another.

    ``removed`` pairs each missing key with the legacy record resolved for it.
    Yields each path as soon as its file is written. Stops at the first
    failure, including a key with no record; files written before it are
    left in place.
    """
    for key, record in removed:
        if record is None:
            raise MissingServiceRecordError(key)
        path = service_file_path(services_dir, record["id"], extension)
        content = dump_service_record(record)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ServiceWriteError(f"Cannot write {path}: {e}") from e
        get_logger(__name__).debug("service_file_written", path=str(path))
        yield path

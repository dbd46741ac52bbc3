"""
Detect services dropped from the individual service files and restore them.

A service is "removed" when its id appears in the legacy services document
but no file in the services directory normalizes to the same key. Each
removed service gets its individual file regenerated from the legacy record.
Existing files are never modified or deleted.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from ..domain.names import normalize_name
from ..domain.report import RemovedServicesReport
from ..infra.exceptions import ServiceSyncError
from ..infra.logging import get_logger
from .legacy_load import DEFAULT_COLLECTION_KEY, legacy_service_keys, load_legacy_services
from .service_files import DEFAULT_FILE_EXTENSION, list_service_file_keys, write_removed_services


def find_removed_services(legacy_keys: Sequence[str], file_keys: Sequence[str]) -> list[str]:
    """Legacy keys with no matching file key, in legacy order."""
    return [key for key in legacy_keys if key not in file_keys]


def resolve_removed_records(
    missing_keys: Sequence[str],
    records: Sequence[Any],
) -> list[tuple[str, Mapping[str, Any] | None]]:
    """Pair each missing key with the first legacy record whose id normalizes to it.

    When two ids collide on the same key the earlier record in the legacy
    array wins. A key with no record is paired with None.
    """
    resolved = []
    for key in missing_keys:
        match = None
        for record in records:
            if not isinstance(record, Mapping) or not isinstance(record.get("id"), str):
                continue
            if normalize_name(record["id"]) == key:
                match = record
                break
        resolved.append((key, match))
    return resolved


def check_removed_services(
    services_folder_path: Path | str,
    json_file_path: Path | str,
    *,
    extension: str = DEFAULT_FILE_EXTENSION,
    collection_key: str = DEFAULT_COLLECTION_KEY,
    dry_run: bool = False,
) -> RemovedServicesReport:
    """Check for removed services and rewrite their individual files.

    Args:
        services_folder_path: Directory holding one file per service. Missing
            files are written back into it.
        json_file_path: Legacy services document.
        extension: Extension of the individual files, including the dot.
        collection_key: Key of the services array in the legacy document.
        dry_run: Report missing services without writing anything.

    Returns:
        RemovedServicesReport describing what was detected and written.
        Load, listing and write failures are logged and reported, never raised.
    """
    report = RemovedServicesReport(dry_run=dry_run)

    records = load_legacy_services(json_file_path, collection_key)
    if not isinstance(records, list):
        return report

    try:
        file_keys = list_service_file_keys(services_folder_path)
    except OSError as e:
        report.error = str(e)
        get_logger(__name__).error(
            "services_dir_list_failed",
            path=str(services_folder_path),
            error=str(e),
            exc_info=True,
        )
        return report

    legacy_keys = legacy_service_keys(records)
    report.missing = find_removed_services(legacy_keys, file_keys)
    if not report.missing:
        return report

    log = get_logger(__name__)
    if dry_run:
        log.info("removed_services_detected", services=report.missing, count=len(report.missing))
        return report

    removed = resolve_removed_records(report.missing, records)
    try:
        for path in write_removed_services(removed, services_folder_path, extension):
            report.written.append(path)
    except (ServiceSyncError, OSError, RecursionError, yaml.YAMLError) as e:
        report.error = str(e)
        log.error("removed_services_rewrite_failed", error=str(e), exc_info=True)

    log.info(
        "removed_services_rewritten",
        services=report.missing,
        count=len(report.missing),
        written=len(report.written),
    )
    return report

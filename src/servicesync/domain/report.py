from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class RemovedServicesReport:
    """
    Outcome of one reconciliation run.

    ``missing`` holds the normalized keys found in the legacy document but not
    among the individual files, in the order they were diffed. ``written``
    holds the files actually created, which can be shorter than ``missing``
    when a write failed (``error``) or the run was a dry run.
    """

    missing: list[str] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    error: str | None = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "missing": list(self.missing),
            "written": [str(path) for path in self.written],
            "error": self.error,
            "dry_run": self.dry_run,
        }

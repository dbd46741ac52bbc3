"""
Service name normalization.

Legacy ids and individual file names are compared through a lossy key:
lowercased, with every character outside ``[a-z0-9.]`` removed. The key is
only ever used for comparison, never for naming output files.
"""

from __future__ import annotations

import re

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9.]")


def normalize_name(name: str) -> str:
    """Lowercase ``name`` and drop every character outside ``[a-z0-9.]``."""
    return _DISALLOWED_CHARS.sub("", name.lower())


def strip_extension(file_name: str) -> str:
    """Return ``file_name`` without its last extension.

    The extension runs from the last dot to the end, so ``a.b.yml`` -> ``a.b``
    and a trailing dot counts as an empty extension (``foo.`` -> ``foo``).
    Dotfiles (``.hidden``) and ``..`` have no extension.
    """
    dot = file_name.rfind(".")
    if dot <= 0 or file_name == "..":
        return file_name
    return file_name[:dot]

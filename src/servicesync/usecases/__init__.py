"""
Reconciliation usecases.

The CLI calls functions from here; each module covers one stage of the
legacy-document-to-individual-files check.
"""

from . import legacy_load  # noqa: I001
from . import service_files  # noqa: I001
from . import removed_services  # noqa: I001  # Depends on legacy_load and service_files

"""
servicesync - restore individual service files dropped from a services folder.

Compares the consolidated legacy services document against the folder of
per-service YAML files and regenerates every service that only exists in the
legacy document.
"""

from .domain.report import RemovedServicesReport
from .usecases.removed_services import check_removed_services

__version__ = "0.1.0"

__all__ = ["RemovedServicesReport", "check_removed_services"]

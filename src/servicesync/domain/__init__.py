"""
Domain layer - service naming rules and reconciliation results.
"""

from .names import normalize_name, strip_extension
from .report import RemovedServicesReport

__all__ = ["RemovedServicesReport", "normalize_name", "strip_extension"]

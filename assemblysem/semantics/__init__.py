"""
Semantics package: configurations and the lattice of configuration sets,
plus the editor-facing helpers built on them.
"""

from .configuration import Configuration
from .semantics import Semantics
from .exit_zone import ExitZone, covered_exit_zones, uncovered_exit_zones
from .annotation import ConfigurationStatus, ExitZoneStatus, StateSemantics
from .text import format_configurations, parse_configurations

__all__ = [
    "Configuration",
    "Semantics",
    "ExitZone",
    "covered_exit_zones",
    "uncovered_exit_zones",
    "ConfigurationStatus",
    "ExitZoneStatus",
    "StateSemantics",
    "format_configurations",
    "parse_configurations",
]

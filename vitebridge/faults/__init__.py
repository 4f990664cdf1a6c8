"""
VitebridgeFaults - Structured fault handling.

Faults are typed exceptions carrying a stable code, a domain and a severity.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain taxonomy
- Severity: Severity levels
- ConfigurationError, ManifestParseError, UnresolvedEntry: domain faults
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
)

from .domains import (
    ConfigurationError,
    ManifestMissingFault,
    ConfigInvalidFault,
    ManifestParseError,
    UnresolvedEntry,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",

    # Domain faults
    "ConfigurationError",
    "ManifestMissingFault",
    "ConfigInvalidFault",
    "ManifestParseError",
    "UnresolvedEntry",
]

"""
VitebridgeFaults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults (missing manifest, invalid settings)
- MANIFEST faults (malformed build manifest)
- RESOLUTION faults (entries with no manifest counterpart)
"""

from typing import Any, Optional
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigurationError(Fault):
    """Configuration is missing or invalid. Fatal at construction."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=Severity.FATAL,
            metadata=metadata,
        )


class ManifestMissingFault(ConfigurationError):
    """The manifest path does not resolve to an existing file."""

    def __init__(self, path: str, **kwargs):
        super().__init__(
            code="MANIFEST_MISSING",
            message=f"Manifest file does not exist: {path}",
            metadata={"path": path, **kwargs.get("metadata", {})},
        )


class ConfigInvalidFault(ConfigurationError):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# MANIFEST Faults
# ============================================================================

class ManifestParseError(Fault):
    """Manifest could not be read or is not a valid manifest mapping."""

    def __init__(self, path: str, reason: str, **kwargs):
        super().__init__(
            code="MANIFEST_PARSE_ERROR",
            message=f"Failed loading manifest {path}: {reason}",
            domain=FaultDomain.MANIFEST,
            severity=Severity.FATAL,
            metadata={"path": path, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# RESOLUTION Faults
# ============================================================================

class UnresolvedEntry(Fault):
    """
    A requested path has no manifest counterpart in production mode.

    Non-fatal: nothing is registered for the path. Only reported when the
    queue is flushed in strict mode.
    """

    def __init__(self, path: str, kind: str = "module", **kwargs):
        super().__init__(
            code="UNRESOLVED_ENTRY",
            message=f"No manifest entry for requested {kind} '{path}'",
            domain=FaultDomain.RESOLUTION,
            severity=Severity.WARN,
            metadata={"path": path, "kind": kind, **kwargs.get("metadata", {})},
        )
        self.path = path
        self.kind = kind

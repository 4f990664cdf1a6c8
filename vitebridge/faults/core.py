"""
Fault taxonomy shared by every vitebridge component.

A fault is an exception that also carries a stable code, a domain, a
severity and free-form metadata, so the same object can be raised at
setup time or collected and reported after a render.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Severity(str, Enum):
    """How bad a fault is. FATAL faults stop construction."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


class FaultDomain:
    """
    Named area a fault belongs to.

    Compares equal to another domain of the same name and to its own
    name as a plain string.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description

    @property
    def value(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FaultDomain({self.name!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FaultDomain):
            return other.name == self.name
        return self.name == str(other)

    def __hash__(self) -> int:
        return hash(self.name)


FaultDomain.CONFIG = FaultDomain("config", "Settings and manifest location")
FaultDomain.MANIFEST = FaultDomain("manifest", "Manifest contents")
FaultDomain.RESOLUTION = FaultDomain("resolution", "Entries resolved during a flush")

# Severity used when a fault does not pick one
DOMAIN_SEVERITY = {
    FaultDomain.CONFIG: Severity.FATAL,
    FaultDomain.MANIFEST: Severity.FATAL,
    FaultDomain.RESOLUTION: Severity.WARN,
}


class Fault(Exception):
    """
    Base class for every vitebridge error and diagnostic.

    Subclasses may set ``code``, ``message`` or ``domain`` as class
    attributes instead of passing them in.

    Example:
        ```python
        raise Fault(
            code="MANIFEST_MISSING",
            message="Manifest file does not exist: dist/.vite/manifest.json",
            domain=FaultDomain.CONFIG,
        )
        ```
    """

    code: Optional[str] = None
    message: Optional[str] = None
    domain: Optional[FaultDomain] = None

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        *,
        domain: FaultDomain | None = None,
        severity: Optional[Severity] = None,
        metadata: Optional[dict[str, Any]] = None,
    ):
        self.code = code or self.code
        self.message = message or self.message
        self.domain = domain or self.domain
        if not (self.code and self.message and self.domain):
            raise TypeError(f"{type(self).__name__} needs a code, a message and a domain")

        super().__init__(self.message)
        self.severity = severity or DOMAIN_SEVERITY.get(self.domain, Severity.ERROR)
        self.metadata = dict(metadata or {})

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, domain={self.domain}, severity={self.severity.value})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the fault for JSON output and logs."""
        return {
            "code": self.code,
            "message": self.message,
            "domain": self.domain.value,
            "severity": self.severity.value,
            "metadata": self.metadata,
        }

"""
Asset context - Immutable state shared by render cycles.

Holds the mode flag, URLs and the loaded manifest. Built once per
process; per-render state (queue, visited set, host) lives elsewhere.
"""

from dataclasses import dataclass

from .handles import namespaced, trailingslashit
from .manifest import ManifestStore


@dataclass(frozen=True)
class AssetContext:
    """
    Resolution context.

    Attributes:
        prefix: Handle namespace
        base_url: Public URL of the build output (trailing slash)
        dev_url: Dev server root URL (trailing slash)
        is_dev: Whether assets come from the dev server
        manifest: Loaded build manifest
    """
    prefix: str
    base_url: str
    dev_url: str
    is_dev: bool
    manifest: ManifestStore

    def __post_init__(self):
        object.__setattr__(self, "base_url", trailingslashit(self.base_url))
        object.__setattr__(self, "dev_url", trailingslashit(self.dev_url))

    @property
    def asset_url(self) -> str:
        """Base URL for the current mode."""
        return self.dev_url if self.is_dev else self.base_url

    def handle(self, name: str) -> str:
        return namespaced(self.prefix, name)

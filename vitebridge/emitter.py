"""
Registration Emitter - Translates resolved nodes into host calls.

Assembles the namespaced handle and the mode-dependent URL; all graph
logic lives in the resolver.
"""

from typing import Any, Dict, Optional, Sequence

from .context import AssetContext
from .host import AssetHost, Dependency

DEV_CLIENT_HANDLE = "vite-dev"
DEV_CLIENT_PATH = "@vite/client"


class RegistrationEmitter:
    """
    Emits registrations for one render cycle.

    Args:
        context: Shared resolution context
        host: Per-render asset host
    """

    def __init__(self, context: AssetContext, host: AssetHost):
        self.context = context
        self.host = host

    def url_for(self, path: str) -> str:
        return f"{self.context.asset_url}{path}"

    def register_stylesheet(self, handle: str, path: str, deps: Sequence[str] = ()) -> str:
        ns_handle = self.context.handle(handle)
        self.host.enqueue_style(ns_handle, self.url_for(path), list(deps))
        return ns_handle

    def register_active_module(self, handle: str, path: str, deps: Sequence[Dependency] = ()) -> str:
        ns_handle = self.context.handle(handle)
        self.host.enqueue_script_module(ns_handle, self.url_for(path), list(deps))
        return ns_handle

    def register_passive_module(self, handle: str, path: str, deps: Sequence[Dependency] = ()) -> str:
        ns_handle = self.context.handle(handle)
        self.host.register_script_module(ns_handle, self.url_for(path), list(deps))
        return ns_handle

    def register_script(
        self,
        handle: str,
        path: str,
        deps: Sequence[str] = (),
        extra: Optional[Dict[str, Any]] = None,
    ) -> str:
        ns_handle = self.context.handle(handle)
        self.host.enqueue_script(ns_handle, self.url_for(path), list(deps), dict(extra or {}))
        return ns_handle

    def register_dev_client(self) -> Optional[str]:
        """Enqueue the dev server's HMR client (dev mode only)."""
        if not self.context.is_dev:
            return None
        return self.register_active_module(DEV_CLIENT_HANDLE, DEV_CLIENT_PATH)

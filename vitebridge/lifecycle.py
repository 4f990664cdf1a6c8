"""
Render Lifecycle - Hooks invoked once per page render.

The host rendering system owns one RenderLifecycle and calls ``render()``
for every outgoing page with that page's asset host. Callbacks registered
with ``on_render()`` run in registration order.
"""

from typing import Callable, List, Optional
from dataclasses import dataclass
from enum import Enum
import logging

from .host import AssetHost, PageAssets

logger = logging.getLogger("vitebridge.lifecycle")


RenderCallback = Callable[[AssetHost], None]


class RenderPhase(Enum):
    """Render phases."""
    STARTING = "starting"
    DONE = "done"
    ERROR = "error"


@dataclass
class RenderEvent:
    """Event emitted around a render."""
    phase: RenderPhase
    callback: Optional[str] = None
    error: Optional[Exception] = None


class RenderLifecycle:
    """
    Coordinates per-render asset callbacks.

    A failing callback is logged and reported as an ERROR event; the
    remaining callbacks still run.
    """

    def __init__(self):
        self.callbacks: List[RenderCallback] = []
        self.event_handlers: List[Callable[[RenderEvent], None]] = []
        self.renders = 0

    def on_render(self, callback: RenderCallback) -> RenderCallback:
        """Register a render callback. Usable as a decorator."""
        self.callbacks.append(callback)
        return callback

    def on_event(self, handler: Callable[[RenderEvent], None]):
        self.event_handlers.append(handler)

    def _emit_event(self, event: RenderEvent):
        for handler in self.event_handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Event handler error: {e}")

    def render(self, host: Optional[AssetHost] = None) -> AssetHost:
        """
        Run every callback against the page's host.

        Args:
            host: Asset host for this page (a new PageAssets by default)

        Returns:
            The host, populated
        """
        if host is None:
            host = PageAssets()

        self.renders += 1
        self._emit_event(RenderEvent(RenderPhase.STARTING))

        for callback in self.callbacks:
            name = getattr(callback, "__qualname__", repr(callback))
            try:
                callback(host)
            except Exception as e:
                logger.error(f"Render callback {name} failed: {e}")
                self._emit_event(RenderEvent(RenderPhase.ERROR, callback=name, error=e))

        self._emit_event(RenderEvent(RenderPhase.DONE))
        return host

"""
ViteAssets - Caller-facing facade.

Loads the manifest, detects the dev server once, collects setup-time
``enqueue()`` calls and registers them with the page's host on every
render.

Example:
    lifecycle = RenderLifecycle()
    assets = ViteAssets(
        "my-theme",
        root_dir="/srv/theme",
        base_url="https://example.com/theme/dist/",
        manifest_path="dist/.vite/manifest.json",
        lifecycle=lifecycle,
    )
    assets.enqueue("src/main.js")
    assets.enqueue("src/admin.css", handle="admin")

    host = lifecycle.render()
    html = host.render()
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union
from pathlib import Path
import logging

from .config import ConfigLoader, ViteConfig
from .context import AssetContext
from .enqueue import EnqueueQueue
from .faults import UnresolvedEntry
from .host import AssetHost, PageAssets
from .lifecycle import RenderLifecycle
from .manifest import ManifestStore, load_manifest
from .mode import detect_dev_server

logger = logging.getLogger("vitebridge.assets")


class ViteAssets:
    """
    Switches between a running dev server and built assets.

    Args:
        prefix: Namespace for every registered handle
        root_dir: Project root
        base_url: Public URL of the build output
        manifest_path: Manifest path relative to root_dir
        dev_url: Dev server URL (default from the environment descriptor)
        env_file: Environment descriptor relative to root_dir
        lifecycle: Render lifecycle to hook into
        is_dev: Skip the probe and force a mode
        probe: Dev server probe (``detect_dev_server`` by default)
        config: Prebuilt config; other settings are ignored when given
    """

    def __init__(
        self,
        prefix: str = "",
        root_dir: Union[str, Path, None] = None,
        base_url: Optional[str] = None,
        manifest_path: Optional[str] = None,
        *,
        dev_url: Optional[str] = None,
        env_file: Optional[str] = ".env",
        lifecycle: Optional[RenderLifecycle] = None,
        is_dev: Optional[bool] = None,
        probe: Callable[..., bool] = detect_dev_server,
        config: Optional[ViteConfig] = None,
    ):
        if config is None:
            config = ConfigLoader.load(
                prefix,
                root_dir=Path(root_dir) if root_dir else None,
                env_file=env_file,
                overrides={
                    "base_url": base_url,
                    "manifest_path": manifest_path,
                    "dev_url": dev_url,
                },
            )
        self.config = config

        manifest = load_manifest(config.manifest_file)

        if is_dev is None:
            is_dev = probe(config.resolved_dev_url, timeout=config.probe_timeout)

        self.context = AssetContext(
            prefix=config.prefix,
            base_url=config.base_url,
            dev_url=config.resolved_dev_url,
            is_dev=is_dev,
            manifest=manifest,
        )
        self._queue = EnqueueQueue()

        logger.info(
            f"{config.prefix}: serving assets from "
            f"{self.context.dev_url if is_dev else self.context.base_url}"
        )

        if lifecycle is not None:
            lifecycle.on_render(self.enqueue_assets)

    @classmethod
    def from_config(cls, config: ViteConfig, **kwargs: Any) -> "ViteAssets":
        return cls(config=config, **kwargs)

    @property
    def is_dev(self) -> bool:
        return self.context.is_dev

    @property
    def prefix(self) -> str:
        return self.context.prefix

    @property
    def manifest(self) -> ManifestStore:
        return self.context.manifest

    def enqueue(
        self,
        path: str,
        handle: Optional[str] = None,
        deps: Iterable[str] = (),
        module: bool = True,
        raw_options: Optional[Dict[str, Any]] = None,
    ):
        """
        Request an asset on every rendered page.

        Re-enqueueing a path replaces its options.
        """
        self._queue.enqueue(path, handle=handle, deps=deps, module=module, raw_options=raw_options)

    def queue(self) -> EnqueueQueue:
        """A fresh per-render queue seeded with the setup-time requests."""
        return self._queue.copy()

    def enqueue_assets(self, host: AssetHost) -> List[UnresolvedEntry]:
        """Render callback: flush the requests into ``host``."""
        return self.queue().flush_all(self.context, host, strict=self.config.strict)

    def render(self, host: Optional[AssetHost] = None) -> AssetHost:
        """Flush into ``host`` (a new PageAssets by default) and return it."""
        if host is None:
            host = PageAssets()
        self.enqueue_assets(host)
        return host

"""
Jinja2 integration.

Exposes the asset pipeline to templates:

    {{ vite_assets() }}                     tags for every enqueued asset
    {{ vite_assets("src/pages/home.js") }}  plus page-specific entries
    {{ vite_url("src/logo.svg") }}          URL of a single built file

Example:
    env = Environment(loader=FileSystemLoader("templates"))
    install_template_globals(env, assets, lifecycle)
"""

from typing import Optional

from jinja2 import Environment
from markupsafe import Markup

from .assets import ViteAssets
from .enqueue import EnqueueQueue
from .host import PageAssets
from .lifecycle import RenderLifecycle
from .resolver import EnqueueRequest


class TemplateAssets:
    """
    Template-facing helpers bound to one ViteAssets instance.

    Each ``vite_assets()`` call is its own render cycle: a fresh host,
    queue and visited set.

    Args:
        assets: Configured ViteAssets
        lifecycle: Lifecycle to run instead of flushing ``assets`` alone
    """

    def __init__(self, assets: ViteAssets, lifecycle: Optional[RenderLifecycle] = None):
        self.assets = assets
        self.lifecycle = lifecycle

    def vite_assets(self, *paths: str) -> Markup:
        host = PageAssets()
        if self.lifecycle is not None:
            self.lifecycle.render(host)
        else:
            self.assets.enqueue_assets(host)

        if paths:
            setup = self.assets.queue()
            queue = EnqueueQueue()
            for path in paths:
                # Keep handle and deps from setup
                request = setup.get(path) or EnqueueRequest()
                queue.enqueue(
                    path,
                    handle=request.handle,
                    deps=request.deps,
                    module=request.module,
                    raw_options=request.raw_options,
                )
            queue.flush_all(self.assets.context, host, strict=self.assets.config.strict)

        return host.render()

    def vite_url(self, path: str) -> str:
        context = self.assets.context
        if context.is_dev:
            return f"{context.dev_url}{path}"
        entry = context.manifest.get(path)
        return f"{context.base_url}{entry.file if entry else path}"


def install_template_globals(
    env: Environment,
    assets: ViteAssets,
    lifecycle: Optional[RenderLifecycle] = None,
) -> TemplateAssets:
    """Register ``vite_assets`` and ``vite_url`` as Jinja2 globals."""
    helpers = TemplateAssets(assets, lifecycle)
    env.globals.update(
        vite_assets=helpers.vite_assets,
        vite_url=helpers.vite_url,
    )
    return helpers

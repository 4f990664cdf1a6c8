"""
Host asset-registration surface.

``AssetHost`` is the surface the emitter calls. ``PageAssets`` is an
in-memory host for one page render: it records registrations in order,
ignores repeated handles and renders the collected assets as HTML.

Example:
    host = PageAssets()
    assets.render(host)
    html = host.render()
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence, Union
from dataclasses import dataclass, field
import json
import logging

from jinja2 import Environment
from markupsafe import Markup

logger = logging.getLogger("vitebridge.host")


@dataclass(frozen=True)
class DynamicDependency:
    """Dependency edge on a dynamically imported module."""
    id: str
    kind: str = "dynamic"

    def to_dict(self) -> dict:
        return {"id": self.id, "import": self.kind}


Dependency = Union[str, DynamicDependency]


class AssetHost(Protocol):
    """Operations a host rendering system exposes for asset registration."""

    def enqueue_script_module(self, handle: str, url: str, deps: Sequence[Dependency]) -> None:
        ...

    def register_script_module(self, handle: str, url: str, deps: Sequence[Dependency]) -> None:
        ...

    def enqueue_script(
        self, handle: str, url: str, deps: Sequence[str], extra: Optional[Dict[str, Any]] = None
    ) -> None:
        ...

    def enqueue_style(self, handle: str, url: str, deps: Sequence[str]) -> None:
        ...


@dataclass
class Registration:
    """One asset registered with a PageAssets host."""
    kind: str                 # "module", "script" or "style"
    handle: str
    url: str
    deps: List[Dependency] = field(default_factory=list)
    active: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def static_deps(self) -> List[str]:
        return [d for d in self.deps if isinstance(d, str)]

    @property
    def dynamic_deps(self) -> List[str]:
        return [d.id for d in self.deps if isinstance(d, DynamicDependency)]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "handle": self.handle,
            "url": self.url,
            "deps": [d.to_dict() if isinstance(d, DynamicDependency) else d for d in self.deps],
            "active": self.active,
            "extra": self.extra,
        }


_TAGS_TEMPLATE = """\
{%- for style in styles %}
<link rel="stylesheet" id="{{ style.handle }}-css" href="{{ style.url }}">
{%- endfor %}
{%- if importmap %}
<script type="importmap">{{ importmap }}</script>
{%- endif %}
{%- for url in preloads %}
<link rel="modulepreload" href="{{ url }}">
{%- endfor %}
{%- for module in modules %}
<script type="module" src="{{ module.url }}" id="{{ module.handle }}-js-module"></script>
{%- endfor %}
{%- for script in scripts %}
<script src="{{ script.url }}" id="{{ script.handle }}-js"
{%- if script.extra.get('strategy') in ('defer', 'async') %} {{ script.extra['strategy'] }}{% endif %}></script>
{%- endfor %}
"""

_env = Environment(autoescape=True)
_tags = _env.from_string(_TAGS_TEMPLATE)


class PageAssets:
    """
    Per-render AssetHost implementation.

    The first registration of a handle wins; later ones with the same
    handle are ignored. A passive module that is later enqueued becomes
    active.
    """

    def __init__(self):
        self._registry: Dict[str, Registration] = {}

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, handle: str) -> bool:
        return handle in self._registry

    def get(self, handle: str) -> Optional[Registration]:
        return self._registry.get(handle)

    @property
    def registrations(self) -> List[Registration]:
        return list(self._registry.values())

    # ------------------------------------------------------------------
    # AssetHost
    # ------------------------------------------------------------------

    def enqueue_script_module(self, handle: str, url: str, deps: Sequence[Dependency]) -> None:
        existing = self._registry.get(handle)
        if existing is not None:
            if existing.kind == "module" and not existing.active:
                existing.active = True
                existing.deps.extend(d for d in deps if d not in existing.deps)
            return
        self._add(Registration("module", handle, url, list(deps), active=True))

    def register_script_module(self, handle: str, url: str, deps: Sequence[Dependency]) -> None:
        if handle in self._registry:
            return
        self._add(Registration("module", handle, url, list(deps), active=False))

    def enqueue_script(
        self, handle: str, url: str, deps: Sequence[str], extra: Optional[Dict[str, Any]] = None
    ) -> None:
        if handle in self._registry:
            return
        self._add(Registration("script", handle, url, list(deps), extra=dict(extra or {})))

    def enqueue_style(self, handle: str, url: str, deps: Sequence[str]) -> None:
        if handle in self._registry:
            return
        self._add(Registration("style", handle, url, list(deps)))

    def _add(self, registration: Registration):
        logger.debug(
            f"Registered {registration.kind} {registration.handle} -> {registration.url}"
            f"{'' if registration.active else ' (passive)'}"
        )
        self._registry[registration.handle] = registration

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def of_kind(self, kind: str, active: Optional[bool] = None) -> List[Registration]:
        return [
            r for r in self._registry.values()
            if r.kind == kind and (active is None or r.active == active)
        ]

    def import_map(self) -> Dict[str, Dict[str, str]]:
        """Import map covering every registered module."""
        return {"imports": {r.handle: r.url for r in self.of_kind("module")}}

    def preload_urls(self) -> List[str]:
        """URLs of passive modules statically reachable from active modules."""
        seen = set()
        urls = []
        stack = [d for r in reversed(self.of_kind("module", active=True)) for d in reversed(r.static_deps)]
        while stack:
            handle = stack.pop()
            if handle in seen:
                continue
            seen.add(handle)
            registration = self._registry.get(handle)
            if registration is None or registration.kind != "module":
                continue
            if not registration.active:
                urls.append(registration.url)
            stack.extend(reversed(registration.static_deps))
        return urls

    def render(self) -> Markup:
        """Render the collected assets as HTML tags."""
        modules = self.of_kind("module")
        importmap = None
        if modules:
            # Keep "</script>" out of the inline JSON
            importmap = Markup(json.dumps(self.import_map()).replace("</", "<\\/"))

        html = _tags.render(
            styles=self.of_kind("style"),
            importmap=importmap,
            preloads=self.preload_urls(),
            modules=self.of_kind("module", active=True),
            scripts=self.of_kind("script"),
        )
        return Markup(html.strip())

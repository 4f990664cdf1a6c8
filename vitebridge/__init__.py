"""
vitebridge - Vite build manifests for server-rendered pages

Resolves a Vite manifest into dependency-ordered asset registrations:
- Manifest: immutable store of build metadata
- Mode: one-shot dev server detection
- Resolver: import graph walk with cycle protection
- Emitter / Host: registration surface and HTML rendering
- Queue / Lifecycle: per-render flushing
"""

__version__ = "0.1.0"

from .faults import (
    Fault,
    FaultDomain,
    Severity,
    ConfigurationError,
    ManifestParseError,
    UnresolvedEntry,
)
from .config import ViteConfig, ConfigLoader
from .manifest import ManifestEntry, ManifestStore, load_manifest
from .mode import detect_dev_server
from .handles import handle_from_path, choose_handle
from .context import AssetContext
from .host import AssetHost, PageAssets, Registration, DynamicDependency
from .emitter import RegistrationEmitter
from .resolver import DependencyResolver, EnqueueRequest, VisitedSet
from .enqueue import EnqueueQueue
from .lifecycle import RenderLifecycle, RenderEvent, RenderPhase
from .assets import ViteAssets

__all__ = [
    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "ConfigurationError",
    "ManifestParseError",
    "UnresolvedEntry",

    # Config
    "ViteConfig",
    "ConfigLoader",

    # Manifest
    "ManifestEntry",
    "ManifestStore",
    "load_manifest",
    "detect_dev_server",

    # Resolution
    "handle_from_path",
    "choose_handle",
    "AssetContext",
    "RegistrationEmitter",
    "DependencyResolver",
    "EnqueueRequest",
    "VisitedSet",
    "EnqueueQueue",

    # Host
    "AssetHost",
    "PageAssets",
    "Registration",
    "DynamicDependency",
    "RenderLifecycle",
    "RenderEvent",
    "RenderPhase",

    # Facade
    "ViteAssets",
]

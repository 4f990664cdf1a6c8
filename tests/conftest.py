"""
Shared test fixtures and helpers for the vitebridge test suite.
"""

import json
import pytest
from pathlib import Path
from typing import Any, Dict, Optional

from vitebridge.context import AssetContext
from vitebridge.host import PageAssets
from vitebridge.manifest import ManifestStore


# ============================================================================
# Manifest Helpers
# ============================================================================

SAMPLE_MANIFEST = {
    "src/main.js": {
        "file": "assets/main-4f2a.js",
        "name": "main",
        "src": "src/main.js",
        "isEntry": True,
        "imports": ["src/shared.js"],
        "dynamicImports": ["src/lazy.js"],
        "css": ["assets/main-91bc.css"],
    },
    "src/shared.js": {
        "file": "assets/shared-77aa.js",
        "name": "shared",
    },
    "src/lazy.js": {
        "file": "assets/lazy-0b3c.js",
        "name": "lazy",
        "isDynamicEntry": True,
        "imports": ["src/shared.js"],
    },
    "src/admin.css": {
        "file": "assets/admin-12ef.css",
        "src": "src/admin.css",
        "isEntry": True,
    },
}


def write_manifest(root: Path, data: Any, relative: str = "dist/.vite/manifest.json") -> Path:
    """Write manifest data (or raw text) under root."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data)
    else:
        path.write_text(json.dumps(data))
    return path


def make_context(
    manifest: Optional[Dict[str, Any]] = None,
    *,
    is_dev: bool = False,
    prefix: str = "prefix",
    base_url: str = "/dist/",
    dev_url: str = "http://localhost:5173/",
) -> AssetContext:
    """Build an AssetContext from a manifest dict."""
    return AssetContext(
        prefix=prefix,
        base_url=base_url,
        dev_url=dev_url,
        is_dev=is_dev,
        manifest=ManifestStore.from_dict(manifest if manifest is not None else SAMPLE_MANIFEST),
    )


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_vite_environ(monkeypatch):
    """Keep VITE_* variables from the developer's shell out of the tests."""
    import os
    for key in list(os.environ):
        if key.upper().startswith("VITE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project(tmp_path):
    """Project root with the sample manifest at the default location."""
    write_manifest(tmp_path, SAMPLE_MANIFEST)
    return tmp_path


@pytest.fixture
def context():
    return make_context()


@pytest.fixture
def dev_context():
    return make_context(is_dev=True)


@pytest.fixture
def host():
    return PageAssets()

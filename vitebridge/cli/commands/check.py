"""
``vitebridge check`` - validate a manifest and probe the dev server.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from vitebridge.config import ConfigLoader
from vitebridge.manifest import load_manifest
from vitebridge.mode import detect_dev_server

from ..utils.colors import _CHECK, _CROSS, kv, section, success, warning


def cmd_check(
    root: Path,
    manifest_path: Optional[str] = None,
    dev_url: Optional[str] = None,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> bool:
    """
    Load the manifest and probe the dev server.

    Returns:
        True if a dev server answered

    Raises:
        ConfigurationError: Missing manifest or invalid settings
        ManifestParseError: Malformed manifest
    """
    config = ConfigLoader.load(
        "check",
        root_dir=root,
        overrides={"manifest_path": manifest_path, "dev_url": dev_url, "probe_timeout": timeout},
    )

    manifest = load_manifest(config.manifest_file)

    section("Manifest")
    kv("File", str(config.manifest_file))
    kv("Modules", str(len(manifest)))
    entries = manifest.entries()
    kv("Entry points", str(len(entries)))
    if verbose:
        for entry in entries:
            click.echo(f"    {entry.path} -> {entry.file}")

    click.echo()
    section("Dev server")
    kv("URL", config.resolved_dev_url)
    is_dev = detect_dev_server(config.resolved_dev_url, timeout=config.probe_timeout)

    click.echo()
    if is_dev:
        success(f"  {_CHECK} Dev server reachable, assets will be served from it")
    else:
        warning(f"  {_CROSS} Dev server unreachable, built assets will be used")
    return is_dev

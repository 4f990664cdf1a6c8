"""
``vitebridge resolve`` - show the registrations a page would get.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Sequence

import click

from vitebridge.assets import ViteAssets
from vitebridge.host import PageAssets

from ..utils.colors import kv, section, table, warning


def cmd_resolve(
    root: Path,
    entries: Sequence[str],
    prefix: str,
    base_url: Optional[str] = None,
    manifest_path: Optional[str] = None,
    is_dev: Optional[bool] = None,
    as_json: bool = False,
    html: bool = False,
) -> PageAssets:
    """
    Flush ``entries`` into a PageAssets host and print the result.

    Raises:
        ConfigurationError: Missing manifest or invalid settings
        ManifestParseError: Malformed manifest
    """
    assets = ViteAssets(
        prefix,
        root_dir=root,
        base_url=base_url,
        manifest_path=manifest_path,
        is_dev=is_dev,
    )

    queue = assets.queue()
    for entry in entries:
        queue.enqueue(entry)

    host = PageAssets()
    unresolved = queue.flush_all(assets.context, host, strict=True)

    if as_json:
        click.echo(json.dumps({
            "mode": "dev" if assets.is_dev else "production",
            "registrations": [r.to_dict() for r in host.registrations],
            "unresolved": [fault.to_dict() for fault in unresolved],
        }, indent=2))
        return host

    if html:
        click.echo(host.render())
        return host

    section("Registrations")
    kv("Mode", "dev" if assets.is_dev else "production")
    click.echo()

    rows = []
    for registration in host.registrations:
        deps = list(registration.static_deps)
        deps += [f"{d} (dynamic)" for d in registration.dynamic_deps]
        rows.append([
            registration.kind,
            registration.handle + ("" if registration.active else " (passive)"),
            registration.url,
            ", ".join(deps) or "-",
        ])
    table(["Kind", "Handle", "URL", "Deps"], rows)

    if unresolved:
        click.echo()
        for fault in unresolved:
            warning(f"  ! {fault.message}")

    return host

"""vitebridge CLI - Main Entry Point.

Commands:
    check    - Validate the manifest and probe the dev server
    resolve  - Show the registrations for a set of entries
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from vitebridge import __version__
from vitebridge.faults import Fault

from . import __cli_name__
from .utils.colors import _CROSS, error


@click.group()
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, verbose: bool):
    """Resolve Vite build manifests into page asset registrations.

    \b
    Quick start:
      vitebridge check .
      vitebridge resolve . src/main.js --prefix theme
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    # Commands report faults themselves
    logging.getLogger("vitebridge").setLevel(logging.DEBUG if verbose else logging.ERROR)


@cli.command('check')
@click.argument('root', type=click.Path(exists=True, file_okay=False, path_type=Path), default='.')
@click.option('--manifest', 'manifest_path', type=str, help='Manifest path relative to ROOT')
@click.option('--dev-url', type=str, help='Dev server URL')
@click.option('--timeout', type=float, help='Probe timeout in seconds')
@click.pass_context
def check(ctx, root: Path, manifest_path: Optional[str], dev_url: Optional[str], timeout: Optional[float]):
    """
    Validate the manifest and probe the dev server.

    Examples:
      vitebridge check .
      vitebridge check ./theme --manifest build/manifest.json
    """
    from .commands.check import cmd_check

    try:
        cmd_check(
            root,
            manifest_path=manifest_path,
            dev_url=dev_url,
            timeout=timeout,
            verbose=ctx.obj['verbose'],
        )
    except Fault as e:
        error(f"  {_CROSS} {e.message}")
        sys.exit(1)


@cli.command('resolve')
@click.argument('root', type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument('entries', nargs=-1, required=True)
@click.option('--prefix', default='app', show_default=True, help='Handle namespace')
@click.option('--base-url', type=str, help='Public URL of the build output')
@click.option('--manifest', 'manifest_path', type=str, help='Manifest path relative to ROOT')
@click.option('--dev/--prod', 'is_dev', default=None, help='Force a mode instead of probing')
@click.option('--json', 'as_json', is_flag=True, help='Print JSON')
@click.option('--html', is_flag=True, help='Print the rendered tags')
def resolve(
    root: Path,
    entries: tuple,
    prefix: str,
    base_url: Optional[str],
    manifest_path: Optional[str],
    is_dev: Optional[bool],
    as_json: bool,
    html: bool,
):
    """
    Show the registrations a page enqueueing ENTRIES would get.

    Examples:
      vitebridge resolve . src/main.js
      vitebridge resolve . src/main.js src/admin.css --prod --json
    """
    from .commands.resolve import cmd_resolve

    try:
        cmd_resolve(
            root,
            list(entries),
            prefix,
            base_url=base_url,
            manifest_path=manifest_path,
            is_dev=is_dev,
            as_json=as_json,
            html=html,
        )
    except Fault as e:
        error(f"  {_CROSS} {e.message}")
        sys.exit(1)


def main():
    """Entry point for `vitebridge` command."""
    cli(obj={})


if __name__ == '__main__':
    main()

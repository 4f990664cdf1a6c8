"""
Handle helpers.

A handle is the identifier an asset is registered under. Handles are
namespaced as ``{prefix}/{handle}``.
"""

from typing import Optional
import re

# Trailing "name.ext" segment, directory optional
_STEM_RE = re.compile(r"^(?:.*/)?([^/]+?)\.[^./]+$")


def handle_from_path(path: str) -> str:
    """
    Derive a handle from a file path.

    Strips the ``/``-delimited directory and the trailing ``.ext`` suffix:
    ``src/styles/admin.css`` -> ``admin``. A name without an extension is
    returned as-is: ``src/vendor`` -> ``vendor``.
    """
    match = _STEM_RE.match(path)
    if match:
        return match.group(1)
    return path.rstrip("/").rsplit("/", 1)[-1]


def choose_handle(path: str, override: Optional[str] = None, name: Optional[str] = None) -> str:
    """Handle precedence: explicit override, manifest name, path stem."""
    return override or name or handle_from_path(path)


def namespaced(prefix: str, handle: str) -> str:
    return f"{prefix}/{handle}"


def trailingslashit(url: str) -> str:
    """Ensure ``url`` ends with exactly one slash."""
    return url.rstrip("/") + "/"

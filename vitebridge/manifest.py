"""
Manifest Store - Parsed Vite build manifest.

The manifest maps source-relative module paths to their build metadata:

    {
      "src/main.js": {
        "file": "assets/main-4f2a.js",
        "name": "main",
        "isEntry": true,
        "imports": ["src/shared.js"],
        "dynamicImports": ["src/lazy.js"],
        "css": ["assets/main-91bc.css"]
      }
    }

Entries are immutable once loaded. A store may be shared by any number
of render cycles.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple
from dataclasses import dataclass, field
from pathlib import Path
import json
import logging

from .faults import ManifestMissingFault, ManifestParseError

logger = logging.getLogger("vitebridge.manifest")


@dataclass(frozen=True)
class ManifestEntry:
    """Build metadata for one source module."""

    path: str
    file: str
    name: Optional[str] = None
    imports: Tuple[str, ...] = ()
    dynamic_imports: Tuple[str, ...] = ()
    css: Tuple[str, ...] = ()

    # Informational fields emitted by Vite
    src: Optional[str] = None
    is_entry: bool = False
    is_dynamic_entry: bool = False
    assets: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, path: str, data: Dict[str, Any]) -> "ManifestEntry":
        """
        Build an entry from its raw manifest record.

        Raises:
            ValueError: If the record does not have the manifest shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"entry '{path}' must be an object")

        file = data.get("file")
        if not isinstance(file, str) or not file:
            raise ValueError(f"entry '{path}' has no 'file'")

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise ValueError(f"entry '{path}' has a non-string 'name'")

        return cls(
            path=path,
            file=file,
            name=name or None,
            imports=_string_list(path, data, "imports"),
            dynamic_imports=_string_list(path, data, "dynamicImports"),
            css=_string_list(path, data, "css"),
            src=data.get("src"),
            is_entry=bool(data.get("isEntry", False)),
            is_dynamic_entry=bool(data.get("isDynamicEntry", False)),
            assets=_string_list(path, data, "assets"),
        )

    def to_dict(self) -> dict:
        """Serialize back to the manifest record shape."""
        data: Dict[str, Any] = {"file": self.file}
        if self.name:
            data["name"] = self.name
        if self.src:
            data["src"] = self.src
        if self.is_entry:
            data["isEntry"] = True
        if self.is_dynamic_entry:
            data["isDynamicEntry"] = True
        if self.imports:
            data["imports"] = list(self.imports)
        if self.dynamic_imports:
            data["dynamicImports"] = list(self.dynamic_imports)
        if self.css:
            data["css"] = list(self.css)
        if self.assets:
            data["assets"] = list(self.assets)
        return data


def _string_list(path: str, data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"entry '{path}' field '{key}' must be a list of strings")
    return tuple(value)


class ManifestStore(Mapping[str, ManifestEntry]):
    """
    Read-only mapping of source path -> ManifestEntry.

    Absence of a key is a valid runtime condition (empty build, or a path
    served only by the dev server); use ``get()`` for lookups.
    """

    def __init__(self, entries: Mapping[str, ManifestEntry], source: Optional[Path] = None):
        self._entries: Dict[str, ManifestEntry] = dict(entries)
        self.source = source

    def __getitem__(self, path: str) -> ManifestEntry:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ManifestStore(entries={len(self._entries)}, source={str(self.source)!r})"

    def entries(self) -> List[ManifestEntry]:
        """Entries flagged by the bundler as build entry points."""
        return [entry for entry in self._entries.values() if entry.is_entry]

    @classmethod
    def from_dict(cls, data: Any, source: Optional[Path] = None) -> "ManifestStore":
        """
        Build a store from decoded manifest data.

        Raises:
            ManifestParseError: If data is not a valid manifest mapping
        """
        label = str(source) if source else "<memory>"
        if not isinstance(data, dict):
            raise ManifestParseError(label, "top level must be an object")

        entries = {}
        for path, record in data.items():
            try:
                entries[path] = ManifestEntry.from_dict(path, record)
            except ValueError as e:
                raise ManifestParseError(label, str(e)) from e

        return cls(entries, source=source)


def load_manifest(path: Path) -> ManifestStore:
    """
    Load a manifest file.

    Args:
        path: Path to the manifest JSON file

    Returns:
        Immutable ManifestStore

    Raises:
        ConfigurationError: If the file does not exist
        ManifestParseError: If the file cannot be read or decoded
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestMissingFault(str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestParseError(str(path), str(e)) from e

    store = ManifestStore.from_dict(data, source=path)
    logger.info(f"Loaded manifest {path} ({len(store)} entries)")
    return store

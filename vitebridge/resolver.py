"""
Dependency Resolver - Manifest graph walk.

Given an entry path, resolves its static imports, dynamic imports and
stylesheets into registrations with dependency edges. Each node is
registered once per flush; a VisitedSet threaded through the walk
breaks import cycles and lets later importers reuse the cached handle.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field
import logging

from .context import AssetContext
from .emitter import RegistrationEmitter
from .faults import UnresolvedEntry
from .handles import choose_handle
from .host import Dependency, DynamicDependency

logger = logging.getLogger("vitebridge.resolver")


@dataclass(frozen=True)
class EnqueueRequest:
    """
    Options for one enqueued path.

    Attributes:
        handle: Handle override
        deps: External dependency handles, appended after resolved imports
        module: Register ``.js`` files as script modules
        raw_options: Passthrough for classic scripts (``strategy``, ``in_footer``)
    """
    handle: Optional[str] = None
    deps: Tuple[str, ...] = ()
    module: bool = True
    raw_options: Dict[str, Any] = field(default_factory=dict)


class VisitedSet:
    """
    Manifest paths already resolved in one flush, mapped to their handle.

    An empty handle marks a path that resolved to nothing.
    """

    def __init__(self):
        self._handles: Dict[str, str] = {}

    def __contains__(self, path: str) -> bool:
        return path in self._handles

    def __iter__(self) -> Iterator[str]:
        return iter(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def mark(self, path: str, handle: str):
        self._handles[path] = handle

    def handle(self, path: str) -> str:
        return self._handles.get(path, "")


class DependencyResolver:
    """
    Resolves script modules against the manifest.

    One resolver serves one flush: ``unresolved`` collects the paths
    that had no manifest entry.

    Args:
        context: Shared resolution context
        emitter: Emitter bound to the render's host
    """

    def __init__(self, context: AssetContext, emitter: RegistrationEmitter):
        self.context = context
        self.emitter = emitter
        self.unresolved: List[UnresolvedEntry] = []

    def resolve(
        self,
        path: str,
        request: Optional[EnqueueRequest] = None,
        is_entry: bool = False,
        visited: Optional[VisitedSet] = None,
    ) -> str:
        """
        Resolve ``path`` and everything it imports.

        Args:
            path: Source-relative module path (manifest key)
            request: Caller options (entries only)
            is_entry: Register as active instead of passive
            visited: Paths already resolved in this flush

        Returns:
            Namespaced handle, or "" if the path has no manifest entry
        """
        request = request or EnqueueRequest()
        if visited is None:
            visited = VisitedSet()

        entry = self.context.manifest.get(path)
        handle = choose_handle(path, request.handle, entry.name if entry else None)
        revisit = path in visited

        if revisit and not visited.handle(path):
            return ""

        visited.mark(path, self.context.handle(handle))

        if self.context.is_dev and is_entry:
            # The dev server resolves imports itself
            return self.emitter.register_active_module(handle, path, request.deps)

        if entry is None:
            visited.mark(path, "")
            self.unresolved.append(UnresolvedEntry(path, kind="entry" if is_entry else "import"))
            logger.debug(f"No manifest entry for {path}, skipping")
            return ""

        deps: List[Dependency] = []

        for import_path in entry.imports:
            dep = self._edge(import_path, visited)
            if dep:
                deps.append(dep)

        for import_path in entry.dynamic_imports:
            dep = self._edge(import_path, visited)
            if dep:
                deps.append(DynamicDependency(dep))

        deps.extend(request.deps)

        if not revisit:
            for index, css_file in enumerate(entry.css):
                self.emitter.register_stylesheet(f"{handle}-{index}", css_file)

        if is_entry:
            return self.emitter.register_active_module(handle, entry.file, deps)
        return self.emitter.register_passive_module(handle, entry.file, deps)

    def _edge(self, path: str, visited: VisitedSet) -> str:
        if path in visited:
            return visited.handle(path)
        return self.resolve(path, visited=visited)

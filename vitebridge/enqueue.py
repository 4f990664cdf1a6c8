"""
Enqueue Queue - Per-render list of requested assets.

Requests are keyed by path: re-enqueueing a path replaces its options.
``flush_all()`` registers everything with a host, then empties the queue.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
import logging

from .context import AssetContext
from .emitter import RegistrationEmitter
from .faults import UnresolvedEntry
from .handles import choose_handle
from .host import AssetHost
from .resolver import DependencyResolver, EnqueueRequest, VisitedSet

logger = logging.getLogger("vitebridge.enqueue")


class EnqueueQueue:
    """
    Ordered mapping of path -> EnqueueRequest.

    Not thread-safe; give each render cycle its own queue (see ``copy()``).
    """

    def __init__(self, requests: Optional[Dict[str, EnqueueRequest]] = None):
        self._requests: Dict[str, EnqueueRequest] = dict(requests or {})

    def __len__(self) -> int:
        return len(self._requests)

    def __contains__(self, path: str) -> bool:
        return path in self._requests

    def __iter__(self) -> Iterator[Tuple[str, EnqueueRequest]]:
        return iter(list(self._requests.items()))

    def get(self, path: str) -> Optional[EnqueueRequest]:
        return self._requests.get(path)

    def enqueue(
        self,
        path: str,
        handle: Optional[str] = None,
        deps: Iterable[str] = (),
        module: bool = True,
        raw_options: Optional[Dict[str, Any]] = None,
    ) -> EnqueueRequest:
        """
        Request an asset for the next flush.

        Args:
            path: Source-relative path (``.js`` or ``.css``)
            handle: Handle override
            deps: External dependency handles
            module: Register ``.js`` as a script module (False = classic script)
            raw_options: Passthrough config for classic scripts

        Returns:
            The stored request
        """
        request = EnqueueRequest(
            handle=handle,
            deps=tuple(deps),
            module=module,
            raw_options=dict(raw_options or {}),
        )
        self._requests[path] = request
        return request

    def copy(self) -> "EnqueueQueue":
        return EnqueueQueue(self._requests)

    def clear(self):
        self._requests.clear()

    def flush_all(self, context: AssetContext, host: AssetHost, strict: bool = False) -> List[UnresolvedEntry]:
        """
        Register every queued request with ``host``.

        Args:
            context: Shared resolution context
            host: Per-render asset host
            strict: Collect paths that had no manifest entry

        Returns:
            Unresolved entries (always empty unless strict)
        """
        emitter = RegistrationEmitter(context, host)
        resolver = DependencyResolver(context, emitter)
        visited = VisitedSet()
        unresolved: List[UnresolvedEntry] = []

        emitter.register_dev_client()

        for path, request in self:
            if path.endswith(".js"):
                if request.module:
                    resolver.resolve(path, request, is_entry=True, visited=visited)
                else:
                    fault = self._flush_script(context, emitter, path, request)
                    if fault:
                        unresolved.append(fault)
            elif path.endswith(".css"):
                self._flush_style(context, emitter, path, request)
            else:
                logger.debug(f"Ignoring {path}: not a .js or .css file")

        self.clear()

        if not strict:
            return []

        unresolved = resolver.unresolved + unresolved
        for fault in unresolved:
            logger.warning(str(fault))
        return unresolved

    @staticmethod
    def _flush_script(
        context: AssetContext,
        emitter: RegistrationEmitter,
        path: str,
        request: EnqueueRequest,
    ) -> Optional[UnresolvedEntry]:
        entry = context.manifest.get(path)
        if context.is_dev:
            file = path
        elif entry is None:
            logger.debug(f"No manifest entry for script {path}, skipping")
            return UnresolvedEntry(path, kind="script")
        else:
            file = entry.file

        handle = choose_handle(path, request.handle, entry.name if entry else None)
        emitter.register_script(handle, file, request.deps, request.raw_options)
        return None

    @staticmethod
    def _flush_style(
        context: AssetContext,
        emitter: RegistrationEmitter,
        path: str,
        request: EnqueueRequest,
    ):
        entry = context.manifest.get(path)
        file = entry.file if entry is not None and not context.is_dev else path
        handle = choose_handle(path, request.handle, entry.name if entry else None)
        emitter.register_stylesheet(handle, file, request.deps)

"""Memoized lookup of the page that documents a code reference."""

import threading

from page_locations.code_reference import CodeReference
from page_locations.page_graph import PageGraph
from page_locations.page_node import PageNode

# Marks a lookup that ran and found nothing, as opposed to one never made.
_NOT_FOUND = object()


class PagesIndex:
    """Finds pages by reference with a depth-first search, caching misses too."""

    def __init__(self, graph: PageGraph) -> None:
        self.graph = graph
        self._pages: dict[CodeReference, object] = {}
        self._lock = threading.Lock()

    def find(self, reference: CodeReference) -> PageNode | None:
        """Return the first page in depth-first order documenting ``reference``.

        If several pages carry an equal reference only the first one found is
        ever returned.
        """
        with self._lock:
            cached = self._pages.get(reference)
        if cached is None:
            found = self.graph.dfs(lambda node: node.reference == reference)
            with self._lock:
                cached = self._pages.setdefault(
                    reference, _NOT_FOUND if found is None else found
                )
        if cached is _NOT_FOUND:
            return None
        return cached  # type: ignore[return-value]

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)

"""Memoized root-to-node filename paths of pages."""

import threading

from page_locations.identifier_to_filename import identifier_to_filename
from page_locations.is_package_kind import is_package_kind
from page_locations.page_graph import PageGraph
from page_locations.page_node import PageNode


def path_name(node: PageNode) -> str:
    """Return the path segment a page contributes to its own output path."""
    # Package names are dotted identifiers and stay intact as directory names.
    if is_package_kind(node.kind):
        return node.name or "root"
    return identifier_to_filename(node.name)


class PathCache:
    """Maps each page, by identity, to its segments from the tree root.

    Entries keep a reference to their page so its id cannot be reused while
    the entry lives.
    """

    def __init__(self, graph: PageGraph) -> None:
        self.graph = graph
        self._paths: dict[int, tuple[PageNode, tuple[str, ...]]] = {}
        self._lock = threading.Lock()

    def path_of(self, node: PageNode) -> tuple[str, ...]:
        """Return the segment names from the root down to ``node`` inclusive."""
        with self._lock:
            cached = self._paths.get(id(node))
        if cached is not None and cached[0] is node:
            return cached[1]

        segments: list[str] = []
        current: PageNode | None = node
        while current is not None:
            segments.append(path_name(current))
            current = self.graph.parent(current)
        path = tuple(reversed(segments))

        with self._lock:
            cached = self._paths.get(id(node))
            if cached is None or cached[0] is not node:
                cached = self._paths[id(node)] = (node, path)
            return cached[1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

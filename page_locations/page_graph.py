"""The page tree together with its identity-keyed parent relation."""

from collections.abc import Callable, Iterator

from page_locations.page_node import PageNode


class PageGraph:
    """Immutable page tree rooted at a module page.

    The parent relation lives in a side map keyed by node identity rather than
    on the nodes themselves. It is computed once when the graph is built.
    """

    def __init__(self, root: PageNode) -> None:
        """Index the tree under ``root``; a node reachable twice is rejected."""
        self.root = root
        self._parents: dict[int, PageNode] = {}
        self._nodes: dict[int, PageNode] = {id(root): root}
        stack = [root]
        while stack:
            node = stack.pop()
            for child in node.children:
                if id(child) in self._nodes:
                    msg = f"Page {child.name!r} appears more than once in the page tree"
                    raise ValueError(msg)
                self._nodes[id(child)] = child
                self._parents[id(child)] = node
                stack.append(child)

    def parent(self, node: PageNode) -> PageNode | None:
        """Return the parent of ``node``, or None for the root."""
        return self._parents.get(id(node))

    def __contains__(self, node: object) -> bool:
        return self._nodes.get(id(node)) is node

    def __len__(self) -> int:
        return len(self._nodes)

    def walk(self) -> Iterator[PageNode]:
        """Yield every page depth-first, children before siblings."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def dfs(self, predicate: Callable[[PageNode], bool]) -> PageNode | None:
        """Return the first page in depth-first order matching ``predicate``."""
        for node in self.walk():
            if predicate(node):
                return node
        return None

"""Resolution of pages and code references to output paths and URLs."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from page_locations.external_location import external_location
from page_locations.load_config import pass_configurations_from_config
from page_locations.page_graph import PageGraph
from page_locations.pages_index import PagesIndex
from page_locations.path_cache import PathCache
from page_locations.resolution_result import (
    ExternalLocation,
    LocalLocation,
    ResolutionResult,
    Unresolved,
)

if TYPE_CHECKING:
    from page_locations.code_reference import CodeReference
    from page_locations.external_doc_link import ExternalDocumentationLink
    from page_locations.page_node import PageNode
    from page_locations.pass_configuration import PassConfiguration
    from page_locations.platform_data import PlatformData

logger = logging.getLogger(__name__)

PAGE_WITH_CHILDREN_SUFFIX = "index"


class LocationProvider:
    """Resolves pages and references for one generation run.

    Both caches belong to the provider, so a new provider sees a clean state.
    """

    def __init__(
        self,
        graph: PageGraph,
        extension: str = ".html",
        pass_configurations: Iterable[PassConfiguration] = (),
    ) -> None:
        self.graph = graph
        self.extension = extension
        self.pass_configurations = list(pass_configurations)
        self.path_cache = PathCache(graph)
        self.pages_index = PagesIndex(graph)

    @classmethod
    def from_config(cls, graph: PageGraph, config: dict[str, Any]) -> LocationProvider:
        """Build a provider from a loaded configuration dictionary."""
        return cls(
            graph,
            extension=config["format"]["extension"],
            pass_configurations=pass_configurations_from_config(config),
        )

    def resolve_node(self, node: PageNode, context: PageNode | None = None) -> str:
        """Return the output path of ``node``, relative to ``context`` if given."""
        return self.path_to(node, context) + self.extension

    def resolve_reference(
        self,
        reference: CodeReference,
        platforms: Iterable[PlatformData],
        context: PageNode | None = None,
    ) -> ResolutionResult:
        """Resolve ``reference`` locally, else through external documentation."""
        platforms = list(platforms)
        node = self.find_in_page_graph(reference, platforms)
        if node is not None:
            return LocalLocation(self.resolve_node(node, context))

        logger.debug("%s is not in the page graph, trying external sets", reference)
        url = external_location(reference, self.external_links_for(platforms))
        if url is None:
            return Unresolved(reference)
        return ExternalLocation(url)

    def external_links_for(
        self, platforms: Iterable[PlatformData]
    ) -> list[ExternalDocumentationLink]:
        """Collect the distinct external links of passes built for ``platforms``."""
        wanted = set(platforms)
        links: list[ExternalDocumentationLink] = []
        for pass_config in self.pass_configurations:
            if pass_config.platform_data() not in wanted:
                continue
            for link in pass_config.external_documentation_links:
                if link not in links:
                    links.append(link)
        return links

    def resolve_root(self, node: PageNode) -> str:
        """Return the path from ``node`` up to the directory holding the root."""
        path = self.path_to(self.graph.root, node)
        return "../" + path.removesuffix(PAGE_WITH_CHILDREN_SUFFIX)

    def ancestors(self, node: PageNode | None) -> list[PageNode]:
        """Return the pages from the root down to ``node`` inclusive."""
        chain: list[PageNode] = []
        while node is not None:
            chain.append(node)
            node = self.graph.parent(node)
        chain.reverse()
        return chain

    def top(self) -> PageNode:
        return self.graph.root

    def find_in_page_graph(
        self, reference: CodeReference, platforms: list[PlatformData]
    ) -> PageNode | None:
        return self.pages_index.find(reference)

    def path_to(self, node: PageNode, context: PageNode | None) -> str:
        """Compute the shortest ``/``-joined path from ``context`` to ``node``.

        A leaf page is written next to its siblings, so a link authored on a
        leaf is computed from its parent's directory. Pages with children are
        directories whose own content is the ``index`` file inside.
        """
        if context is not None and not context.children:
            context = self.graph.parent(context) or context

        node_path = self.path_cache.path_of(node)
        context_path = self.path_cache.path_of(context) if context is not None else ()

        common = 0
        for a, b in zip(node_path, context_path):
            if a != b:
                break
            common += 1

        segments = [".."] * (len(context_path) - common)
        segments += node_path[common:]
        if node.children:
            segments.append(PAGE_WITH_CHILDREN_SUFFIX)
        return "/".join(segments)

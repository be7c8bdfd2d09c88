"""Markdown output for page trees."""

from collections.abc import Iterable

from page_locations.format_service import FormatService, PageLocation
from page_locations.page_node import PageNode


class MarkdownFormatService(FormatService):
    """Renders each page as a heading followed by links to its children."""

    extension = ".md"

    def append_nodes(
        self, location: PageLocation, to: list[str], nodes: Iterable[PageNode]
    ) -> None:
        for node in nodes:
            to.append(f"# {node.name}\n\n")
            for child in node.children:
                to.append(f"- [{child.name}]({location.href(child)})\n")
            if node.children:
                to.append("\n")

"""Interface through which renderers consume resolved page locations.

A format service turns pages into text in one output format. It is driven
with a ``PageLocation``, the page being written plus the provider that
resolves links from it, and may declare support files (stylesheets,
scripts) to be copied next to the generated pages.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from page_locations.code_reference import CodeReference
    from page_locations.location_provider import LocationProvider
    from page_locations.page_node import PageNode
    from page_locations.platform_data import PlatformData
    from page_locations.resolution_result import ResolutionResult


@dataclass(frozen=True)
class PageLocation:
    """The page being written, as seen by links authored on it."""

    provider: LocationProvider
    page: PageNode

    def href(self, node: PageNode) -> str:
        return self.provider.resolve_node(node, self.page)

    def link(
        self, reference: CodeReference, platforms: Iterable[PlatformData]
    ) -> ResolutionResult:
        return self.provider.resolve_reference(reference, platforms, self.page)

    def root(self) -> str:
        return self.provider.resolve_root(self.page)


class FormatService:
    """Base class for output formats."""

    #: Extension of the output files, including the leading dot.
    extension = ""

    def append_nodes(
        self, location: PageLocation, to: list[str], nodes: Iterable[PageNode]
    ) -> None:
        """Append the formatted content of ``nodes`` to ``to``."""
        raise NotImplementedError

    def enumerate_support_files(self, callback: Callable[[str, str], None]) -> None:
        """Call ``callback(resource, target_path)`` for each support file."""
        return None


def format_nodes(
    service: FormatService, location: PageLocation, nodes: Iterable[PageNode]
) -> str:
    """Format ``nodes`` to a string using ``location``."""
    parts: list[str] = []
    service.append_nodes(location, parts, nodes)
    return "".join(parts)

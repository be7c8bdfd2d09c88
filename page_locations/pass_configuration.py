"""Per-pass settings that select external documentation sets."""

from dataclasses import dataclass

from page_locations.external_doc_link import ExternalDocumentationLink
from page_locations.platform_data import PlatformData


@dataclass(frozen=True)
class PassConfiguration:
    """One documentation pass: a compilation target and its external links."""

    module_name: str
    platform: str
    targets: tuple[str, ...] = ()
    external_documentation_links: tuple[ExternalDocumentationLink, ...] = ()

    def platform_data(self) -> PlatformData:
        return PlatformData(self.module_name, self.platform, self.targets)

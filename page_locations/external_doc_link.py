"""Registration of an externally hosted documentation set."""

from dataclasses import dataclass

from page_locations.code_reference import CodeReference

JAVADOC_FORMAT = "javadoc"
DOKKA_FORMAT = "dokka"
LINK_FORMATS = frozenset({JAVADOC_FORMAT, DOKKA_FORMAT})


@dataclass(frozen=True)
class ExternalDocumentationLink:
    """Base URL of an external documentation set and the packages it covers.

    An empty ``packages`` tuple means the set applies to every package.
    """

    url: str
    format: str = JAVADOC_FORMAT
    packages: tuple[str, ...] = ()
    jdk_version: int = 8
    extension: str = ".html"

    @property
    def applies_to_all(self) -> bool:
        return not self.packages

    def matches(self, reference: CodeReference) -> bool:
        """Check if this set documents the package of ``reference``."""
        if self.applies_to_all:
            return True
        package = reference.package_name
        if not package:
            return False
        return any(package == p or package.startswith(p + ".") for p in self.packages)

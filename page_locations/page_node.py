"""Data model for nodes of the documentation page tree."""

from dataclasses import dataclass, field

from page_locations.code_reference import CodeReference

MODULE_KIND = "module"
PACKAGE_KIND = "package"
CLASSLIKE_KIND = "classlike"
MEMBER_KIND = "member"


@dataclass(eq=False)
class PageNode:
    """One documentation page; children are kept in display order.

    Nodes compare and hash by identity, so equal-looking pages in different
    places of the tree stay distinct.
    """

    name: str
    kind: str = CLASSLIKE_KIND
    children: list["PageNode"] = field(default_factory=list)
    reference: CodeReference | None = None

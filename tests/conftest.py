"""Shared page tree fixtures."""

from dataclasses import dataclass

import pytest

from page_locations.code_reference import Callable, CodeReference
from page_locations.page_graph import PageGraph
from page_locations.page_node import MEMBER_KIND, MODULE_KIND, PACKAGE_KIND, PageNode


@dataclass
class SampleTree:
    """A small module: two packages, three classes, one member."""

    graph: PageGraph
    root: PageNode
    pkg: PageNode
    foo: PageNode
    bar: PageNode
    other: PageNode
    baz: PageNode
    qux: PageNode


@pytest.fixture
def tree() -> SampleTree:
    """Build the sample module.

    root -> com.example -> {ClassFoo, ClassBar}
    root -> org.other -> Baz -> qux
    """
    foo = PageNode("ClassFoo", reference=CodeReference("com.example", "ClassFoo"))
    bar = PageNode("ClassBar", reference=CodeReference("com.example", "ClassBar"))
    pkg = PageNode(
        "com.example",
        kind=PACKAGE_KIND,
        children=[foo, bar],
        reference=CodeReference("com.example"),
    )
    qux = PageNode(
        "qux",
        kind=MEMBER_KIND,
        reference=CodeReference("org.other", "Baz", Callable("qux", ("Int",))),
    )
    baz = PageNode("Baz", children=[qux], reference=CodeReference("org.other", "Baz"))
    other = PageNode("org.other", kind=PACKAGE_KIND, children=[baz])
    root = PageNode("", kind=MODULE_KIND, children=[pkg, other])
    return SampleTree(PageGraph(root), root, pkg, foo, bar, other, baz, qux)

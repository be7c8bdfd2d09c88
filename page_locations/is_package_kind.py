"""Predicate for checking if a page documents a package."""

from page_locations.page_node import PACKAGE_KIND


def is_package_kind(kind: str) -> bool:
    """Check if the kind represents a package page."""
    return kind.lower() == PACKAGE_KIND

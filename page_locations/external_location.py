"""Logic for resolving references against external documentation sets."""

import logging
from collections.abc import Iterable

from page_locations.code_reference import CodeReference
from page_locations.external_doc_link import DOKKA_FORMAT, ExternalDocumentationLink
from page_locations.to_dokka_location import to_dokka_location
from page_locations.to_javadoc_location import to_javadoc_location

logger = logging.getLogger(__name__)


def external_location(
    reference: CodeReference, links: Iterable[ExternalDocumentationLink]
) -> str | None:
    """Return the URL of ``reference`` in the first matching set, if any."""
    for link in links:
        if not link.matches(reference):
            continue
        if link.format == DOKKA_FORMAT:
            path = to_dokka_location(reference, link.extension)
        else:
            path = to_javadoc_location(reference, link.jdk_version)
        return f"{link.url.rstrip('/')}/{path}"
    logger.debug("No external documentation set covers %s", reference)
    return None

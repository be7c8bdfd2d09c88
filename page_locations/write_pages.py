"""Logic for writing a page tree and its support files to disk."""

import logging
import shutil
from pathlib import Path

from page_locations.format_service import FormatService, PageLocation, format_nodes
from page_locations.location_provider import LocationProvider
from page_locations.output_file_for_page import output_file_for_page

logger = logging.getLogger(__name__)


def write_pages(
    provider: LocationProvider,
    service: FormatService,
    out_root: Path,
    support_root: Path | None = None,
) -> int:
    """Write every page of the provider's tree, then copy support files.

    Pages land at ``provider.resolve_node(page)`` under ``out_root``, so the
    provider must use the service's extension. Support resources are looked
    up under ``support_root`` when one is given.
    """
    if provider.extension != service.extension:
        msg = (
            f"Provider extension {provider.extension!r} does not match "
            f"format extension {service.extension!r}"
        )
        raise ValueError(msg)

    written = 0
    for page in provider.graph.walk():
        text = format_nodes(service, PageLocation(provider, page), [page])
        out_file = output_file_for_page(out_root, provider.resolve_node(page))
        out_file.write_text(text, encoding="utf-8")
        written += 1

    def copy_support_file(resource: str, target_path: str) -> None:
        source = support_root / resource if support_root else Path(resource)
        shutil.copyfile(source, output_file_for_page(out_root, target_path))

    service.enumerate_support_files(copy_support_file)

    logger.info("Wrote %d pages into %s", written, out_root)
    return written

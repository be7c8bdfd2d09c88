"""Location of a reference inside a documentation set laid out like ours."""

from page_locations.code_reference import CodeReference
from page_locations.identifier_to_filename import identifier_to_filename


def to_dokka_location(reference: CodeReference, extension: str) -> str:
    """Build the set-relative path of ``reference`` in the native layout."""
    package_prefix = f"{reference.package_name}/" if reference.package_name else ""
    if reference.class_names is None:
        return f"{package_prefix}index{extension}"

    class_link = package_prefix + "/".join(
        identifier_to_filename(name) for name in reference.class_names.split(".")
    )
    if reference.callable is None:
        return f"{class_link}/index{extension}"
    return f"{class_link}/{identifier_to_filename(reference.callable.name)}{extension}"

"""Location of a reference inside a javadoc-generated documentation set."""

import html

from page_locations.code_reference import CodeReference


def to_javadoc_location(reference: CodeReference, jdk_version: int) -> str:
    """Build the javadoc-relative URL of ``reference``.

    The anchor syntax for method parameters changed twice: before JDK 8 it is
    ``name(A, B)``, JDK 8 and 9 use ``name-A-B-`` and JDK 10+ use ``name(A,B)``.
    """
    package_link = (
        reference.package_name.replace(".", "/") if reference.package_name else None
    )
    if reference.class_names is None:
        if package_link is None:
            return "package-summary.html"
        return html.escape(f"{package_link}/package-summary.html")

    class_link = f"{reference.class_names}.html"
    if package_link is not None:
        class_link = f"{package_link}/{class_link}"
    if reference.callable is None:
        return html.escape(class_link)

    params = reference.callable.params
    if jdk_version < 8:
        signature = f"({', '.join(params)})"
    elif jdk_version < 10:
        signature = f"-{'-'.join(params)}-"
    else:
        signature = f"({','.join(params)})"
    return html.escape(f"{class_link}#{reference.callable.name}{signature}")

"""Logic for turning display identifiers into case-insensitive-safe filenames."""

import re

ROOT_FILENAME = "--root--"

# The generator's own index page plus legacy device names.
RESERVED_FILENAMES = frozenset(
    {"index", "con", "aux", "lst", "prn", "nul", "eof", "inp", "out"}
)

UPPERCASE_RE = re.compile(r"[A-Z]")


def identifier_to_filename(name: str) -> str:
    """Make a stable filename segment that survives case-folding filesystems.

    Every uppercase letter becomes a dash followed by its lowercase form, so
    ``FooBar`` and ``fooBar`` map to ``-foo-bar`` and ``foo-bar``. Generic
    brackets become dashes. Names equal to a reserved name in any casing are
    wrapped in ``--``: ``index`` gives ``--index--`` and ``Index`` gives
    ``---index--``.
    """
    if not name:
        return ROOT_FILENAME
    escaped = name.replace("<", "-").replace(">", "-")
    lowercase = UPPERCASE_RE.sub(lambda m: "-" + m.group(0).lower(), escaped)
    if escaped.lower() in RESERVED_FILENAMES:
        return f"--{lowercase}--"
    return lowercase

"""Data model for a compilation target of a documentation pass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformData:
    """Identifies one compilation target: module, platform kind and targets."""

    module_name: str
    platform: str
    targets: tuple[str, ...] = ()

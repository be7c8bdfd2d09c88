"""Data models for structured references to documented code elements."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Callable:
    """A function or method: its name and parameter type names in order."""

    name: str
    params: tuple[str, ...] = ()


@dataclass(frozen=True)
class CodeReference:
    """Identifies a package, class or member as a cross-link target.

    ``class_names`` is the dot-joined nested-class path, outer to inner.
    A ``callable`` is only meaningful together with ``class_names``.
    """

    package_name: str | None = None
    class_names: str | None = None
    callable: Callable | None = None

    def __str__(self) -> str:
        parts = [self.package_name or "", self.class_names or ""]
        text = "/".join(parts)
        if self.callable is not None:
            text += f"/{self.callable.name}({','.join(self.callable.params)})"
        return text

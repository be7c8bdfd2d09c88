"""Data models for the outcome of resolving a code reference."""

from dataclasses import dataclass

from page_locations.code_reference import CodeReference


@dataclass(frozen=True)
class LocalLocation:
    """The reference is documented in this page tree at ``path``."""

    path: str

    @property
    def href(self) -> str:
        return self.path


@dataclass(frozen=True)
class ExternalLocation:
    """The reference is documented in an external set at ``url``."""

    url: str

    @property
    def href(self) -> str:
        return self.url


@dataclass(frozen=True)
class Unresolved:
    """Nothing documents the reference; render it as plain text."""

    reference: CodeReference

    @property
    def href(self) -> None:
        return None


ResolutionResult = LocalLocation | ExternalLocation | Unresolved

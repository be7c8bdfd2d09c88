"""Logic for loading the output format and pass configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from page_locations.deep_merge import deep_merge
from page_locations.external_doc_link import LINK_FORMATS, ExternalDocumentationLink
from page_locations.pass_configuration import PassConfiguration

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "format": {
        "extension": ".html",
    },
    "passes": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config


def pass_configurations_from_config(config: dict[str, Any]) -> list[PassConfiguration]:
    """Build the pass configurations listed under ``passes``."""
    return [
        PassConfiguration(
            module_name=str(raw.get("module_name", "")),
            platform=str(raw.get("platform", "")),
            targets=_string_list(raw, "targets"),
            external_documentation_links=tuple(
                _external_link(link)
                for link in raw.get("external_documentation_links") or ()
            ),
        )
        for raw in config.get("passes") or []
    ]


def _external_link(raw: dict[str, Any]) -> ExternalDocumentationLink:
    link_format = raw.get("format", "javadoc")
    if link_format not in LINK_FORMATS:
        msg = f"Unknown external documentation format: {link_format!r}"
        raise ValueError(msg)
    jdk_version = raw.get("jdk_version", 8)
    if isinstance(jdk_version, bool) or not isinstance(jdk_version, int):
        msg = f"jdk_version must be an integer, got {jdk_version!r}"
        raise ValueError(msg)
    if not raw.get("url"):
        msg = f"External documentation link has no url: {raw!r}"
        raise ValueError(msg)
    return ExternalDocumentationLink(
        url=str(raw["url"]),
        format=link_format,
        packages=_string_list(raw, "packages"),
        jdk_version=jdk_version,
        extension=str(raw.get("extension", ".html")),
    )


def _string_list(raw: dict[str, Any], key: str) -> tuple[str, ...]:
    # A scalar here would otherwise be split into characters.
    value = raw.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = f"{key} must be a list, got {value!r}"
        raise ValueError(msg)
    return tuple(str(item) for item in value)

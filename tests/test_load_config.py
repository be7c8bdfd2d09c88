"""Tests for configuration loading and merging."""

import logging
from pathlib import Path

import pytest
import yaml

from page_locations.deep_merge import deep_merge
from page_locations.external_doc_link import DOKKA_FORMAT, JAVADOC_FORMAT
from page_locations.load_config import (
    DEFAULT_CONFIG,
    load_config,
    pass_configurations_from_config,
)
from page_locations.platform_data import PlatformData


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3]})
    assert merged == {"arr": [3]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["format"]["extension"] = ".txt"
    assert DEFAULT_CONFIG["format"]["extension"] == ".html"


def test_load_config_missing_file_warns(tmp_path: Path, caplog) -> None:
    """Verify that a missing file falls back to defaults with a warning."""
    with caplog.at_level(logging.WARNING):
        config = load_config(str(tmp_path / "absent.yml"))
    assert config == DEFAULT_CONFIG
    assert "not found" in caplog.text


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "format": {"extension": ".md"},
        "passes": [
            {
                "module_name": "core",
                "platform": "jvm",
                "targets": ["jvm"],
                "external_documentation_links": [
                    {
                        "url": "https://docs.oracle.com/javase/11/docs/api/",
                        "jdk_version": 11,
                        "packages": ["java", "javax"],
                    },
                    {"url": "https://kotlinlang.org/api", "format": "dokka"},
                ],
            }
        ],
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["format"]["extension"] == ".md"

    (pass_config,) = pass_configurations_from_config(loaded)
    assert pass_config.platform_data() == PlatformData("core", "jvm", ("jvm",))
    jdk, kotlin = pass_config.external_documentation_links
    assert jdk.format == JAVADOC_FORMAT
    jdk_version = 11
    assert jdk.jdk_version == jdk_version
    assert jdk.packages == ("java", "javax")
    assert kotlin.format == DOKKA_FORMAT
    assert kotlin.applies_to_all


def test_unknown_link_format_is_rejected() -> None:
    """Verify that only javadoc and dokka sets are accepted."""
    link = {"url": "u", "format": "x"}
    config = {"passes": [{"external_documentation_links": [link]}]}
    with pytest.raises(ValueError, match="Unknown external documentation format"):
        pass_configurations_from_config(config)


def test_non_integer_jdk_version_is_rejected() -> None:
    """Verify that jdk_version must be an integer."""
    link = {"url": "u", "jdk_version": "8"}
    config = {"passes": [{"external_documentation_links": [link]}]}
    with pytest.raises(ValueError, match="jdk_version"):
        pass_configurations_from_config(config)


def test_scalar_packages_are_rejected() -> None:
    """Verify that a single package string is not split into characters."""
    link = {"url": "https://x.example", "packages": "java"}
    config = {"passes": [{"external_documentation_links": [link]}]}
    with pytest.raises(ValueError, match="packages must be a list"):
        pass_configurations_from_config(config)


def test_scalar_targets_are_rejected() -> None:
    """Verify that pass targets must be a list."""
    config = {"passes": [{"module_name": "core", "platform": "jvm", "targets": "jvm"}]}
    with pytest.raises(ValueError, match="targets must be a list"):
        pass_configurations_from_config(config)


def test_link_without_url_is_rejected() -> None:
    """Verify that every external link names its base URL."""
    config = {"passes": [{"external_documentation_links": [{"format": "dokka"}]}]}
    with pytest.raises(ValueError, match="no url"):
        pass_configurations_from_config(config)

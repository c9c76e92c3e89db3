"""Tests for YAML configuration objects."""
import tempfile
from pathlib import Path
import pytest
from drupal_regression.core.config import Settings
from drupal_regression.core.config_store import ConfigFactory, deep_merge
from drupal_regression.core.errors import ConfigError


def test_loads_yaml_config_objects():
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = Path(temp_dir)
        (config_dir / "drupal_regression.settings.yml").write_text(
            "ignored_bundles:\n  node:\n    - landing_page\n", encoding="utf-8"
        )

        factory = ConfigFactory(config_dir=config_dir)

        assert factory.get("drupal_regression.settings") == {"ignored_bundles": {"node": ["landing_page"]}}
        assert factory.get("drupal_regression.mock_data") == {}


def test_empty_file_is_empty_config():
    with tempfile.TemporaryDirectory() as temp_dir:
        (Path(temp_dir) / "drupal_regression.yml").write_text("", encoding="utf-8")

        assert ConfigFactory(config_dir=temp_dir).get("drupal_regression") == {}


def test_non_mapping_config_raises():
    with tempfile.TemporaryDirectory() as temp_dir:
        (Path(temp_dir) / "drupal_regression.yml").write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigFactory(config_dir=temp_dir).get("drupal_regression")


def test_overrides_are_merged_over_file_data():
    with tempfile.TemporaryDirectory() as temp_dir:
        (Path(temp_dir) / "drupal_regression.yml").write_text("enabled: false\nother: 1\n", encoding="utf-8")

        factory = ConfigFactory(config_dir=temp_dir, overrides={"drupal_regression": {"enabled": True}})

        assert factory.get("drupal_regression") == {"enabled": True, "other": 1}


def test_from_settings_overrides_enabled_flag():
    settings = Settings(database_url="sqlite://", config_dir="does-not-exist", regression_enabled=True)

    factory = ConfigFactory.from_settings(settings)

    assert factory.get("drupal_regression") == {"enabled": True}


def test_from_settings_without_override():
    settings = Settings(database_url="sqlite://", config_dir="does-not-exist", regression_enabled=None)

    assert ConfigFactory.from_settings(settings).get("drupal_regression") == {}


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}}

    merged = deep_merge(base, {"a": {"c": 3}})

    assert merged == {"a": {"b": 1, "c": 3}}
    assert base == {"a": {"b": 1, "c": 2}}

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from psync_menu.config import load_settings
from psync_menu.datasource.demo import demo_subjects
from psync_menu.registry import load_data_source
from psync_menu.runtime.serialization import model_payload


def clear_env(monkeypatch):
    for name in ("DATA_SOURCE", "NAMESPACE", "LOG_LEVEL"):
        monkeypatch.delenv(f"PSYNC_MENU_{name}", raising=False)


def test_load_demo_source():
    source = load_data_source("demo")
    assert source.subject_count() == 18


def test_load_json_source(tmp_path):
    path = tmp_path / "store.json"
    subjects = demo_subjects(1_700_000_000)[:2]
    path.write_text(json.dumps({"subjects": [model_payload(s) for s in subjects]}), encoding="utf-8")

    source = load_data_source(str(path))
    assert source.subject_count() == 2
    assert source.subject(1).display_name == "CrystalQueen"


def test_load_factory_reference():
    source = load_data_source("psync_menu.datasource.demo:demo_source")
    assert source.snapshot_count(4) == 8


def test_unknown_or_missing_sources_raise(tmp_path):
    with pytest.raises(ValueError):
        load_data_source("nope")
    with pytest.raises(ValueError):
        load_data_source(str(tmp_path / "missing.json"))


def test_source_without_contract_methods_is_rejected():
    with pytest.raises(TypeError):
        load_data_source("builtins:object")


def test_settings_defaults(tmp_path, monkeypatch):
    clear_env(monkeypatch)
    settings = load_settings(config_path=tmp_path / "config.toml")

    assert settings.data_source == "demo"
    assert settings.namespace == "psync"
    assert settings.log_level == "WARNING"


def test_settings_precedence(tmp_path, monkeypatch):
    clear_env(monkeypatch)
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[menu]\ndata_source = "store.json"\nnamespace = "slab"\nlog_level = "info"\n',
        encoding="utf-8",
    )

    settings = load_settings(config_path=config_path)
    assert settings.data_source == "store.json"
    assert settings.namespace == "slab"
    assert settings.log_level == "INFO"

    monkeypatch.setenv("PSYNC_MENU_NAMESPACE", "envns")
    assert load_settings(config_path=config_path).namespace == "envns"

    settings = load_settings(config_path=config_path, namespace="cli", data_source=None)
    assert settings.namespace == "cli"
    assert settings.data_source == "store.json"


def test_invalid_settings_raise(tmp_path, monkeypatch):
    clear_env(monkeypatch)
    with pytest.raises(ValidationError):
        load_settings(config_path=tmp_path / "config.toml", log_level="LOUD")
    with pytest.raises(ValidationError):
        load_settings(config_path=tmp_path / "config.toml", namespace="a:b")


def test_unreadable_config_is_ignored(tmp_path, monkeypatch):
    clear_env(monkeypatch)
    config_path = tmp_path / "config.toml"
    config_path.write_text("not [valid toml", encoding="utf-8")

    assert load_settings(config_path=config_path).data_source == "demo"

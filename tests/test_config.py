from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest
from pydantic import ValidationError

from splunk_hec.config import CollectorConfig, default_config_text, init_config, load_config

BASE_CONFIG = """url = \"https://splunk.internal:8088/services/collector/event\"
token = \"abc-123\"
source = \"billing-api\"
sourcetype = \"_json\"
index = \"app_events\"
"""


def test_config_loads_valid_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(BASE_CONFIG, encoding="utf-8")

    cfg = load_config(config_path)
    assert cfg.url == "https://splunk.internal:8088/services/collector/event"
    assert cfg.token == "abc-123"
    assert cfg.index == "app_events"
    assert cfg.tls_verify is False
    assert cfg.timeout_seconds is None


def test_config_rejects_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(BASE_CONFIG + "unexpected = 1\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_config_requires_all_connection_fields(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(BASE_CONFIG.replace('index = "app_events"\n', ""), encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.toml")


def test_env_overrides_token_and_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(BASE_CONFIG, encoding="utf-8")
    monkeypatch.setenv("SPLUNK_HEC_TOKEN", "from-env")
    monkeypatch.setenv("SPLUNK_HEC_URL", "https://other:8088/services/collector/event")

    cfg = load_config(config_path)
    assert cfg.token == "from-env"
    assert cfg.url == "https://other:8088/services/collector/event"


def test_config_is_immutable() -> None:
    cfg = CollectorConfig(url="u", token="t", source="s", sourcetype="st", index="i")

    with pytest.raises(ValidationError):
        cfg.token = "changed"  # type: ignore[misc]


def test_config_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        CollectorConfig(url="u", token="t", source="s", sourcetype="st", index="i", timeout_seconds=0)


def test_init_config_writes_template_once(tmp_path: Path) -> None:
    config_path = tmp_path / "hec" / "config.toml"

    path = init_config(config_path)
    assert path.read_text(encoding="utf-8") == default_config_text()
    if os.name != "nt":
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert stat.S_IMODE(path.parent.stat().st_mode) == 0o700

    path.write_text(BASE_CONFIG, encoding="utf-8")
    init_config(config_path)
    assert path.read_text(encoding="utf-8") == BASE_CONFIG
    assert load_config(path).source == "billing-api"

from __future__ import annotations

import os
import stat
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from splunk_hec.constants import ENV_TOKEN, ENV_URL


class CollectorConfig(BaseModel):
    """Static settings for an HTTP Event Collector endpoint.

    String contents are not checked here; a malformed url surfaces as a
    transport error when an event is sent.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str
    token: str
    source: str
    sourcetype: str
    index: str
    # Certificate checking is off unless explicitly requested.
    tls_verify: bool = False
    timeout_seconds: float | None = Field(default=None, gt=0)


def default_config_dir() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / "SplunkHec"
    return Path.home() / ".splunk_hec"


def default_config_path() -> Path:
    return default_config_dir() / "config.toml"


def _secure_path(path: Path, mode: int) -> None:
    if os.name == "nt":
        return
    path.chmod(mode)
    actual = stat.S_IMODE(path.stat().st_mode)
    if actual != mode:
        raise PermissionError(f"unable to set permissions {oct(mode)} for {path}")


def default_config_text() -> str:
    return (
        'url = "https://localhost:8088/services/collector/event"\n'
        'token = ""\n'
        'source = "splunk-hec"\n'
        'sourcetype = "_json"\n'
        'index = "main"\n'
        "tls_verify = false\n"
        "# timeout_seconds = 10\n"
    )


def init_config(config_path: Path | None = None) -> Path:
    path = (config_path or default_config_path()).expanduser().resolve(strict=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    _secure_path(path.parent, 0o700)
    if not path.exists():
        path.write_text(default_config_text(), encoding="utf-8")
    _secure_path(path, 0o600)
    return path


def load_config(config_path: Path | None = None) -> CollectorConfig:
    path = (config_path or default_config_path()).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}; run `splunk-hec init` first")
    with path.open("rb") as handle:
        raw: dict[str, Any] = tomllib.load(handle)

    env_token = os.getenv(ENV_TOKEN)
    if env_token:
        raw["token"] = env_token
    env_url = os.getenv(ENV_URL)
    if env_url:
        raw["url"] = env_url

    return CollectorConfig.model_validate(raw)

"""Tests for core.config_check."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from core.config_check import is_configured
from core.settings import reload_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Ensure clean settings cache for each test."""
    reload_settings()
    yield
    reload_settings()


def _write_setup(root: Path, **overrides) -> Path:
    data = {
        "gateway_url": "http://gateway.local:8080",
        "api_key": "****",
        "api_key_secret": "ANTHROPIC_API_KEY",
        "provider": "Anthropic",
        "channels": ["Slack", "Telegram"],
    }
    data.update(overrides)
    path = root / "config" / "setup.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data))
    return path


def test_is_configured_missing_setup(tmp_path: Path) -> None:
    ok, reason = is_configured(project_root=tmp_path)
    assert ok is False
    assert "not found" in reason


def test_is_configured_malformed_yaml(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "setup.yaml").write_text("not: valid: yaml: [")
    ok, reason = is_configured(project_root=tmp_path)
    assert ok is False
    assert "parse error" in reason


def test_is_configured_no_channels(tmp_path: Path) -> None:
    _write_setup(tmp_path, channels=[])
    ok, reason = is_configured(project_root=tmp_path)
    assert ok is False
    assert "No channels" in reason


def test_is_configured_key_missing(tmp_path: Path) -> None:
    _write_setup(tmp_path)
    with patch("core.config_check.secrets.get_keyring_secret", return_value=None):
        ok, reason = is_configured(project_root=tmp_path)
    assert ok is False
    assert "ANTHROPIC_API_KEY" in reason


def test_is_configured_with_key(tmp_path: Path) -> None:
    _write_setup(tmp_path)
    with patch("core.config_check.secrets.get_keyring_secret", return_value="sk-from-keyring") as mock_get:
        ok, reason = is_configured(project_root=tmp_path)
    assert ok is True
    assert reason == "ok"
    mock_get.assert_called_once_with("ANTHROPIC_API_KEY")


def test_is_configured_honours_setup_file_setting(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "settings.yaml").write_text(
        yaml.safe_dump({"storage": {"setup_file": "state/openclaw.yaml"}})
    )
    setup = _write_setup(tmp_path)
    target = tmp_path / "state" / "openclaw.yaml"
    target.parent.mkdir()
    setup.rename(target)
    with patch("core.config_check.secrets.get_keyring_secret", return_value="sk"):
        ok, _ = is_configured(project_root=tmp_path)
    assert ok is True


def test_is_configured_env_only_key_is_not_enough(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A key present only in the environment is stripped at launch, so setup is incomplete."""
    _write_setup(tmp_path)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-from-env-1234")
    with patch("core.secrets.keyring") as mock_kr:
        mock_kr.get_password.return_value = None
        ok, reason = is_configured(project_root=tmp_path)
    assert ok is False
    assert "not found in keyring" in reason

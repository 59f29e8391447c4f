"""Tests for onboarding.config_store."""

import io
import logging
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml
from keyring.errors import KeyringError

from core.secrets import MASK
from onboarding.config_store import (
    ConsoleConfigurationStore,
    KeyringConfigurationStore,
    load_setup,
    masked_snapshot,
)
from onboarding.errors import ErrorKind, SaveFailedError
from onboarding.models import Channel, Provider

API_KEY = "sk-ant-REDACTED"


def _key_fragments(key: str, size: int = 4) -> list[str]:
    return [key[i : i + size] for i in range(len(key) - size + 1)]


def _assert_masked(text: str) -> None:
    assert MASK in text
    for fragment in _key_fragments(API_KEY):
        assert fragment not in text


def test_masked_snapshot_sorts_channels() -> None:
    snap = masked_snapshot("http://gw", Provider.OPENAI, {Channel.SLACK, Channel.DISCORD})
    assert snap == {
        "gateway_url": "http://gw",
        "api_key": MASK,
        "provider": "OpenAI",
        "channels": ["Discord", "Slack"],
    }


@pytest.mark.asyncio
async def test_console_store_prints_masked_snapshot(caplog: pytest.LogCaptureFixture) -> None:
    out = io.StringIO()
    store = ConsoleConfigurationStore(delay=0, stream=out)

    with caplog.at_level(logging.DEBUG):
        ok = await store.save(
            "http://gateway.local", API_KEY, Provider.ANTHROPIC, {Channel.TELEGRAM, Channel.SLACK}
        )

    assert ok is True
    printed = out.getvalue()
    assert printed.startswith("Saving configuration:")
    assert "Telegram" in printed and "Slack" in printed
    _assert_masked(printed)
    _assert_masked(caplog.text)


@pytest.mark.asyncio
async def test_keyring_store_writes_yaml_without_key(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    setup_path = tmp_path / "config" / "setup.yaml"
    store = KeyringConfigurationStore(setup_path)

    with (
        patch("onboarding.config_store.is_keyring_available", return_value=True),
        patch("onboarding.config_store.set_secret_async", new_callable=AsyncMock) as mock_set,
        caplog.at_level(logging.DEBUG),
    ):
        ok = await store.save("https://gw.example.com", API_KEY, Provider.OPENAI, [Channel.SIGNAL])

    assert ok is True
    mock_set.assert_awaited_once_with("OPENAI_API_KEY", API_KEY)
    text = setup_path.read_text()
    _assert_masked(text)
    data = yaml.safe_load(text)
    assert data == {
        "gateway_url": "https://gw.example.com",
        "api_key": MASK,
        "api_key_secret": "OPENAI_API_KEY",
        "provider": "OpenAI",
        "channels": ["Signal"],
    }
    assert API_KEY not in caplog.text
    assert list(setup_path.parent.glob("setup_*.yaml")) == []


@pytest.mark.asyncio
async def test_keyring_store_refuses_plaintext_fallback(tmp_path: Path) -> None:
    setup_path = tmp_path / "setup.yaml"
    store = KeyringConfigurationStore(setup_path)

    with patch("onboarding.config_store.is_keyring_available", return_value=False):
        with pytest.raises(SaveFailedError) as exc_info:
            await store.save("http://gw", API_KEY, Provider.GOOGLE, [Channel.SLACK])

    assert exc_info.value.kind is ErrorKind.SAVE_FAILED
    assert not setup_path.exists()


@pytest.mark.asyncio
async def test_keyring_store_wraps_keyring_error(tmp_path: Path) -> None:
    store = KeyringConfigurationStore(tmp_path / "setup.yaml")

    with (
        patch("onboarding.config_store.is_keyring_available", return_value=True),
        patch(
            "onboarding.config_store.set_secret_async",
            new_callable=AsyncMock,
            side_effect=KeyringError("locked"),
        ),
    ):
        with pytest.raises(SaveFailedError, match="keyring write failed"):
            await store.save("http://gw", API_KEY, Provider.GOOGLE, [Channel.SLACK])


@pytest.mark.asyncio
async def test_keyring_store_wraps_file_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = KeyringConfigurationStore(blocker / "setup.yaml")

    with (
        patch("onboarding.config_store.is_keyring_available", return_value=True),
        patch("onboarding.config_store.set_secret_async", new_callable=AsyncMock),
    ):
        with pytest.raises(SaveFailedError, match="could not write"):
            await store.save("http://gw", API_KEY, Provider.GOOGLE, [Channel.SLACK])


def test_load_setup_missing_or_malformed(tmp_path: Path) -> None:
    assert load_setup(tmp_path / "missing.yaml") is None
    bad = tmp_path / "bad.yaml"
    bad.write_text("not: valid: yaml: [")
    assert load_setup(bad) is None

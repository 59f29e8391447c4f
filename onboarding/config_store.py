"""Configuration persistence. The API key only ever leaves this module masked."""

import asyncio
import logging
import sys
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol, TextIO, runtime_checkable

import yaml
from keyring.errors import KeyringError

from core.secrets import is_keyring_available, mask_secret, set_secret_async
from onboarding.errors import SaveFailedError
from onboarding.models import Channel, Provider, channel_names

logger = logging.getLogger(__name__)

DEFAULT_SAVE_DELAY = 1.0


@runtime_checkable
class ConfigurationStore(Protocol):
    """Accept a configuration snapshot; raise SaveFailedError on failure."""

    async def save(
        self,
        gateway_url: str,
        api_key: str,
        provider: Provider,
        channels: Iterable[Channel],
    ) -> bool: ...


def masked_snapshot(
    gateway_url: str,
    provider: Provider,
    channels: Iterable[Channel],
) -> dict[str, Any]:
    """Observable form of a configuration. Takes no key; the key slot is always MASK."""
    return {
        "gateway_url": gateway_url,
        "api_key": mask_secret(None),
        "provider": provider.value,
        "channels": channel_names(set(channels)),
    }


class ConsoleConfigurationStore:
    """Reference store: waits, then reports the masked snapshot. Always succeeds."""

    def __init__(self, delay: float = DEFAULT_SAVE_DELAY, stream: TextIO | None = None) -> None:
        self._delay = delay
        self._stream = stream

    async def save(
        self,
        gateway_url: str,
        api_key: str,
        provider: Provider,
        channels: Iterable[Channel],
    ) -> bool:
        await asyncio.sleep(self._delay)
        snapshot = masked_snapshot(gateway_url, provider, channels)
        logger.info("Saving configuration: %s", snapshot)
        print(f"Saving configuration: {snapshot}", file=self._stream or sys.stdout)
        return True


class KeyringConfigurationStore:
    """Key in the OS keyring, everything else in an atomically written YAML file."""

    def __init__(self, setup_path: Path) -> None:
        self._setup_path = setup_path

    async def save(
        self,
        gateway_url: str,
        api_key: str,
        provider: Provider,
        channels: Iterable[Channel],
    ) -> bool:
        channels = set(channels)
        if not is_keyring_available():
            # No plaintext fallback: the key must not land in a file
            raise SaveFailedError("no secure keyring backend available")
        try:
            await set_secret_async(provider.secret_name, api_key)
        except KeyringError as e:
            logger.warning("Failed to store %s in keyring: %s", provider.secret_name, e)
            raise SaveFailedError(f"keyring write failed: {e}") from e

        data = masked_snapshot(gateway_url, provider, channels)
        data["api_key_secret"] = provider.secret_name
        try:
            await asyncio.to_thread(_write_atomic_yaml, self._setup_path, data)
        except OSError as e:
            raise SaveFailedError(f"could not write {self._setup_path.name}: {e}") from e
        logger.info("Configuration written to %s", self._setup_path)
        return True


def load_setup(setup_path: Path) -> dict[str, Any] | None:
    """Read a saved setup file. None if missing or unreadable."""
    if not setup_path.exists():
        return None
    try:
        data = yaml.safe_load(setup_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _write_atomic_yaml(path: Path, data: dict[str, Any]) -> None:
    """Write YAML atomically via temp file + rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(suffix=".yaml", prefix="setup_", dir=path.parent)
    try:
        with open(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
        Path(tmp).replace(path)
    except Exception:
        Path(tmp).unlink(missing_ok=True)
        raise

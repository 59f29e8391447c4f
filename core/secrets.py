"""API key storage via OS keyring, plus masking for anything observable."""

import asyncio
import logging

import keyring
from keyring.errors import KeyringError

logger = logging.getLogger(__name__)
SERVICE_NAME = "openclawkit"

# Fixed placeholder written wherever a secret would otherwise appear
MASK = "****"


def mask_secret(value: str | None) -> str:
    """Return the fixed placeholder for a secret. Never derived from the value."""
    return MASK


def _is_fail_backend() -> bool:
    """True when the active backend is the fail stub (no real keyring)."""
    try:
        from keyring.backends.fail import Keyring as FailKeyring

        return isinstance(keyring.get_keyring(), FailKeyring)
    except Exception:
        return True


def is_keyring_available() -> bool:
    """True when a real OS keyring backend is active."""
    return not _is_fail_backend()


def get_keyring_secret(name: str) -> str | None:
    """Look a secret up in the keyring only. The launched agent has no other source."""
    try:
        return keyring.get_password(SERVICE_NAME, name) or None
    except KeyringError:
        logger.debug("keyring lookup failed for %s", name)
        return None


async def set_secret_async(name: str, value: str) -> None:
    """Store secret in OS keyring off the event loop. Raises KeyringError on failure."""
    await asyncio.to_thread(keyring.set_password, SERVICE_NAME, name, value)
    logger.info("Stored %s in keyring (%s)", name, mask_secret(value))

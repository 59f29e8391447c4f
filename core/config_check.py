"""Decide whether a saved setup is complete enough to launch the agent without the wizard."""

from pathlib import Path

import yaml

from core import secrets
from core.settings import get_setting, load_settings


def _read_setup(setup_file: Path) -> tuple[dict, str | None]:
    """Load and parse setup YAML. Returns (data, None) or ({}, error_message)."""
    try:
        data = yaml.safe_load(setup_file.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        return {}, f"{setup_file.name} parse error: {e}"
    if not isinstance(data, dict):
        return {}, f"{setup_file.name} is not a mapping"
    return data, None


def is_configured(
    project_root: Path | None = None,
    setup_path: Path | None = None,
) -> tuple[bool, str]:
    """Check whether a previous wizard run left a usable setup. Returns (ok, reason)."""
    root = project_root or Path.cwd()
    if setup_path is None:
        rel = get_setting(load_settings(root / "config"), "storage.setup_file", "config/setup.yaml")
        setup_path = root / rel
    if not setup_path.exists():
        return False, f"{setup_path.name} not found"
    data, err = _read_setup(setup_path)
    if err is not None:
        return False, err
    if not data.get("gateway_url"):
        return False, "gateway_url not set"
    if not data.get("provider"):
        return False, "provider not set"
    if not data.get("channels"):
        return False, "No channels selected"
    secret = data.get("api_key_secret")
    if not secret or not secrets.get_keyring_secret(secret):
        return False, f"API key {secret or '(unnamed)'} not found in keyring"
    return True, "ok"

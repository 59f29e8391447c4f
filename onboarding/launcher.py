"""Start the downstream agent with the finalized configuration."""

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Any

from onboarding.errors import WizardError
from onboarding.models import Channel, LaunchConfig, Provider, channel_names

logger = logging.getLogger(__name__)

ENV_GATEWAY_URL = "OPENCLAW_GATEWAY_URL"
ENV_PROVIDER = "OPENCLAW_PROVIDER"
ENV_CHANNELS = "OPENCLAW_CHANNELS"


def build_launch_env(config: LaunchConfig, base: dict[str, str] | None = None) -> dict[str, str]:
    """Environment for the agent process. The API key is never included."""
    env = dict(os.environ if base is None else base)
    env[ENV_GATEWAY_URL] = config.gateway_url
    env[ENV_PROVIDER] = config.provider.name.lower()
    env[ENV_CHANNELS] = ",".join(c.name.lower() for c in sorted(config.channels, key=lambda c: c.name))
    # The agent reads its key from the keyring
    env.pop(config.provider.secret_name, None)
    env.setdefault("PYTHONIOENCODING", "utf-8")
    return env


def launch_config_from_setup(data: dict[str, Any]) -> LaunchConfig:
    """Rebuild a LaunchConfig from a saved setup file (see config_store.load_setup)."""
    try:
        provider = Provider(data["provider"])
        channels = frozenset(Channel(name) for name in data.get("channels") or [])
        return LaunchConfig(gateway_url=data["gateway_url"], provider=provider, channels=channels)
    except (KeyError, ValueError) as e:
        raise WizardError(f"saved setup is incomplete: {e}") from e


class AgentLauncher:
    """Spawns the agent command, or only reports the launch when no command is set."""

    def __init__(self, command: list[str] | str | None = None, cwd: Path | None = None) -> None:
        if isinstance(command, str):
            command = shlex.split(command)
        self._command = list(command or [])
        self._cwd = cwd
        self.process: subprocess.Popen[bytes] | None = None

    async def __call__(self, config: LaunchConfig) -> subprocess.Popen[bytes] | None:
        print("Launching OpenClaw with configuration:")
        print(f"  Gateway URL: {config.gateway_url}")
        print(f"  AI Provider: {config.provider.value}")
        print(f"  Channels: {', '.join(channel_names(config.channels))}")

        if not self._command:
            logger.info("No launcher.command configured; launch reported only")
            return None

        logger.info("Spawning agent: %s", " ".join(self._command))
        self.process = subprocess.Popen(
            self._command,
            cwd=str(self._cwd) if self._cwd else None,
            env=build_launch_env(config),
            stdin=sys.stdin,
            stdout=sys.stdout,
            stderr=sys.stderr,
        )
        return self.process

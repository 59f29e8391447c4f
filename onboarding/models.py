"""Wizard steps, providers, channels and the finalized launch configuration."""

from dataclasses import dataclass
from enum import Enum


class WizardStep(Enum):
    """Wizard steps in order. Traversal is strictly forward."""

    WELCOME = "welcome"
    NETWORK_SETUP = "network_setup"
    API_KEY_CONFIG = "api_key_config"
    CHANNEL_SETUP = "channel_setup"
    COMPLETION = "completion"

    def next(self) -> "WizardStep":
        """Following step; COMPLETION is terminal and returns itself."""
        order = list(WizardStep)
        idx = order.index(self)
        return order[min(idx + 1, len(order) - 1)]


class Provider(Enum):
    """AI backends. Value is the display name; first member is the default."""

    ANTHROPIC = "Anthropic"
    OPENAI = "OpenAI"
    GOOGLE = "Google"

    @classmethod
    def default(cls) -> "Provider":
        return next(iter(cls))

    @property
    def secret_name(self) -> str:
        """Keyring/env name under which this provider's API key is stored."""
        return f"{self.name}_API_KEY"


class Channel(Enum):
    """Messaging platforms the agent can be connected to."""

    TELEGRAM = "Telegram"
    DISCORD = "Discord"
    WHATSAPP = "WhatsApp"
    SLACK = "Slack"
    SIGNAL = "Signal"
    IMESSAGE = "iMessage"


def channel_names(channels: "set[Channel] | frozenset[Channel]") -> list[str]:
    """Display names sorted for stable output."""
    return sorted(c.value for c in channels)


@dataclass(frozen=True)
class LaunchConfig:
    """Finalized configuration handed to the downstream agent. Never holds the API key."""

    gateway_url: str
    provider: Provider
    channels: frozenset[Channel]

"""Wizard state owned by the controller."""

from dataclasses import dataclass, field

from onboarding.errors import ErrorKind
from onboarding.models import Channel, Provider, WizardStep


@dataclass
class WizardState:
    """Mutable state collected during the setup wizard."""

    current_step: WizardStep = WizardStep.WELCOME
    gateway_url: str = ""
    api_key: str = field(default="", repr=False)
    provider: Provider = field(default_factory=Provider.default)
    channels: set[Channel] = field(default_factory=set)
    is_loading: bool = False
    error_message: str | None = None
    error_kind: ErrorKind | None = None
    is_saved: bool = False

    def clear_error(self) -> None:
        self.error_message = None
        self.error_kind = None

    def add_channel(self, channel: Channel) -> None:
        self.channels.add(channel)

    def remove_channel(self, channel: Channel) -> None:
        self.channels.discard(channel)

    def toggle_channel(self, channel: Channel, enabled: bool) -> None:
        """Checkbox semantics: enabled adds, disabled removes."""
        if enabled:
            self.add_channel(channel)
        else:
            self.remove_channel(channel)

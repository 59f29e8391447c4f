"""Messaging channel selection step."""

import questionary
from questionary import Choice

from onboarding.controller import WizardController
from onboarding.models import Channel
from onboarding.ui import STYLE


def _require_one(selected: list) -> bool | str:
    return bool(selected) or "Select at least one channel"


async def run_channel_step(controller: WizardController) -> bool:
    """Pick the messaging channels. Returns False if cancelled."""
    state = controller.state
    print("\nMessaging channels\n")

    selected = await questionary.checkbox(
        "Which channels should OpenClaw connect to?",
        choices=[Choice(c.value, c, checked=c in state.channels) for c in Channel],
        validate=_require_one,
        style=STYLE,
    ).ask_async()
    if selected is None:
        return False

    for channel in Channel:
        state.toggle_channel(channel, channel in selected)
    return await controller.advance()

"""Summary, save and launch step."""

import questionary

from core.secrets import mask_secret
from onboarding.controller import WizardController
from onboarding.models import channel_names
from onboarding.ui import STYLE, ask_retry


def _print_summary(controller: WizardController) -> None:
    state = controller.state
    print("\nSummary\n")
    print(f"  Gateway URL: {state.gateway_url}")
    print(f"  AI Provider: {state.provider.value}")
    print(f"  API key:     {mask_secret(state.api_key)}")
    print(f"  Channels:    {', '.join(channel_names(state.channels))}")
    print()


async def run_completion_step(controller: WizardController) -> bool:
    """Confirm and save the configuration. Returns False if not saved."""
    _print_summary(controller)

    confirm = await questionary.confirm(
        "Save this configuration?", default=True, style=STYLE
    ).ask_async()
    if not confirm:
        return False

    while True:
        print("Saving configuration...")
        if await controller.advance():
            print("\nSetup complete! Your OpenClaw assistant is now configured.")
            return True
        if not await ask_retry(controller.state.error_message or "Save failed"):
            return False


async def ask_launch() -> bool:
    """Ask whether to start the agent now."""
    launch = await questionary.confirm(
        "Launch OpenClaw now?", default=True, style=STYLE
    ).ask_async()
    return bool(launch)

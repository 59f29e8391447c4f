"""Welcome step."""

import questionary

from onboarding.controller import WizardController
from onboarding.ui import STYLE


async def run_welcome_step(controller: WizardController) -> bool:
    """Greet the user and move to network setup. Returns False if cancelled."""
    print("\nWelcome to OpenClawKit setup!")
    print("Let's configure your OpenClaw assistant.\n")

    start = await questionary.confirm("Get started?", default=True, style=STYLE).ask_async()
    if not start:
        return False
    return await controller.advance()

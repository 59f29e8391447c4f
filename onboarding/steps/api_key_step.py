"""Provider selection and API key step."""

import questionary
from questionary import Choice

from onboarding.controller import WizardController
from onboarding.models import Provider
from onboarding.ui import STYLE, ask_retry, ask_until_nonempty


async def run_api_key_step(controller: WizardController) -> bool:
    """Select a provider and enter its API key. Returns False if the user gives up."""
    state = controller.state
    print("\nAI provider configuration\n")

    while True:
        provider = await questionary.select(
            "Select a provider:",
            choices=[Choice(p.value, p) for p in Provider],
            default=state.provider,
            style=STYLE,
        ).ask_async()
        if provider is None:
            return False
        state.provider = provider

        key = await ask_until_nonempty(f"{provider.value} API key:", is_password=True)
        if key is None:
            return False
        state.api_key = key

        print("Validating API key...")
        if await controller.advance():
            print("  ✓ API key accepted")
            return True
        if not await ask_retry(state.error_message or "API key check failed"):
            return False

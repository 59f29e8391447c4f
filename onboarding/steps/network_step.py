"""Gateway URL step."""

from onboarding.controller import WizardController
from onboarding.ui import ask_retry, ask_until_nonempty


async def run_network_step(controller: WizardController) -> bool:
    """Ask for the gateway URL until it validates. Returns False if the user gives up."""
    state = controller.state
    print("\nNetwork configuration\n")

    while True:
        url = await ask_until_nonempty("Gateway URL:", default=state.gateway_url)
        if url is None:
            return False
        state.gateway_url = url

        print("Checking gateway...")
        if await controller.advance():
            print("  ✓ Gateway reachable")
            return True
        if not await ask_retry(state.error_message or "Gateway check failed"):
            return False

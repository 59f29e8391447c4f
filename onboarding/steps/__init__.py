"""Terminal wizard steps, one per WizardStep."""

from onboarding.steps.api_key_step import run_api_key_step
from onboarding.steps.channel_step import run_channel_step
from onboarding.steps.completion_step import run_completion_step
from onboarding.steps.network_step import run_network_step
from onboarding.steps.welcome_step import run_welcome_step

__all__ = [
    "run_welcome_step",
    "run_network_step",
    "run_api_key_step",
    "run_channel_step",
    "run_completion_step",
]

"""OpenClawKit setup wizard."""

from onboarding.constants import ONBOARDING_FAILED, ONBOARDING_QUIT, ONBOARDING_SUCCESS
from onboarding.controller import WizardController
from onboarding.models import Channel, LaunchConfig, Provider, WizardStep
from onboarding.state import WizardState

__all__ = [
    "ONBOARDING_SUCCESS",
    "ONBOARDING_QUIT",
    "ONBOARDING_FAILED",
    "Channel",
    "LaunchConfig",
    "Provider",
    "WizardController",
    "WizardState",
    "WizardStep",
]

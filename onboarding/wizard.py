"""Setup wizard orchestration for the terminal."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.settings import get_setting
from onboarding.config_store import (
    ConfigurationStore,
    ConsoleConfigurationStore,
    KeyringConfigurationStore,
)
from onboarding.controller import WizardController
from onboarding.launcher import AgentLauncher
from onboarding.steps import (
    run_api_key_step,
    run_channel_step,
    run_completion_step,
    run_network_step,
    run_welcome_step,
)
from onboarding.steps.completion_step import ask_launch
from onboarding.validation import HttpValidationGateway

logger = logging.getLogger(__name__)


@dataclass
class WizardResult:
    """Result of running the wizard."""

    success: bool  # Configuration saved
    launched: bool = False


def build_store(settings: dict[str, Any], project_root: Path) -> ConfigurationStore:
    """Store selected by storage.backend: 'keyring' (default) or 'console'."""
    backend = get_setting(settings, "storage.backend", "keyring")
    if backend == "console":
        return ConsoleConfigurationStore(delay=float(get_setting(settings, "storage.save_delay", 1.0)))
    if backend != "keyring":
        raise ValueError(f"Unknown storage.backend {backend!r}")
    setup_file = get_setting(settings, "storage.setup_file", "config/setup.yaml")
    return KeyringConfigurationStore(project_root / setup_file)


def build_controller(settings: dict[str, Any], project_root: Path) -> WizardController:
    """Wire the controller with services configured from settings."""
    validator = HttpValidationGateway(
        timeout=float(get_setting(settings, "validation.gateway_timeout", 10.0)),
        api_key_delay=float(get_setting(settings, "validation.api_key_delay", 1.0)),
    )
    launcher = AgentLauncher(
        command=get_setting(settings, "launcher.command", []),
        cwd=project_root,
    )
    return WizardController(validator, build_store(settings, project_root), launcher=launcher)


async def run_wizard(controller: WizardController) -> WizardResult:
    """Run every step in order, then offer to launch.

    Returns WizardResult(success=False) when the user cancelled or gave up
    before the configuration was saved.
    """
    steps = (
        run_welcome_step,
        run_network_step,
        run_api_key_step,
        run_channel_step,
        run_completion_step,
    )
    try:
        for step in steps:
            if not await step(controller):
                logger.info("Wizard stopped at %s", controller.state.current_step.value)
                return WizardResult(success=False)

        if not await ask_launch():
            return WizardResult(success=True)
        await controller.launch()
        return WizardResult(success=True, launched=True)
    finally:
        controller.close()

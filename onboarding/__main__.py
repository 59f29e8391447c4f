"""Entry point: python -m onboarding [--reconfigure]. Exit codes in onboarding.constants."""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from core.config_check import is_configured
from core.logging_config import setup_logging
from core.settings import get_setting, load_settings
from onboarding.config_store import load_setup
from onboarding.constants import ONBOARDING_FAILED, ONBOARDING_QUIT, ONBOARDING_SUCCESS
from onboarding.errors import WizardError
from onboarding.launcher import AgentLauncher, launch_config_from_setup
from onboarding.wizard import build_controller, run_wizard

logger = logging.getLogger(__name__)


def _launch_saved(project_root: Path, settings: dict) -> int:
    """Skip the wizard and launch from the saved setup file."""
    setup_path = project_root / get_setting(settings, "storage.setup_file", "config/setup.yaml")
    data = load_setup(setup_path)
    if data is None:
        logger.warning("Saved setup %s is missing or unreadable", setup_path)
        print(f"\nCould not read saved setup {setup_path}. Run with --reconfigure.")
        return ONBOARDING_FAILED
    config = launch_config_from_setup(data)
    launcher = AgentLauncher(get_setting(settings, "launcher.command", []), cwd=project_root)
    asyncio.run(launcher(config))
    return ONBOARDING_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the setup wizard, or launch directly when already configured."""
    args = sys.argv[1:] if argv is None else argv
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    settings = load_settings(project_root / "config")
    setup_logging(project_root, settings)

    try:
        ok, reason = is_configured(project_root=project_root)
        if ok and "--reconfigure" not in args:
            print("OpenClaw is already configured (use --reconfigure to change it).")
            return _launch_saved(project_root, settings)
        logger.info("Starting setup wizard: %s", reason)

        controller = build_controller(settings, project_root)
        result = asyncio.run(run_wizard(controller))
        if result.success:
            return ONBOARDING_SUCCESS
        print("\nSetup cancelled.")
        return ONBOARDING_QUIT

    except KeyboardInterrupt:
        print("\n\nSetup cancelled.")
        return ONBOARDING_QUIT
    except (WizardError, ValueError, OSError) as e:
        logger.exception("Setup failed")
        print(f"\nSetup failed: {e}")
        return ONBOARDING_FAILED


if __name__ == "__main__":
    sys.exit(main())

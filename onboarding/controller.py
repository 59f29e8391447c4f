"""WizardController: drives the five-step setup flow over injected services.

Each advance() attempt is atomic pass/fail. Failures never propagate; they are
converted into state.error_message for the presentation layer and the user
retries by calling advance() again. At most one validation/save call is
outstanding at a time, gated by state.is_loading.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from onboarding.config_store import ConfigurationStore
from onboarding.errors import ErrorKind, InvalidURLError, KeyValidationError, NotFinalizedError, classify
from onboarding.models import LaunchConfig, WizardStep
from onboarding.state import WizardState
from onboarding.validation import ValidationGateway

logger = logging.getLogger(__name__)

Launcher = Callable[[LaunchConfig], Awaitable[Any]]

GATEWAY_ERROR_PREFIX = "Invalid Gateway URL"
API_KEY_ERROR_PREFIX = "API Key Validation Failed"
SAVE_ERROR_PREFIX = "Configuration Save Failed"
CHANNELS_REQUIRED_MESSAGE = "Select at least one messaging channel"


def format_error(prefix: str, exc: BaseException) -> str:
    """Human-readable message for a failed transition."""
    reason = str(exc) or type(exc).__name__
    if classify(exc) is ErrorKind.UNKNOWN:
        return f"Unexpected error: {reason}"
    return f"{prefix}: {reason}"


class WizardController:
    """Owns WizardState and performs forward transitions."""

    def __init__(
        self,
        validator: ValidationGateway,
        store: ConfigurationStore,
        launcher: Launcher | None = None,
        state: WizardState | None = None,
    ) -> None:
        self.state = state or WizardState()
        self._validator = validator
        self._store = store
        self._launcher = launcher
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear down. Outcomes of calls still in flight are discarded."""
        self._closed = True

    async def advance(self) -> bool:
        """Attempt the transition for the current step.

        Returns True when the step moved forward (or, on completion, when the
        configuration was saved). Returns False on failure, when a call is
        already outstanding, or after close().
        """
        if self._closed:
            logger.debug("advance() after close ignored")
            return False
        if self.state.is_loading:
            logger.debug("advance() ignored: %s call outstanding", self.state.current_step.value)
            return False

        state = self.state
        step = state.current_step
        state.clear_error()

        if step is WizardStep.WELCOME:
            return self._move_to(WizardStep.NETWORK_SETUP)

        if step is WizardStep.NETWORK_SETUP:
            if not state.gateway_url.strip():
                return self._fail(GATEWAY_ERROR_PREFIX, InvalidURLError("URL is empty"))
            return await self._run(
                lambda: self._validator.validate_gateway_url(state.gateway_url),
                GATEWAY_ERROR_PREFIX,
                WizardStep.API_KEY_CONFIG,
            )

        if step is WizardStep.API_KEY_CONFIG:
            if not state.api_key:
                return self._fail(API_KEY_ERROR_PREFIX, KeyValidationError("API key is empty"))
            return await self._run(
                lambda: self._validator.validate_api_key(state.api_key, state.provider),
                API_KEY_ERROR_PREFIX,
                WizardStep.CHANNEL_SETUP,
            )

        if step is WizardStep.CHANNEL_SETUP:
            if not state.channels:
                state.error_message = CHANNELS_REQUIRED_MESSAGE
                return False
            return self._move_to(WizardStep.COMPLETION)

        config = self.launch_config()
        saved = await self._run(
            lambda: self._store.save(
                config.gateway_url, state.api_key, config.provider, set(config.channels)
            ),
            SAVE_ERROR_PREFIX,
            WizardStep.COMPLETION,
        )
        if saved:
            state.is_saved = True
        return saved

    def launch_config(self) -> LaunchConfig:
        return LaunchConfig(
            gateway_url=self.state.gateway_url.strip(),
            provider=self.state.provider,
            channels=frozenset(self.state.channels),
        )

    async def launch(self) -> LaunchConfig:
        """Hand the finalized configuration to the launcher. Requires a successful save."""
        if not self.state.is_saved:
            raise NotFinalizedError("configuration has not been saved")
        config = self.launch_config()
        logger.info(
            "Launching agent: gateway=%s provider=%s channels=%d",
            config.gateway_url,
            config.provider.value,
            len(config.channels),
        )
        if self._launcher is not None:
            await self._launcher(config)
        return config

    def _move_to(self, step: WizardStep) -> bool:
        logger.debug("Wizard step %s -> %s", self.state.current_step.value, step.value)
        self.state.current_step = step
        return True

    def _fail(self, prefix: str, exc: BaseException) -> bool:
        self.state.error_kind = classify(exc)
        self.state.error_message = format_error(prefix, exc)
        logger.warning("Step %s failed: %s", self.state.current_step.value, self.state.error_message)
        return False

    async def _run(
        self,
        call: Callable[[], Awaitable[Any]],
        prefix: str,
        on_success: WizardStep,
    ) -> bool:
        self.state.is_loading = True
        try:
            await call()
        except Exception as e:
            if self._closed:
                logger.debug("Discarding failure after close: %s", e)
                return False
            self.state.is_loading = False
            if classify(e) is ErrorKind.UNKNOWN:
                logger.exception("Unexpected failure in step %s", self.state.current_step.value)
            return self._fail(prefix, e)
        finally:
            if not self._closed:
                self.state.is_loading = False
        if self._closed:
            logger.debug("Discarding result after close")
            return False
        return self._move_to(on_success)

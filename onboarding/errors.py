"""Wizard error taxonomy."""

from enum import Enum


class ErrorKind(Enum):
    INVALID_URL = "invalid_url"
    NETWORK_ERROR = "network_error"
    KEY_VALIDATION_FAILED = "key_validation_failed"
    SAVE_FAILED = "save_failed"
    UNKNOWN = "unknown"


class WizardError(Exception):
    """Base class for failures surfaced to the user as an error message."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class InvalidURLError(WizardError):
    kind = ErrorKind.INVALID_URL


class GatewayNetworkError(WizardError):
    kind = ErrorKind.NETWORK_ERROR


class KeyValidationError(WizardError):
    kind = ErrorKind.KEY_VALIDATION_FAILED


class SaveFailedError(WizardError):
    kind = ErrorKind.SAVE_FAILED


class NotFinalizedError(WizardError):
    """launch() called before the configuration was saved."""


def classify(exc: BaseException) -> ErrorKind:
    """ErrorKind for any exception; non-wizard exceptions are UNKNOWN."""
    if isinstance(exc, WizardError):
        return exc.kind
    return ErrorKind.UNKNOWN

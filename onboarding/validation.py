"""Gateway URL reachability and API key plausibility checks."""

import asyncio
import logging
from typing import Protocol, runtime_checkable
from urllib.parse import urlparse

import httpx

from onboarding.errors import GatewayNetworkError, InvalidURLError, KeyValidationError
from onboarding.models import Provider

logger = logging.getLogger(__name__)

MIN_API_KEY_LENGTH = 10
DEFAULT_GATEWAY_TIMEOUT = 10.0
DEFAULT_API_KEY_DELAY = 1.0


@runtime_checkable
class ValidationGateway(Protocol):
    """Contract used by WizardController. Both checks raise a WizardError on failure."""

    async def validate_gateway_url(self, url: str) -> bool: ...
    async def validate_api_key(self, key: str, provider: Provider) -> bool: ...


def check_url_format(url: str) -> str:
    """Return the stripped URL if it is a well-formed http(s) URL, else raise InvalidURLError."""
    candidate = (url or "").strip()
    if not candidate:
        raise InvalidURLError("URL is empty")
    if any(ch.isspace() for ch in candidate):
        raise InvalidURLError(f"{candidate!r} is not a valid URL")
    try:
        parsed = urlparse(candidate)
        host = parsed.hostname
    except ValueError as e:
        raise InvalidURLError(str(e)) from e
    if parsed.scheme not in ("http", "https"):
        raise InvalidURLError(f"unsupported scheme {parsed.scheme or '(none)'!r}")
    if not host:
        raise InvalidURLError(f"{candidate!r} has no host")
    return candidate


def check_api_key_format(key: str) -> None:
    """Placeholder policy: non-empty and at least MIN_API_KEY_LENGTH characters."""
    if not key:
        raise KeyValidationError("API key is empty")
    if len(key) < MIN_API_KEY_LENGTH:
        raise KeyValidationError(
            f"API key must be at least {MIN_API_KEY_LENGTH} characters"
        )


class HttpValidationGateway:
    """Default ValidationGateway: one bounded GET for the gateway, a delayed length check for the key."""

    def __init__(
        self,
        timeout: float = DEFAULT_GATEWAY_TIMEOUT,
        api_key_delay: float = DEFAULT_API_KEY_DELAY,
    ) -> None:
        self._timeout = timeout
        self._api_key_delay = api_key_delay

    async def validate_gateway_url(self, url: str) -> bool:
        """Probe the gateway. Any HTTP response counts as reachable; status is not inspected."""
        target = check_url_format(url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(target)
        except httpx.InvalidURL as e:
            raise InvalidURLError(str(e)) from e
        except httpx.TimeoutException as e:
            logger.debug("Gateway probe timed out: %s", target)
            raise GatewayNetworkError("Connection timeout") from e
        except httpx.HTTPError as e:
            logger.debug("Gateway probe failed: %s", e)
            raise GatewayNetworkError(str(e) or type(e).__name__) from e
        logger.info("Gateway %s reachable (HTTP %s)", target, resp.status_code)
        return True

    async def validate_api_key(self, key: str, provider: Provider) -> bool:
        """Stand-in for a per-provider check. Provider is accepted but unused."""
        await asyncio.sleep(self._api_key_delay)
        check_api_key_format(key)
        logger.info("API key for %s passed format check", provider.value)
        return True

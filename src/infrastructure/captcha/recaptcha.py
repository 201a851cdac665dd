"""Google reCAPTCHA verifier.

Posts the server secret and the client response to the siteverify
endpoint as form fields and reads the boolean ``success`` field of the
JSON reply:

    {
        "success": true,
        "challenge_ts": "2026-01-28T10:00:00Z",
        "hostname": "example.com"
    }
"""

import logging

import httpx

from core.config import settings
from core.exceptions import CaptchaTransportError

logger = logging.getLogger(__name__)


class RecaptchaVerifier:
    """reCAPTCHA implementation of ICaptchaVerifier."""

    def __init__(
        self,
        secret_key: str = settings.recaptcha_secret_key,
        verify_url: str = settings.recaptcha_verify_url,
        timeout: float = settings.recaptcha_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._verify_url = verify_url
        self._timeout = timeout
        self._transport = transport

    async def verify(self, response: str) -> bool:
        """Make one verification call; transport failures become CaptchaTransportError."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                reply = await client.post(
                    self._verify_url,
                    data={"secret": self._secret_key, "response": response},
                    timeout=self._timeout,
                )
                reply.raise_for_status()
                body = reply.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("reCAPTCHA verification call failed: %s", exc)
            raise CaptchaTransportError(type(exc).__name__) from exc

        return bool(body.get("success", False)) if isinstance(body, dict) else False

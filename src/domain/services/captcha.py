"""CAPTCHA verifier protocol the auth resolver depends on."""

from typing import Protocol


class ICaptchaVerifier(Protocol):
    """Protocol for CAPTCHA verification backends."""

    async def verify(self, response: str) -> bool:
        """
        Verify a client-supplied CAPTCHA response.

        Args:
            response: The token the client obtained from the CAPTCHA widget

        Returns:
            True if the service accepted the response, False otherwise

        Raises:
            CaptchaTransportError: If the verification call itself failed
        """
        ...

"""Unit tests for RecaptchaVerifier."""

from urllib.parse import parse_qs

import httpx
import pytest

from core.exceptions import CaptchaTransportError, ErrorCode
from infrastructure.captcha.recaptcha import RecaptchaVerifier

VERIFY_URL = "https://captcha.test/siteverify"


def _verifier(handler) -> RecaptchaVerifier:
    return RecaptchaVerifier(
        secret_key="server-secret",
        verify_url=VERIFY_URL,
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


class TestRecaptchaVerifier:
    async def test_success_true(self):
        verifier = _verifier(lambda request: httpx.Response(200, json={"success": True}))

        assert await verifier.verify("resp") is True

    async def test_success_false(self):
        verifier = _verifier(
            lambda request: httpx.Response(
                200, json={"success": False, "error-codes": ["invalid-input-response"]}
            )
        )

        assert await verifier.verify("resp") is False

    async def test_missing_success_field_is_rejection(self):
        verifier = _verifier(lambda request: httpx.Response(200, json={"hostname": "x"}))

        assert await verifier.verify("resp") is False

    async def test_posts_secret_and_response_as_form(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True})

        await _verifier(handler).verify("client-response")

        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == VERIFY_URL
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        form = parse_qs(request.content.decode())
        assert form == {"secret": ["server-secret"], "response": ["client-response"]}

    async def test_connection_error_becomes_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(CaptchaTransportError) as exc_info:
            await _verifier(handler).verify("resp")

        assert exc_info.value.error_code == ErrorCode.CAPTCHA_UNAVAILABLE
        assert exc_info.value.status_code == 502

    async def test_server_error_becomes_transport_error(self):
        verifier = _verifier(lambda request: httpx.Response(500, text="oops"))

        with pytest.raises(CaptchaTransportError):
            await verifier.verify("resp")

    async def test_unparseable_body_becomes_transport_error(self):
        verifier = _verifier(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(CaptchaTransportError):
            await verifier.verify("resp")

"""Identity Toolkit (Firebase Authentication) REST gateway.

Talks to the ``accounts:*`` endpoints with httpx and turns REST error
payloads into the provider codes the error translator understands.
"""

from __future__ import annotations

from typing import Any, Final

import httpx
from pydantic import ValidationError

from authflow.gateway.exceptions import AuthGatewayError
from authflow.observability.logging import get_logger, mask_email
from authflow.schemas.identity import SessionIdentity


logger = get_logger(__name__)


NETWORK_REQUEST_FAILED: Final[str] = "network-request-failed"
INTERNAL_ERROR: Final[str] = "internal-error"

# REST error message -> provider code
REST_ERROR_CODES: Final[dict[str, str]] = {
    "EMAIL_NOT_FOUND": "user-not-found",
    "INVALID_PASSWORD": "wrong-password",
    "INVALID_LOGIN_CREDENTIALS": "invalid-credential",
    "USER_DISABLED": "user-disabled",
    "EMAIL_EXISTS": "email-already-in-use",
    "WEAK_PASSWORD": "weak-password",
    "INVALID_EMAIL": "invalid-email",
    "MISSING_EMAIL": "invalid-email",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "too-many-requests",
    "OPERATION_NOT_ALLOWED": "operation-not-allowed",
    "PASSWORD_LOGIN_DISABLED": "operation-not-allowed",
}


def parse_rest_error(response: httpx.Response) -> str:
    """Extract the provider code from an error response.

    The REST API reports errors as ``{"error": {"message": "EMAIL_EXISTS"}}``,
    sometimes with a ``" : detail"`` suffix.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None

    raw = ""
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        raw = str(payload["error"].get("message") or "")
    token = raw.split(":", 1)[0].strip()

    if token in REST_ERROR_CODES:
        return REST_ERROR_CODES[token]
    if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
        return "too-many-requests"
    return INTERNAL_ERROR


class FirebaseAuthGateway:
    """AuthGateway backed by the Identity Toolkit REST API."""

    SIGN_IN_ENDPOINT: Final[str] = "accounts:signInWithPassword"
    SIGN_UP_ENDPOINT: Final[str] = "accounts:signUp"
    OOB_CODE_ENDPOINT: Final[str] = "accounts:sendOobCode"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://identitytoolkit.googleapis.com/v1",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            api_key: Web API key of the identity project.
            base_url: Identity Toolkit base URL.
            timeout: Request timeout in seconds.
            http_client: Optional shared HTTP client. Not closed on shutdown.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http = http_client
        self._owns_http_client = http_client is None

    @property
    def provider_name(self) -> str:
        return "firebase"

    def endpoint_url(self, endpoint: str) -> str:
        """Full URL of an ``accounts:*`` endpoint."""
        return f"{self._base_url}/{endpoint}"

    async def initialize(self) -> None:
        """Create the HTTP client if one was not injected."""
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._timeout)
        logger.info("FirebaseAuthGateway initialized")

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http is not None:
            await self._http.aclose()
            self._http = None
        logger.info("FirebaseAuthGateway shutdown")

    async def sign_in(self, email: str, secret: str) -> SessionIdentity:
        data = await self._post(
            self.SIGN_IN_ENDPOINT,
            {"email": email, "password": secret, "returnSecureToken": True},
        )
        return self._to_identity(data)

    async def sign_up(self, email: str, secret: str) -> SessionIdentity:
        data = await self._post(
            self.SIGN_UP_ENDPOINT,
            {"email": email, "password": secret, "returnSecureToken": True},
        )
        return self._to_identity(data)

    async def send_password_reset(self, email: str) -> None:
        await self._post(
            self.OOB_CODE_ENDPOINT,
            {"requestType": "PASSWORD_RESET", "email": email},
        )
        logger.info("Password reset email requested", email=mask_email(email))

    async def _post(self, endpoint: str, body: dict[str, Any]) -> dict[str, Any]:
        if self._http is None:
            msg = "FirebaseAuthGateway not initialized"
            raise AuthGatewayError(INTERNAL_ERROR, msg)

        try:
            response = await self._http.post(
                self.endpoint_url(endpoint),
                params={"key": self._api_key},
                json=body,
                timeout=self._timeout,
            )
        except httpx.TransportError as e:
            logger.warning(
                "Identity provider unreachable",
                endpoint=endpoint,
                error=str(e),
            )
            raise AuthGatewayError(NETWORK_REQUEST_FAILED, str(e)) from e

        if response.is_error:
            code = parse_rest_error(response)
            logger.info(
                "Identity provider rejected request",
                endpoint=endpoint,
                status_code=response.status_code,
                code=code,
            )
            raise AuthGatewayError(code)

        try:
            data = response.json()
        except ValueError as e:
            raise AuthGatewayError(INTERNAL_ERROR, "Malformed provider response") from e
        if not isinstance(data, dict):
            raise AuthGatewayError(INTERNAL_ERROR, "Malformed provider response")
        return data

    @staticmethod
    def _to_identity(data: dict[str, Any]) -> SessionIdentity:
        try:
            return SessionIdentity(id=data.get("localId", ""), email=data.get("email", ""))
        except ValidationError as e:
            raise AuthGatewayError(INTERNAL_ERROR, "Provider response missing localId") from e

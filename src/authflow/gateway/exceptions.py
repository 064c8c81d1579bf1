"""Identity-provider gateway exceptions.

``AuthGatewayError`` carries the provider's opaque error code; the
submission controllers catch it and hand the code to the error translator.
"""

from __future__ import annotations


class AuthGatewayError(Exception):
    """Raised when the identity provider rejects or cannot serve a request.

    Attributes:
        code: Opaque provider error code such as ``"user-not-found"``.
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or code)


class ConfigurationError(Exception):
    """Raised when the gateway is misconfigured."""

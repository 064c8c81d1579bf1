"""Identity-provider gateway protocol.

Any object exposing these coroutines can back the submission controllers:
the REST gateway in this package, an SDK wrapper, or a test double.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from authflow.schemas.identity import SessionIdentity


@runtime_checkable
class AuthGateway(Protocol):
    """Operations the authentication flows need from the identity provider.

    Every operation raises ``AuthGatewayError`` with the provider's error
    code on failure.
    """

    async def sign_in(self, email: str, secret: str) -> SessionIdentity:
        """Authenticate an existing account.

        Returns:
            The signed-in identity.
        """
        ...

    async def sign_up(self, email: str, secret: str) -> SessionIdentity:
        """Create an account and sign it in.

        Returns:
            The identity of the new account.
        """
        ...

    async def send_password_reset(self, email: str) -> None:
        """Ask the provider to email a password-reset link."""
        ...

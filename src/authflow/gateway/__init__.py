"""Identity-provider gateway package.

Usage:
    from authflow.gateway import create_auth_gateway

    gateway = create_auth_gateway()
    await gateway.initialize()
    identity = await gateway.sign_in(email, secret)
"""

from authflow.gateway.exceptions import AuthGatewayError, ConfigurationError
from authflow.gateway.factory import create_auth_gateway
from authflow.gateway.firebase import FirebaseAuthGateway
from authflow.gateway.protocol import AuthGateway


__all__ = [
    "AuthGateway",
    "AuthGatewayError",
    "ConfigurationError",
    "FirebaseAuthGateway",
    "create_auth_gateway",
]

"""JWT token domain service.

Doubles as the identity resolver: it turns the raw ``Authorization``
header value into the caller's nickname.
"""

import logfire

from peerrate.config import AuthSettings
from peerrate.domain.model import User
from peerrate.domain.value import Nickname
from peerrate.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

BEARER_PREFIX = "bearer "


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings carrying the signing secret
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Issue a token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", nickname=user.nickname.root):
            token = create_token(
                str(user.id), user.nickname.root, user.role.value, self.auth_settings
            )
            logfire.info("JWT token created", nickname=user.nickname.root)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", nickname=payload.nickname)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def resolve(self, credential: str | None) -> TokenPayload:
        """Resolve a raw ``Authorization`` header value.

        Accepts the bare token or the ``Bearer <token>`` form.

        Args:
            credential: Header value, possibly None

        Returns:
            Verified token payload

        Raises:
            JWTError: If the credential is missing, malformed or invalid
        """
        if not credential or not credential.strip():
            raise JWTError("Missing credential")

        token = credential.strip()
        if token.lower().startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX) :].strip()

        if token.count(".") != 2:
            raise JWTError("Invalid token format")

        return self.verify_token(token)

    def resolve_nickname(self, credential: str | None) -> Nickname:
        """Resolve a raw credential to the caller's nickname.

        Raises:
            JWTError: If the credential cannot be resolved
        """
        payload = self.resolve(credential)
        try:
            return Nickname(payload.nickname)
        except ValueError:
            raise JWTError("Nickname not found in claims")

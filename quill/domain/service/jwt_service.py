"""Token domain service."""

import logfire

from quill.config import AuthSettings
from quill.domain.value import UserId
from quill.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Mints and checks ``auth_token`` cookies."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Sign a token for a user.

        Only the seed script and tests mint tokens; the API never does.
        """
        token = create_token(str(user_id), self.auth_settings)
        logfire.debug("Token minted", user_id=str(user_id))
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is expired, tampered with or incomplete
        """
        return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Subject of a token, or None when there is no usable token.

        Args:
            token: Raw cookie value, if the request carried one

        Returns:
            The ``sub`` claim, or None for a missing, expired or forged token
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.info("Ignoring unusable auth token", reason=str(e))
            return None

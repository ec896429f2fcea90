"""
Credential service: password hashing and session tokens.

Configured by immutable settings. Tokens are verified
statelessly; a token stays valid until it expires.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import cached_property
from typing import Callable

import bcrypt
import jwt

from app.core.config import Config
from app.core.errors import AuthError, ErrorResponse, GENERIC_ERROR_MESSAGE
from app.models.user import Identity, Role

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class TokenExpired(AuthError):
    code = "TOKEN_EXPIRED"

    def __init__(self):
        super().__init__("Token has expired.")


class TokenInvalid(AuthError):
    code = "TOKEN_INVALID"

    def __init__(self):
        super().__init__("Invalid token.")


class CredentialFormatError(ErrorResponse):
    """A stored password digest could not be parsed"""
    status_code = 500
    code = "CREDENTIAL_FORMAT_ERROR"

    def __init__(self):
        super().__init__(GENERIC_ERROR_MESSAGE)


@dataclass(frozen=True)
class CredentialSettings:
    secret: str
    algorithm: str = "HS256"
    expiration: timedelta = timedelta(hours=1)
    bcrypt_rounds: int = 10

    @classmethod
    def from_config(cls, config: Config) -> "CredentialSettings":
        return cls(
            secret=config.jwt_secret,
            algorithm=config.jwt_algorithm,
            expiration=timedelta(seconds=config.jwt_expiration),
            bcrypt_rounds=config.bcrypt_rounds,
        )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _encode_password(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class CredentialService:
    """Issues and verifies session tokens, hashes and checks passwords"""

    def __init__(self, settings: CredentialSettings, clock: Callable[[], datetime] = _utc_now):
        self.settings = settings
        self._clock = clock

    def issue_token(self, subject_id: str, role: Role) -> str:
        """Sign a token carrying subject, role, issue time and expiry"""
        issued_at = self._clock()
        payload = {
            "sub": str(subject_id),
            "role": Role(role).value,
            "iat": issued_at,
            "exp": issued_at + self.settings.expiration,
        }
        return jwt.encode(payload, self.settings.secret, algorithm=self.settings.algorithm)

    def verify_token(self, token: str) -> Identity:
        """
        Decode a token into an Identity.

        Raises:
            TokenExpired: the expiry instant has passed
            TokenInvalid: the token is malformed, tampered with or lacks claims
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.secret,
                algorithms=[self.settings.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpired()
        except jwt.InvalidTokenError:
            raise TokenInvalid()

        try:
            role = Role(payload.get("role"))
        except ValueError:
            raise TokenInvalid()
        return Identity(subject_id=payload["sub"], role=role)

    def hash_password(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.settings.bcrypt_rounds)
        return bcrypt.hashpw(_encode_password(plaintext), salt).decode("utf-8")

    @cached_property
    def _placeholder_digest(self) -> bytes:
        return bcrypt.hashpw(b"placeholder", bcrypt.gensalt(rounds=self.settings.bcrypt_rounds))

    def reject_password(self, plaintext: str) -> bool:
        """Spend the work of a real comparison for an unknown account, then fail"""
        bcrypt.checkpw(_encode_password(plaintext), self._placeholder_digest)
        return False

    def verify_password(self, plaintext: str, digest: str) -> bool:
        """
        Compare a password against a stored digest.

        Returns False on mismatch. Raises CredentialFormatError only when the
        digest itself is malformed.
        """
        try:
            return bcrypt.checkpw(_encode_password(plaintext), digest.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            raise CredentialFormatError()

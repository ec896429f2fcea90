"""
Registration and login flow
"""

from app.core.errors import ValidationError
from app.core.logger import logger
from app.models.user import Role
from app.repositories.user import UserAlreadyStored, UserRepository
from app.services.credentials import CredentialService


class UserExists(ValidationError):
    code = "USER_EXISTS"

    def __init__(self):
        super().__init__("User already exists")


class InvalidCredentials(ValidationError):
    """Unknown email and wrong password are reported identically"""
    code = "INVALID_CREDENTIALS"

    def __init__(self):
        super().__init__("Invalid credentials")


class AuthService:
    """Service layer for account registration and login"""

    def __init__(self, users: UserRepository, credentials: CredentialService):
        self.users = users
        self.credentials = credentials

    async def register(self, email: str, password: str) -> str:
        """Create a user with the default role and return a session token"""
        if await self.users.find_by_email(email) is not None:
            logger.warning("Registration rejected: user exists", metadata={"event": "register_conflict"})
            raise UserExists()

        digest = self.credentials.hash_password(password)
        try:
            user = await self.users.create(email, digest, Role.USER)
        except UserAlreadyStored:
            logger.warning("Registration lost the race on email index", metadata={"event": "register_conflict"})
            raise UserExists()

        logger.info("Registered user", user_id=user.id, metadata={"event": "register"})
        return self.credentials.issue_token(user.id, user.role)

    async def login(self, email: str, password: str) -> str:
        """Return a token embedding the stored role"""
        user = await self.users.find_by_email(email)
        if user is None:
            matched = self.credentials.reject_password(password)
        else:
            matched = self.credentials.verify_password(password, user.password)
        if not matched:
            logger.warning("Login rejected", metadata={"event": "login_failed"})
            raise InvalidCredentials()

        logger.info("User logged in", user_id=user.id, metadata={"event": "login"})
        return self.credentials.issue_token(user.id, user.role)

"""Unit tests for AuthService"""
import pytest
from unittest.mock import AsyncMock, patch

import bcrypt

from app.models.user import Role
from app.repositories.user import UserAlreadyStored, UserRepository
from app.services.auth import AuthService, InvalidCredentials, UserExists


@pytest.fixture
def auth_service(user_repository, credential_service):
    return AuthService(user_repository, credential_service)


class TestRegister:
    """Tests for register"""

    @pytest.mark.asyncio
    async def test_register_returns_token_with_default_role(self, auth_service, credential_service, user_repository):
        token = await auth_service.register("user@test.com", "password1")

        identity = credential_service.verify_token(token)
        stored = user_repository.users["user@test.com"]
        assert identity.subject_id == stored.id
        assert identity.role == Role.USER
        assert stored.role == Role.USER

    @pytest.mark.asyncio
    async def test_register_stores_digest_not_plaintext(self, auth_service, credential_service, user_repository):
        await auth_service.register("user@test.com", "password1")

        stored = user_repository.users["user@test.com"]
        assert stored.password != "password1"
        assert credential_service.verify_password("password1", stored.password)

    @pytest.mark.asyncio
    async def test_register_twice_fails(self, auth_service):
        await auth_service.register("user@test.com", "password1")

        with pytest.raises(UserExists) as exc_info:
            await auth_service.register("user@test.com", "different1")
        assert exc_info.value.message == "User already exists"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_register_race_on_unique_index(self, credential_service):
        users = AsyncMock(spec=UserRepository)
        users.find_by_email.return_value = None
        users.create.side_effect = UserAlreadyStored("user@test.com")

        with pytest.raises(UserExists):
            await AuthService(users, credential_service).register("user@test.com", "password1")


class TestLogin:
    """Tests for login"""

    @pytest.mark.asyncio
    async def test_login_success(self, auth_service, credential_service):
        await auth_service.register("user@test.com", "password1")

        token = await auth_service.login("user@test.com", "password1")
        assert credential_service.verify_token(token).role == Role.USER

    @pytest.mark.asyncio
    async def test_login_uses_stored_role(self, auth_service, credential_service, user_repository):
        await auth_service.register("admin@test.com", "password1")
        await user_repository.set_role("admin@test.com", Role.ADMIN)

        token = await auth_service.login("admin@test.com", "password1")
        assert credential_service.verify_token(token).role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_identical(self, auth_service):
        await auth_service.register("user@test.com", "password1")

        with pytest.raises(InvalidCredentials) as unknown:
            await auth_service.login("nobody@test.com", "password1")
        with pytest.raises(InvalidCredentials) as wrong:
            await auth_service.login("user@test.com", "password2")

        assert unknown.value.message == wrong.value.message == "Invalid credentials"
        assert unknown.value.status_code == wrong.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_email_still_runs_bcrypt(self, auth_service):
        with patch("app.services.credentials.bcrypt.checkpw", wraps=bcrypt.checkpw) as checkpw:
            with pytest.raises(InvalidCredentials):
                await auth_service.login("nobody@test.com", "password1")

        checkpw.assert_called_once()

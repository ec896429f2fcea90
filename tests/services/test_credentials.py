"""Unit tests for CredentialService"""
import dataclasses
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.config import Config
from app.models.user import Identity, Role
from app.services.credentials import (
    CredentialFormatError,
    CredentialService,
    CredentialSettings,
    TokenExpired,
    TokenInvalid,
)


def service_at(settings: CredentialSettings, when: datetime) -> CredentialService:
    return CredentialService(settings, clock=lambda: when)


class TestCredentialSettings:
    """Test CredentialSettings"""

    def test_from_config(self):
        config = Config(jwt_secret="s3cret", jwt_algorithm="HS512", jwt_expiration=120, bcrypt_rounds=6)
        settings = CredentialSettings.from_config(config)
        assert settings.secret == "s3cret"
        assert settings.algorithm == "HS512"
        assert settings.expiration == timedelta(seconds=120)
        assert settings.bcrypt_rounds == 6

    def test_defaults_to_one_hour(self):
        assert CredentialSettings(secret="x").expiration == timedelta(hours=1)

    def test_settings_are_immutable(self, credential_settings):
        with pytest.raises(dataclasses.FrozenInstanceError):
            credential_settings.secret = "other"


class TestTokens:
    """Test issue_token / verify_token"""

    def test_round_trip(self, credential_service):
        token = credential_service.issue_token("abc123", Role.ADMIN)
        assert credential_service.verify_token(token) == Identity(subject_id="abc123", role=Role.ADMIN)

    def test_payload_claims(self, credential_settings):
        issued = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = service_at(credential_settings, issued).issue_token("u1", Role.USER)
        payload = jwt.decode(token, options={"verify_signature": False})
        assert payload["sub"] == "u1"
        assert payload["role"] == "user"
        assert payload["exp"] - payload["iat"] == 3600
        assert payload["iat"] == int(issued.timestamp())

    def test_valid_just_before_expiry(self, credential_settings, credential_service):
        issued = datetime.now(timezone.utc) - timedelta(minutes=59)
        token = service_at(credential_settings, issued).issue_token("u1", Role.USER)
        assert credential_service.verify_token(token).subject_id == "u1"

    def test_expired_token(self, credential_settings, credential_service):
        issued = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)
        token = service_at(credential_settings, issued).issue_token("u1", Role.USER)
        with pytest.raises(TokenExpired) as exc_info:
            credential_service.verify_token(token)
        assert exc_info.value.message == "Token has expired."
        assert exc_info.value.status_code == 401

    def test_tampered_token(self, credential_service):
        token = credential_service.issue_token("u1", Role.USER)
        header, payload, signature = token.split(".")
        forged = CredentialService(CredentialSettings(secret="other")).issue_token("u1", Role.ADMIN)
        with pytest.raises(TokenInvalid):
            credential_service.verify_token(".".join([header, forged.split(".")[1], signature]))

    def test_wrong_secret(self, credential_service):
        token = CredentialService(CredentialSettings(secret="other")).issue_token("u1", Role.USER)
        with pytest.raises(TokenInvalid) as exc_info:
            credential_service.verify_token(token)
        assert exc_info.value.message == "Invalid token."

    @pytest.mark.parametrize("token", ["garbage", "a.b.c", ""])
    def test_malformed_token(self, credential_service, token):
        with pytest.raises(TokenInvalid):
            credential_service.verify_token(token)

    def test_unknown_role_is_invalid(self, credential_service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "u1", "role": "superuser", "iat": now, "exp": now + timedelta(hours=1)},
            "test-secret",
            algorithm="HS256",
        )
        with pytest.raises(TokenInvalid):
            credential_service.verify_token(token)

    def test_missing_subject_is_invalid(self, credential_service):
        now = datetime.now(timezone.utc)
        token = jwt.encode({"role": "user", "iat": now, "exp": now + timedelta(hours=1)}, "test-secret")
        with pytest.raises(TokenInvalid):
            credential_service.verify_token(token)


class TestPasswords:
    """Test hash_password / verify_password"""

    def test_hash_is_not_plaintext_and_salted(self, credential_service):
        first = credential_service.hash_password("password1")
        second = credential_service.hash_password("password1")
        assert first != "password1"
        assert first != second

    def test_verify_matching_password(self, credential_service):
        digest = credential_service.hash_password("password1")
        assert credential_service.verify_password("password1", digest) is True

    def test_verify_mismatch_returns_false(self, credential_service):
        digest = credential_service.hash_password("password1")
        assert credential_service.verify_password("password2", digest) is False

    def test_cost_factor_is_applied(self, credential_service):
        assert credential_service.hash_password("password1").startswith("$2b$04$")

    def test_malformed_digest(self, credential_service):
        with pytest.raises(CredentialFormatError) as exc_info:
            credential_service.verify_password("password1", "not-a-bcrypt-digest")
        assert exc_info.value.status_code == 500

    def test_reject_password_always_fails(self, credential_service):
        assert credential_service.reject_password("placeholder") is False
        assert credential_service.reject_password("password1") is False

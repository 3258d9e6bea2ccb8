"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from campus.config import AuthSettings
from campus.domain.service import JWTService
from campus.domain.value import UserId
from campus.util.jwt import JWTError, create_token


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service(auth_settings) -> JWTService:
    return JWTService(auth_settings=auth_settings)


class TestGetUserIdFromToken:
    """Tests for caller identity extraction."""

    def test_valid_token_returns_user_id(self, jwt_service, auth_settings):
        user_id = UserId(uuid4())
        token = create_token(str(user_id), auth_settings)

        assert jwt_service.get_user_id_from_token(token) == user_id

    def test_missing_token_returns_none(self, jwt_service):
        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("") is None

    def test_garbage_token_returns_none(self, jwt_service):
        assert jwt_service.get_user_id_from_token("not-a-jwt") is None

    def test_wrong_secret_returns_none(self, jwt_service):
        token = create_token(str(uuid4()), AuthSettings(jwt_secret="other-secret"))

        assert jwt_service.get_user_id_from_token(token) is None

    def test_wrong_audience_returns_none(self, jwt_service):
        token = create_token(
            str(uuid4()), AuthSettings(jwt_secret="test-secret", jwt_audience="anon")
        )

        assert jwt_service.get_user_id_from_token(token) is None

    def test_expired_token_returns_none(self, jwt_service):
        token = create_token(
            str(uuid4()),
            AuthSettings(jwt_secret="test-secret", jwt_expiry_minutes=-5),
        )

        assert jwt_service.get_user_id_from_token(token) is None

    def test_non_uuid_subject_returns_none(self, jwt_service, auth_settings):
        token = create_token("not-a-uuid", auth_settings)

        assert jwt_service.get_user_id_from_token(token) is None


class TestVerifyToken:
    """Tests for verify_token."""

    def test_payload_claims(self, jwt_service, auth_settings):
        user_id = str(uuid4())
        token = create_token(user_id, auth_settings, email="student@campus.example")

        payload = jwt_service.verify_token(token)

        assert payload.sub == user_id
        assert payload.email == "student@campus.example"
        assert payload.role == "authenticated"

    def test_expired_token_raises(self, jwt_service):
        token = create_token(
            str(uuid4()),
            AuthSettings(jwt_secret="test-secret", jwt_expiry_minutes=-5),
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

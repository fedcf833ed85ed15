"""Tests for account service and bearer tokens."""

import uuid
from unittest.mock import patch

import pytest

from devconnector.auth.models import User
from devconnector.auth.service import (
    authenticate_user,
    get_user_by_email,
    gravatar_url,
    hash_password,
    register_user,
    verify_password,
)
from devconnector.auth.tokens import InvalidToken, create_access_token, decode_access_token


class TestPasswordHashing:
    def test_hash_and_verify(self):
        password = "test_password_123"
        hashed = hash_password(password)
        assert hashed != password
        assert verify_password(password, hashed)

    def test_wrong_password_fails(self):
        hashed = hash_password("correct_password")
        assert not verify_password("wrong_password", hashed)


class TestGravatar:
    def test_case_insensitive(self):
        assert gravatar_url("Ann@X.com") == gravatar_url("ann@x.com")

    def test_query_options(self):
        url = gravatar_url("ann@x.com")
        assert url.startswith("https://www.gravatar.com/avatar/")
        assert "s=200" in url and "r=pg" in url and "d=mm" in url


class TestRegisterUser:
    def test_creates_account(self, db_session):
        user = register_user(db_session, "Ann", "Ann@X.com", "secret1")
        db_session.commit()
        assert user.name == "Ann"
        assert user.email == "ann@x.com"
        assert user.password_hash != "secret1"
        assert user.avatar == gravatar_url("ann@x.com")

    def test_duplicate_email_rejected(self, db_session, test_user):
        result = register_user(db_session, "Again", "test@example.com", "secret1")
        assert result is None
        assert db_session.query(User).filter(User.email == "test@example.com").count() == 1

    def test_concurrent_duplicate_returns_none(self, db_session, test_user):
        # Another writer inserted the email between the lookup and the insert
        with patch("devconnector.auth.service.get_user_by_email", return_value=None):
            result = register_user(db_session, "Again", "test@example.com", "secret1")
        assert result is None
        assert db_session.query(User).filter(User.email == "test@example.com").count() == 1


class TestGetUserByEmail:
    def test_finds_existing_user(self, db_session, test_user):
        user = get_user_by_email(db_session, "test@example.com")
        assert user is not None
        assert user.id == test_user.id

    def test_returns_none_for_unknown(self, db_session):
        assert get_user_by_email(db_session, "unknown@example.com") is None


class TestAuthenticateUser:
    def test_valid_credentials(self, db_session, test_user):
        result = authenticate_user(db_session, "test@example.com", "secret123")
        assert result is not None
        assert result.id == test_user.id

    def test_wrong_password(self, db_session, test_user):
        assert authenticate_user(db_session, "test@example.com", "wrongpassword") is None

    def test_nonexistent_user(self, db_session):
        assert authenticate_user(db_session, "nobody@test.com", "password") is None


class TestTokens:
    def test_round_trip_subject(self):
        user_id = uuid.uuid4()
        assert decode_access_token(create_access_token(user_id)) == user_id

    def test_expired_token_rejected(self):
        token = create_access_token(uuid.uuid4(), expires_in=-60)
        with pytest.raises(InvalidToken):
            decode_access_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidToken):
            decode_access_token("not-a-jwt")

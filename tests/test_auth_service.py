"""Unit tests for AuthService against the in-memory user store."""

from unittest.mock import AsyncMock

import pytest
from fastapi import Response

from common.utils.exceptions import (
    ConflictException,
    InvalidCredentialsException,
    NotFoundException,
    ServerException,
    ValidationException,
)
from chatapp.schemas.auth import ProfileUpdate


def _set_cookies(response: Response) -> list:
    return response.headers.getlist("set-cookie")


async def _signup(auth_service, full_name="Alice", email="a@x.com", password="secret1"):
    return await auth_service.signup(full_name, email, password, Response())


# ─────────────────────────────────────────────────────────────────
# signup
# ─────────────────────────────────────────────────────────────────


class TestSignup:
    @pytest.mark.asyncio
    async def test_returns_public_view_without_password(self, auth_service):
        response = Response()
        view = await auth_service.signup("Alice", "a@x.com", "secret1", response)

        assert set(view) == {"_id", "fullName", "email", "profilePic"}
        assert view["email"] == "a@x.com"
        assert view["fullName"] == "Alice"
        assert view["profilePic"] == ""

    @pytest.mark.asyncio
    async def test_sets_session_cookie(self, auth_service):
        response = Response()
        await auth_service.signup("Alice", "a@x.com", "secret1", response)

        cookies = _set_cookies(response)
        assert len(cookies) == 1
        assert cookies[0].startswith("jwt=")
        assert "HttpOnly" in cookies[0]
        assert "Max-Age=604800" in cookies[0]

    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, auth_service, user_store, jwt_auth):
        await _signup(auth_service)

        stored = await user_store.find_by_email("a@x.com")
        assert stored["password"] != "secret1"
        assert jwt_auth.verify_password("secret1", stored["password"])
        assert stored["mutedConversations"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("full_name,email,password", [
        ("", "a@x.com", "secret1"),
        ("Alice", "", "secret1"),
        ("Alice", "a@x.com", ""),
        (None, "a@x.com", "secret1"),
        ("   ", "a@x.com", "secret1"),
    ])
    async def test_missing_fields_rejected(self, auth_service, full_name, email, password):
        with pytest.raises(ValidationException) as exc:
            await auth_service.signup(full_name, email, password, Response())

        assert exc.value.status_code == 400
        assert exc.value.message == "All fields are required"

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, auth_service, user_store):
        with pytest.raises(ValidationException) as exc:
            await auth_service.signup("Alice", "a@x.com", "12345", Response())

        assert exc.value.message == "Password must be at least 6 characters"
        assert user_store.users == {}

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, auth_service):
        await _signup(auth_service)

        response = Response()
        with pytest.raises(ConflictException) as exc:
            await auth_service.signup("Other", "A@X.com", "another1", response)

        assert exc.value.status_code == 400
        assert exc.value.message == "Email already exists"
        assert _set_cookies(response) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        ConflictException(message="Email already exists", code="EMAIL_EXISTS"),
        RuntimeError("insert failed"),
    ])
    async def test_no_cookie_when_insert_fails(self, auth_service, user_store, error):
        user_store.create = AsyncMock(side_effect=error)
        response = Response()

        with pytest.raises(type(error)):
            await auth_service.signup("Alice", "a@x.com", "secret1", response)

        user_store.create.assert_awaited_once()
        assert _set_cookies(response) == []


# ─────────────────────────────────────────────────────────────────
# login / logout
# ─────────────────────────────────────────────────────────────────


class TestLogin:
    @pytest.mark.asyncio
    async def test_correct_password_returns_same_user(self, auth_service):
        created = await _signup(auth_service)

        response = Response()
        view = await auth_service.login("a@x.com", "secret1", response)

        assert view == created
        assert _set_cookies(response)[0].startswith("jwt=")

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_share_message(self, auth_service):
        await _signup(auth_service)

        with pytest.raises(InvalidCredentialsException) as wrong_password:
            await auth_service.login("a@x.com", "wrong", Response())
        with pytest.raises(InvalidCredentialsException) as unknown_email:
            await auth_service.login("nobody@x.com", "secret1", Response())

        assert wrong_password.value.message == "Invalid credentials"
        assert unknown_email.value.message == wrong_password.value.message
        assert unknown_email.value.status_code == wrong_password.value.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_password_is_invalid_credentials(self, auth_service):
        await _signup(auth_service)

        with pytest.raises(InvalidCredentialsException):
            await auth_service.login("a@x.com", None, Response())


class TestLogout:
    def test_clears_cookie(self, auth_service):
        response = Response()
        auth_service.logout(response)

        cookie = _set_cookies(response)[0]
        assert cookie.startswith('jwt=""') or cookie.startswith("jwt=;")
        assert "Max-Age=0" in cookie


# ─────────────────────────────────────────────────────────────────
# update_profile
# ─────────────────────────────────────────────────────────────────


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_uploads_avatar_and_stores_secure_url(
        self, auth_service, media_uploader, avatar_url
    ):
        user = await _signup(auth_service)

        updated = await auth_service.update_profile(
            user["_id"], ProfileUpdate(profilePic="data:image/png;base64,AAAA")
        )

        media_uploader.upload.assert_awaited_once_with("data:image/png;base64,AAAA")
        assert updated["profilePic"] == avatar_url
        assert "password" not in updated

    @pytest.mark.asyncio
    async def test_returns_full_record(self, auth_service):
        user = await _signup(auth_service)

        updated = await auth_service.update_profile(user["_id"], ProfileUpdate(about="hi"))

        assert updated["_id"] == user["_id"]
        assert updated["about"] == "hi"
        assert updated["mutedConversations"] == []
        assert "createdAt" in updated

    @pytest.mark.asyncio
    async def test_empty_about_is_a_valid_update(self, auth_service, user_store):
        user = await _signup(auth_service)
        await auth_service.update_profile(user["_id"], ProfileUpdate(about="hello"))

        updated = await auth_service.update_profile(user["_id"], ProfileUpdate(about=""))

        assert updated["about"] == ""
        stored = await user_store.find_by_id(user["_id"])
        assert stored["about"] == ""

    @pytest.mark.asyncio
    async def test_full_name_is_trimmed(self, auth_service):
        user = await _signup(auth_service)

        updated = await auth_service.update_profile(
            user["_id"], ProfileUpdate(fullName="  Alice Smith  ")
        )

        assert updated["fullName"] == "Alice Smith"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("update", [
        ProfileUpdate(),
        ProfileUpdate(fullName="   "),
        ProfileUpdate(profilePic=""),
    ])
    async def test_no_op_update_rejected(self, auth_service, media_uploader, update):
        user = await _signup(auth_service)

        with pytest.raises(ValidationException) as exc:
            await auth_service.update_profile(user["_id"], update)

        assert exc.value.message == "No profile fields to update"
        media_uploader.upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upload_failure_propagates(self, auth_service, media_uploader, user_store):
        user = await _signup(auth_service)
        media_uploader.upload.side_effect = ServerException(message="Image upload failed")

        with pytest.raises(ServerException) as exc:
            await auth_service.update_profile(
                user["_id"], ProfileUpdate(profilePic="data:image/png;base64,AAAA", about="x")
            )

        assert exc.value.status_code == 500
        stored = await user_store.find_by_id(user["_id"])
        assert stored["about"] == ""

    @pytest.mark.asyncio
    async def test_missing_user(self, auth_service, sample_user_id):
        with pytest.raises(NotFoundException):
            await auth_service.update_profile(sample_user_id, ProfileUpdate(about="x"))


# ─────────────────────────────────────────────────────────────────
# check_auth
# ─────────────────────────────────────────────────────────────────


class TestCheckAuth:
    @pytest.mark.asyncio
    async def test_echoes_caller_without_store_access(self, auth_service, user_store):
        user = await _signup(auth_service)
        caller = await user_store.find_by_id(user["_id"])
        user_store.users.clear()

        result = auth_service.check_auth(caller)

        assert result["_id"] == user["_id"]
        assert result["email"] == "a@x.com"
        assert "password" not in result


# ─────────────────────────────────────────────────────────────────
# mute / unmute
# ─────────────────────────────────────────────────────────────────


class TestMuteConversation:
    @pytest.mark.asyncio
    async def test_mute_is_idempotent(self, auth_service, sample_user_id):
        user = await _signup(auth_service)

        once = await auth_service.mute_conversation(user["_id"], sample_user_id)
        twice = await auth_service.mute_conversation(user["_id"], sample_user_id)

        assert once == [sample_user_id]
        assert twice == once

    @pytest.mark.asyncio
    async def test_unmute_after_mute_restores_prior_set(self, auth_service, sample_user_id):
        user = await _signup(auth_service)
        other = "65f0c0ffee0000000000abcd"
        before = await auth_service.mute_conversation(user["_id"], other)

        await auth_service.mute_conversation(user["_id"], sample_user_id)
        after = await auth_service.unmute_conversation(user["_id"], sample_user_id)

        assert after == before

    @pytest.mark.asyncio
    async def test_unmute_without_entry_succeeds(self, auth_service, sample_user_id):
        user = await _signup(auth_service)

        result = await auth_service.unmute_conversation(user["_id"], sample_user_id)

        assert result == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["mute_conversation", "unmute_conversation"])
    @pytest.mark.parametrize("conversation_user_id", [None, ""])
    async def test_conversation_id_required(self, auth_service, method, conversation_user_id):
        user = await _signup(auth_service)

        with pytest.raises(ValidationException) as exc:
            await getattr(auth_service, method)(user["_id"], conversation_user_id)

        assert exc.value.message == "conversationUserId is required"

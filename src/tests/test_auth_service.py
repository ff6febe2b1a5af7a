from datetime import timedelta

import pytest
from sqlalchemy import update

from src.auth import service as auth_service
from src.data.models.db_entity.user import User
from src.utils.exceptions import AuthenticationError
from src.utils.jwt_utils import create_access_token, extract_username


async def _deactivate(db, username):
    async with db.get_session() as session:
        await session.execute(update(User).where(User.username == username).values(is_active=False))
        await session.commit()


def test_password_hash_round_trip():
    hashed = auth_service.hash_password("s3cret")

    assert hashed != "s3cret"
    assert auth_service.verify_password("s3cret", hashed)
    assert not auth_service.verify_password("wrong", hashed)


@pytest.mark.asyncio
async def test_authenticate_issues_bearer_token(sqlite_db):
    await sqlite_db.create_tables()
    await auth_service.create_user("alice", "wonderland")

    response = await auth_service.authenticate("alice", "wonderland")

    assert response.type == "Bearer"
    assert response.expires_in == 86400
    assert extract_username(response.token) == "alice"
    assert response.model_dump(by_alias=True).keys() == {"token", "type", "expiresIn"}


@pytest.mark.asyncio
async def test_unknown_user_and_wrong_password_fail_alike(sqlite_db):
    await sqlite_db.create_tables()
    await auth_service.create_user("alice", "wonderland")

    with pytest.raises(AuthenticationError) as unknown:
        await auth_service.authenticate("bob", "wonderland")
    with pytest.raises(AuthenticationError) as wrong:
        await auth_service.authenticate("alice", "looking-glass")

    assert unknown.value.message == wrong.value.message == "Invalid username or password"


@pytest.mark.asyncio
async def test_inactive_user_cannot_log_in_or_use_token(sqlite_db):
    await sqlite_db.create_tables()
    await auth_service.create_user("alice", "wonderland")
    token = (await auth_service.authenticate("alice", "wonderland")).token

    await _deactivate(sqlite_db, "alice")

    with pytest.raises(AuthenticationError):
        await auth_service.authenticate("alice", "wonderland")
    with pytest.raises(AuthenticationError):
        await auth_service.resolve_user(token)


@pytest.mark.asyncio
async def test_resolve_user_accepts_only_valid_tokens(sqlite_db):
    await sqlite_db.create_tables()
    user = await auth_service.create_user("alice", "wonderland")

    info = await auth_service.resolve_user(create_access_token("alice"))
    assert info.username == "alice"
    assert info.user_id == user.id

    for token in (
        "not-a-token",
        create_access_token("alice", expires_delta=timedelta(seconds=-5)),
        create_access_token("ghost"),
    ):
        with pytest.raises(AuthenticationError) as exc_info:
            await auth_service.resolve_user(token)
        assert exc_info.value.message == "Invalid or expired token"


@pytest.mark.asyncio
async def test_ensure_user_creates_once(sqlite_db):
    await sqlite_db.create_tables()

    assert await auth_service.ensure_user("admin", "admin123")
    assert not await auth_service.ensure_user("admin", "other")
    assert not await auth_service.ensure_user(None, "x")

    response = await auth_service.authenticate("admin", "admin123")
    assert response.token


@pytest.mark.asyncio
async def test_unknown_user_still_pays_for_a_hash_check(sqlite_db, monkeypatch):
    await sqlite_db.create_tables()
    calls = []
    real_dummy_verify = auth_service.pwd_context.dummy_verify

    def counting_dummy_verify(*args, **kwargs):
        calls.append(True)
        return real_dummy_verify(*args, **kwargs)

    monkeypatch.setattr(auth_service.pwd_context, "dummy_verify", counting_dummy_verify)

    with pytest.raises(AuthenticationError):
        await auth_service.authenticate("nobody", "whatever")

    assert calls == [True]

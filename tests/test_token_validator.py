""" Test cases for the default access-token validator """
from datetime import datetime, timedelta, timezone

from sqlalchemy import select

from vendorhub.core.response import ResponseContext
from vendorhub.domain.token import AccessToken
from vendorhub.services.token import TOKEN_EXPIRY_HEADER, AccessTokenValidator


def _add_token(db, token, *, expires_in=timedelta(hours=1), is_revoked=False):
    async def _add(session):
        session.add(
            AccessToken(
                token=token,
                expires_at=datetime.now(timezone.utc) + expires_in,
                is_revoked=is_revoked,
            )
        )

    db.run(_add)


def _validate(db, token, context=None):
    context = context or ResponseContext()

    async def _check(session):
        return await AccessTokenValidator(session).is_token_valid(token, context)

    return db.run(_check)


def test_live_token_is_valid(db):
    _add_token(db, "live")
    context = ResponseContext()

    result = _validate(db, "live", context)

    assert result
    assert result.is_valid is True
    assert result.response is context
    assert TOKEN_EXPIRY_HEADER in context.headers


def test_valid_token_records_last_use(db):
    _add_token(db, "live")
    _validate(db, "live")

    async def _get(session):
        return (
            await session.execute(select(AccessToken).where(AccessToken.token == "live"))
        ).scalar_one()

    assert db.run(_get).last_used_at is not None


def test_unknown_token_is_rejected(db):
    assert _validate(db, "missing") is None


def test_revoked_token_is_rejected(db):
    _add_token(db, "revoked", is_revoked=True)
    assert _validate(db, "revoked") is None


def test_expired_token_is_rejected(db):
    _add_token(db, "expired", expires_in=timedelta(hours=-1))
    assert _validate(db, "expired") is None

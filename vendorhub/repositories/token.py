"""Access-token repository used by the default token validator."""


from datetime import datetime, timezone

from vendorhub.domain.token import AccessToken
from vendorhub.repositories.base import BaseRepository


class AccessTokenRepository(BaseRepository[AccessToken]):
    model = AccessToken

    async def get_live(self, token: str) -> AccessToken | None:
        """Return the token row if it exists, is not revoked and has not expired."""
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            self._base_query()
            .where(AccessToken.token == token)
            .where(AccessToken.is_revoked.is_(False))
            .where(AccessToken.expires_at > now)
        )
        return result.scalars().first()

    async def touch(self, access_token: AccessToken) -> None:
        access_token.last_used_at = datetime.now(timezone.utc)
        await self._session.flush()

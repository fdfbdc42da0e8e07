"""Token validation collaborator.

Handlers only depend on the :class:`TokenValidator` protocol. A validator
receives the token and the current :class:`ResponseContext` and answers with
a :class:`TokenValidation` pair: whether the token is valid and the context
to use from then on (it may add headers or cookies, or hand back a new one).
A falsy answer or a raised error means the token is invalid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.response import ResponseContext
from vendorhub.repositories.token import AccessTokenRepository

logger = logging.getLogger(__name__)

TOKEN_EXPIRY_HEADER = "X-Token-Expires-At"


@dataclass(frozen=True)
class TokenValidation:
    is_valid: bool
    response: ResponseContext

    def __bool__(self) -> bool:
        return self.is_valid


class TokenValidator(Protocol):
    async def is_token_valid(
        self, token: str, response: ResponseContext
    ) -> Optional[TokenValidation]: ...


class AccessTokenValidator:
    """Checks tokens against the ``access_tokens`` table."""

    def __init__(self, session: AsyncSession):
        self._repo = AccessTokenRepository(session)

    async def is_token_valid(
        self, token: str, response: ResponseContext
    ) -> Optional[TokenValidation]:
        access_token = await self._repo.get_live(token)
        if access_token is None:
            return None

        await self._repo.touch(access_token)
        response.headers[TOKEN_EXPIRY_HEADER] = access_token.expires_at.isoformat()
        return TokenValidation(is_valid=True, response=response)

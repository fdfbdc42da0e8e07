"""
Define functions/aliases for dependency injection
"""
from typing import Annotated, Optional, TypeAlias

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.config import settings
from vendorhub.core.exceptions import InvalidTokenError
from vendorhub.db.base import get_db
from vendorhub.services.images import ImageStore
from vendorhub.services.token import AccessTokenValidator, TokenValidator


def get_token(request: Request) -> Optional[str]:
    """Token from the configured header, or None when absent."""
    return request.headers.get(settings.token_header_key)


def require_token(token: Optional[str] = Depends(get_token)) -> str:
    """Reject the request before its body or query is parsed when no token is sent."""
    if not token:
        raise InvalidTokenError()
    return token


def get_token_validator(session: AsyncSession = Depends(get_db)) -> TokenValidator:
    return AccessTokenValidator(session)


def get_image_store() -> ImageStore:
    return ImageStore(settings.upload_dir)


SessionDep: TypeAlias = Annotated[AsyncSession, Depends(get_db)]
TokenDep: TypeAlias = Annotated[Optional[str], Depends(get_token)]
TokenValidatorDep: TypeAlias = Annotated[TokenValidator, Depends(get_token_validator)]
ImageStoreDep: TypeAlias = Annotated[ImageStore, Depends(get_image_store)]

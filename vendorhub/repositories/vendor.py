"""Vendor repository: email-keyed insert and overwrite, active listing."""


import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from vendorhub.core.exceptions import DuplicateEmailError, StoreError
from vendorhub.domain.vendor import Vendor
from vendorhub.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def find_by_email(self, email: str | None) -> Vendor | None:
        return await self.find_one({"email": email})

    async def insert_if_absent(self, record: dict[str, Any]) -> Vendor:
        """Insert ``record`` unless a vendor with its email exists.

        Raises DuplicateEmailError when the email is already taken; the
        existing row is never modified. The unique index on ``email``
        settles concurrent inserts.
        """
        if await self.find_by_email(record.get("email")) is not None:
            raise DuplicateEmailError()
        try:
            return await self.create(**record)
        except IntegrityError as exc:
            logger.info("Concurrent insert won for email %s", record.get("email"))
            await self._session.rollback()
            raise DuplicateEmailError() from exc

    async def update_by_email(self, email: str | None, record: dict[str, Any]) -> int:
        """Overwrite every vendor field on the record matching ``email``. Never inserts."""
        try:
            return await self.update_one({"email": email}, **record)
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreError(str(exc)) from exc

    async def list_active(self, *, offset: int, limit: int) -> list[Vendor]:
        try:
            return await self.find({"status": True}, offset=offset, limit=limit)
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreError(str(exc)) from exc

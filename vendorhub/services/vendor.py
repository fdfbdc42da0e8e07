"""Vendor service: add, update and list vendors.

Each handler walks the same steps: check the token, validate fields, store
the image, then one store call. Exactly one envelope comes out of every
path. Token failures raise :class:`InvalidTokenError` (rendered by the
global handler); later failures are answered in the returned :class:`Reply`
so the validator's response context is kept.

Rule: No FastAPI routing here. Routers build the service and render the reply.
"""


import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core import messages
from vendorhub.core.config import Settings
from vendorhub.core.exceptions import (
    DuplicateEmailError,
    InvalidTokenError,
    StoreError,
    VendorValidationError,
)
from vendorhub.core.pagination import PaginationParams
from vendorhub.core.response import Envelope, Reply, ResponseContext
from vendorhub.core.validators import validate_vendor
from vendorhub.domain.vendor import Vendor
from vendorhub.repositories.vendor import VendorRepository
from vendorhub.schemas.vendor import VendorIn, VendorOut
from vendorhub.services.images import ImageStore
from vendorhub.services.token import TokenValidator

logger = logging.getLogger(__name__)

class VendorService:
    def __init__(
        self,
        session: AsyncSession,
        token_validator: TokenValidator,
        image_store: ImageStore,
        settings: Settings,
    ):
        self._repo = VendorRepository(session)
        self._token_validator = token_validator
        self._image_store = image_store
        self._settings = settings

    # ------------------------------------------------------------------
    # Shared steps
    # ------------------------------------------------------------------

    async def _authorize(self, token: Optional[str], context: ResponseContext) -> ResponseContext:
        """Return the response context to continue with, or raise InvalidTokenError."""
        if not token:
            raise InvalidTokenError()
        try:
            validation = await self._token_validator.is_token_valid(token, context)
        except Exception as exc:
            logger.warning("Token validator failed: %s", exc)
            raise InvalidTokenError() from exc
        if not validation:
            logger.warning("Rejected token")
            raise InvalidTokenError()
        return validation.response

    async def _prepare(self, body: VendorIn) -> dict:
        """Validate the body and swap the image payload for its stored path."""
        record = body.to_record()
        validate_vendor(record)
        record["image"] = await self._image_store.save(record["image"])
        return record

    def _public_image(self, image: Optional[str]) -> Optional[str]:
        if image is None:
            return None
        return f"{self._settings.self_url}/{image}"

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def add_vendor(
        self, token: Optional[str], body: VendorIn, context: ResponseContext
    ) -> Reply:
        context = await self._authorize(token, context)
        try:
            record = await self._prepare(body)
        except VendorValidationError as exc:
            return Reply(Envelope.fail(exc.message), context)

        try:
            vendor = await self._repo.insert_if_absent(record)
        except DuplicateEmailError as exc:
            logger.warning("Vendor email already registered: %s", record["email"])
            return Reply(Envelope.fail(exc.message), context)

        logger.info("Vendor added: %s (%s)", vendor.id, vendor.email)
        return Reply(Envelope.ok(messages.VENDOR_ADDED), context)

    async def update_vendor(
        self, token: Optional[str], body: VendorIn, context: ResponseContext
    ) -> Reply:
        context = await self._authorize(token, context)
        try:
            record = await self._prepare(body)
        except VendorValidationError as exc:
            return Reply(Envelope.fail(exc.message), context)

        try:
            changed = await self._repo.update_by_email(record["email"], record)
        except StoreError as exc:
            logger.warning("Vendor update failed for %s: %s", record["email"], exc.message)
            # Clients rely on code 0 here; only the message tells the failure apart.
            return Reply(Envelope(code=0, message=messages.UNABLE_TO_PROCESS), context)

        logger.info("Vendor update for %s matched %d record(s)", record["email"], changed)
        return Reply(Envelope.ok(messages.VENDOR_ADDED), context)

    async def list_vendors(
        self, token: Optional[str], pagination: PaginationParams, context: ResponseContext
    ) -> Reply:
        context = await self._authorize(token, context)
        try:
            vendors: list[Vendor] = await self._repo.list_active(
                offset=pagination.skip, limit=pagination.limit
            )
        except StoreError as exc:
            logger.warning("Vendor listing failed: %s", exc.message)
            return Reply(Envelope.fail(exc.message), context)

        items = []
        for vendor in vendors:
            item = VendorOut.model_validate(vendor)
            item.image = self._public_image(item.image)
            items.append(item)
        return Reply(Envelope.ok(data=items), context)

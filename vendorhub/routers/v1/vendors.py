"""Vendor router - add, update and list vendors.

HTTP   URI                        Action
----   ---                        ------
POST   /api/v1/vendors            Add a vendor (insert if the email is new)
PUT    /api/v1/vendors            Update the vendor matching the email
POST   /api/v1/vendors/update     Same as PUT, for clients without PUT
GET    /api/v1/vendors            List active vendors (?skip=&limit=)

Every response is HTTP 200 with a `{code, message?, data?}` envelope.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from vendorhub.core.config import settings
from vendorhub.core.deps import (
    ImageStoreDep,
    SessionDep,
    TokenDep,
    TokenValidatorDep,
    require_token,
)
from vendorhub.core.pagination import PaginationParams
from vendorhub.core.response import ResponseContext
from vendorhub.schemas.vendor import VendorIn
from vendorhub.services.vendor import VendorService

router = APIRouter(
    prefix="/vendors",
    tags=["Vendors"],
    dependencies=[Depends(require_token)],
)


# ------------------------------------------------------------------
# Helper - instantiate service with its collaborators
# ------------------------------------------------------------------

def _svc(
    session: SessionDep,
    token_validator: TokenValidatorDep,
    image_store: ImageStoreDep,
) -> VendorService:
    return VendorService(session, token_validator, image_store, settings)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("", response_class=JSONResponse)
async def add_vendor(
    body: VendorIn,
    token: TokenDep,
    service: VendorService = Depends(_svc),
):
    """Register a vendor. A second add with the same email is rejected."""
    reply = await service.add_vendor(token, body, ResponseContext())
    return reply.render()


@router.put("", response_class=JSONResponse)
@router.post("/update", response_class=JSONResponse)
async def update_vendor(
    body: VendorIn,
    token: TokenDep,
    service: VendorService = Depends(_svc),
):
    """Overwrite the vendor whose email matches. Nothing is created."""
    reply = await service.update_vendor(token, body, ResponseContext())
    return reply.render()


@router.get("", response_class=JSONResponse)
async def list_vendors(
    token: TokenDep,
    pagination: PaginationParams = Depends(),
    service: VendorService = Depends(_svc),
):
    """List vendors with status=true, at most 20 per page."""
    reply = await service.list_vendors(token, pagination, ResponseContext())
    return reply.render()

"""Vendor Pydantic schemas (request DTOs and response models)."""


from typing import Any, Optional

from vendorhub.schemas.common import CamelModel

class VendorIn(CamelModel):
    """Body of add and update. Fields are left untyped so the field
    validators, not the parser, decide which one is reported."""

    name: Any = None
    image: Any = None
    email: Any = None
    website: Any = None
    description: Any = None

    def to_record(self) -> dict[str, Any]:
        """Transient vendor record for one request; always listed."""
        return {
            "name": self.name,
            "image": self.image,
            "email": self.email,
            "website": self.website,
            "description": self.description,
            "status": True,
        }

class VendorOut(CamelModel):
    id: str
    name: str
    image: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    status: bool

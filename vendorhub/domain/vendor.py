"""SQLAlchemy ORM model for Vendors.

``email`` is the natural key: two records sharing an email are the same
vendor. Rows are never deleted; ``status`` marks a vendor as listed.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vendorhub.db.base import Base
from vendorhub.domain.mixins import TimestampMixin


class Vendor(Base, TimestampMixin):
    __tablename__ = "vendors"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Stored path under the upload directory, or NULL when the write failed
    image: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(
        String(255), unique=True, index=True, nullable=True
    )
    website: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

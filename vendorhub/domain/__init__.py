"""Domain package - all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py  - vendor records (email is the natural key)
  token.py   - access tokens checked by the default token validator
  mixins.py  - shared TimestampMixin
"""

from vendorhub.domain.token import AccessToken
from vendorhub.domain.vendor import Vendor

__all__ = [
    "AccessToken",
    "Vendor",
]

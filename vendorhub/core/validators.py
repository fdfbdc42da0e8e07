"""Field validators shared by the vendor endpoints.

The ``is_*`` functions are pure predicates over raw request values.
``validate_vendor`` runs the vendor field checks in their fixed order and
raises on the first failure.
"""

from __future__ import annotations

import re
from typing import Any

from vendorhub.core import messages
from vendorhub.core.exceptions import VendorValidationError

_NAME_RE = re.compile(r"[a-zA-Z]+")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9_.\-]+@(?:[a-zA-Z0-9\-]+\.)+[a-zA-Z0-9]{2,4}")
# Substring search: a 10-digit run anywhere in the value passes.
_MOBILE_RE = re.compile(r"\b\d{10}\b", re.ASCII)


def is_name_valid(name: Any) -> bool:
    if not name or not isinstance(name, str):
        return False
    return _NAME_RE.fullmatch(name) is not None


def is_email_valid(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    return _EMAIL_RE.fullmatch(email) is not None


def is_mobile_valid(mobile: Any) -> bool:
    if not mobile or not isinstance(mobile, str) or mobile.startswith("0"):
        return False
    return _MOBILE_RE.search(mobile) is not None


def is_gender_valid(gender: Any) -> bool:
    return isinstance(gender, bool)


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def validate_vendor(vendor: dict[str, Any]) -> None:
    """Raise VendorValidationError for the first invalid vendor field."""
    if not is_name_valid(vendor.get("name")):
        raise VendorValidationError(messages.INVALID_NAME)
    if vendor.get("email") is not None and not is_email_valid(vendor["email"]):
        raise VendorValidationError(messages.INVALID_EMAIL)
    if not _is_filled(vendor.get("image")):
        raise VendorValidationError(messages.INVALID_IMAGE)
    if vendor.get("description") is not None and not _is_filled(vendor["description"]):
        raise VendorValidationError(messages.INVALID_DESCRIPTION)
    if vendor.get("website") is not None and not _is_filled(vendor["website"]):
        raise VendorValidationError(messages.INVALID_WEBSITE)

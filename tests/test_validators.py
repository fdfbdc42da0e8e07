""" Test cases for the shared field validators """
import pytest

from vendorhub.core import messages
from vendorhub.core.exceptions import VendorValidationError
from vendorhub.core.validators import (
    is_email_valid,
    is_gender_valid,
    is_mobile_valid,
    is_name_valid,
    validate_vendor,
)


@pytest.mark.parametrize("name", ["Acme", "a", "ZetaCorp", "abcXYZ"])
def test_name_alphabetic_is_valid(name):
    assert is_name_valid(name)


@pytest.mark.parametrize(
    "name", ["", None, "Acme1", "Acme Corp", "Acme-Corp", "Acme.", "Café", "Acme\n", " "]
)
def test_name_with_other_characters_is_invalid(name):
    assert not is_name_valid(name)


@pytest.mark.parametrize(
    "email", ["a@b.co", "john.doe@example.com", "x_y-z@mail.example.info", "a@b.co.uk"]
)
def test_well_formed_email_is_valid(email):
    assert is_email_valid(email)


@pytest.mark.parametrize(
    "email",
    ["", None, "plainaddress", "a.example.com", "a@example", "a@example.c", "a@.com", "a b@c.com"],
)
def test_malformed_email_is_invalid(email):
    assert not is_email_valid(email)


def test_email_tld_longer_than_four_is_invalid():
    assert not is_email_valid("a@example.company")


@pytest.mark.parametrize("mobile", ["9876543210", "call 9876543210 now", "+1 9876543210"])
def test_mobile_with_ten_digit_run_is_valid(mobile):
    assert is_mobile_valid(mobile)


@pytest.mark.parametrize("mobile", ["", None, "0987654321", "12345", "98765432101"])
def test_mobile_invalid(mobile):
    assert not is_mobile_valid(mobile)


def test_gender_must_be_boolean():
    assert is_gender_valid(True)
    assert is_gender_valid(False)
    assert not is_gender_valid("true")
    assert not is_gender_valid(1)
    assert not is_gender_valid(None)


def _vendor(**overrides):
    vendor = {
        "name": "Acme",
        "image": "data:image/png;base64,AAAA",
        "email": "a@b.co",
        "website": None,
        "description": None,
    }
    vendor.update(overrides)
    return vendor


def test_validate_vendor_accepts_minimal_vendor():
    validate_vendor(_vendor(email=None))


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": "Acme1"}, messages.INVALID_NAME),
        ({"name": None}, messages.INVALID_NAME),
        ({"email": "nope"}, messages.INVALID_EMAIL),
        ({"image": ""}, messages.INVALID_IMAGE),
        ({"image": None}, messages.INVALID_IMAGE),
        ({"description": ""}, messages.INVALID_DESCRIPTION),
        ({"website": ""}, messages.INVALID_WEBSITE),
        ({"name": 123}, messages.INVALID_NAME),
        ({"email": 42}, messages.INVALID_EMAIL),
        ({"image": 1234}, messages.INVALID_IMAGE),
        ({"image": b"AAAA"}, messages.INVALID_IMAGE),
        ({"description": 5}, messages.INVALID_DESCRIPTION),
        ({"description": ["Anvils"]}, messages.INVALID_DESCRIPTION),
        ({"website": 7}, messages.INVALID_WEBSITE),
        ({"website": {}}, messages.INVALID_WEBSITE),
    ],
)
def test_validate_vendor_reports_field(overrides, message):
    with pytest.raises(VendorValidationError) as excinfo:
        validate_vendor(_vendor(**overrides))
    assert excinfo.value.message == message


def test_validate_vendor_first_failure_wins():
    with pytest.raises(VendorValidationError) as excinfo:
        validate_vendor(_vendor(name="", email="nope", image="", website=""))
    assert excinfo.value.message == messages.INVALID_NAME

    with pytest.raises(VendorValidationError) as excinfo:
        validate_vendor(_vendor(email="nope", image=""))
    assert excinfo.value.message == messages.INVALID_EMAIL

"""Client-facing response messages. The UI matches on these, keep them stable."""

INVALID_TOKEN = "invalid token"

INVALID_NAME = "invalid name"
INVALID_EMAIL = "invalid email"
INVALID_IMAGE = "invalid image"
INVALID_DESCRIPTION = "invalid description"
INVALID_WEBSITE = "invalid website"

VENDOR_ADDED = "vendor added"
EMAIL_ALREADY_REGISTERED = "email already registered"
UNABLE_TO_PROCESS = "unable to process"

"""Error messages returned by the validators."""

REQUIRED = "required"
BAD_FORMAT = "bad format"
NOT_A_NUMBER = "not a number"
OUT_OF_RANGE = "out of range: {minimum}..{maximum}"
WEAK_PASSWORD = "weak password"
MISMATCH = "mismatch"
INVALID_DATE = "invalid date"
TOO_YOUNG = "must be at least {minimum_age} years old"
INVALID_PHONE = "invalid phone number"
INVALID_WEBSITE = "must start with http:// or https://"
CONSENT_REQUIRED = "terms must be accepted"

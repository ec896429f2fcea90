"""
Input validation pipeline.

Pure functions, no I/O. Each returns ``None`` when the value is acceptable
or a ``ValidationError`` describing the first problem found. Callers decide
whether to raise it.
"""

import math
import re
from typing import Any, Optional, Union

from app.core.errors import ValidationError
from app.models.product import PRODUCT_NAME_MAX_LENGTH, PRODUCT_NAME_MIN_LENGTH

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PASSWORD_MIN_LENGTH = 8
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

Number = Union[int, float]


def validate_email(raw: Any) -> Optional[ValidationError]:
    """
    Validate an email address.

    Leading and trailing whitespace is ignored. The address must look like
    ``local@domain.tld`` with a TLD of at least two letters.
    """
    if raw is None:
        raw = ""
    if not isinstance(raw, str):
        return ValidationError("Invalid email address", code="EMAIL_INVALID")

    trimmed = raw.strip()
    if not trimmed:
        return ValidationError("Email is required", code="EMAIL_REQUIRED")
    if not EMAIL_PATTERN.fullmatch(trimmed):
        return ValidationError("Invalid email address", code="EMAIL_INVALID")
    return None


def validate_password(raw: Any) -> Optional[ValidationError]:
    """
    Validate a password.

    The length rule applies to the trimmed value, which is also the value
    that gets hashed (see ``normalize_credential``).
    """
    if raw is None:
        raw = ""
    if not isinstance(raw, str):
        return ValidationError("Password is required", code="PASSWORD_REQUIRED")

    trimmed = raw.strip()
    if not trimmed:
        return ValidationError("Password is required", code="PASSWORD_REQUIRED")
    if len(trimmed) < PASSWORD_MIN_LENGTH:
        return ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
            code="PASSWORD_TOO_SHORT",
        )
    return None


def normalize_credential(raw: str) -> str:
    """Trimmed form of an email or password, used for storage and lookup"""
    return raw.strip()


def coerce_number(raw: Any) -> Optional[Number]:
    """
    Convert request input to a finite number.

    Accepts ints, floats and numeric strings. Ints outside the 64-bit range
    become floats. Returns ``None`` for anything else, including booleans,
    blank strings, NaN and infinities.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    else:
        return None

    # BSON integers are 64-bit; wider ones are stored as doubles
    if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
        try:
            value = float(value)
        except OverflowError:
            return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def validate_positive_number(raw: Any, field_name: str) -> Optional[ValidationError]:
    """Reject values that are not numeric or are negative. Zero passes."""
    value = coerce_number(raw)
    if value is None or value < 0:
        return ValidationError(
            f"Invalid input: '{field_name}' must be numeric and positive value.",
            details={"field": field_name},
            code="INVALID_NUMERIC",
        )
    return None


def validate_product_name(raw: Any) -> Optional[ValidationError]:
    """Name shape required before a product can be created"""
    if not isinstance(raw, str) or not raw.strip() or len(raw) < PRODUCT_NAME_MIN_LENGTH:
        return ValidationError(
            f"Product name is required and must be at least {PRODUCT_NAME_MIN_LENGTH} characters.",
            code="PRODUCT_NAME_INVALID",
        )
    if len(raw) > PRODUCT_NAME_MAX_LENGTH:
        return ValidationError(
            f"Product name cannot be longer than {PRODUCT_NAME_MAX_LENGTH} characters",
            code="PRODUCT_NAME_TOO_LONG",
        )
    return None

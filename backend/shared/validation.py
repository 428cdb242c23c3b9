"""
Input validation rules shared by every module.

The API boundary checks request shapes with pydantic; the rules here are the
authoritative checks and are invoked by the services. Each ``validate_*``
function returns a ``{field: message}`` map, empty when the input is valid.
"""

import re
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email as check_email_syntax

from .exceptions import InvalidIdentifierError, ValidationError


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

YEAR_MIN = 1800
YEAR_MAX_AHEAD = 5
ITEM_RATING_MIN = 0
ITEM_RATING_MAX = 10
SCORE_MIN = 1
SCORE_MAX = 5


def is_valid_email(email: Optional[str]) -> bool:
    """Syntax check only; no DNS lookup."""
    try:
        check_email_syntax(str(email or "").strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def phone_digits(phone: Optional[str]) -> str:
    return re.sub(r"\D", "", str(phone or ""))


def validate_name(name: Optional[str]) -> Optional[str]:
    """Return an error message for an invalid display name, None if valid."""
    clean = str(name or "").strip()
    if not clean:
        return "Name is required"

    error = None
    if not NAME_MIN_LENGTH <= len(clean) <= NAME_MAX_LENGTH:
        error = f"Name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters long"
    if not any(ch.isalpha() for ch in clean):
        error = "Name must contain at least one letter"
    if re.fullmatch(r"[0-9]+", clean):
        error = "Name cannot consist of digits only"
    if not any(ch.isalnum() for ch in clean):
        error = "Name is not valid"
    return error


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """Phone is optional; when given it must carry 10-15 digits."""
    if phone is None or not str(phone).strip():
        return None
    digits = phone_digits(phone)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        return f"Phone number must contain {PHONE_MIN_DIGITS}-{PHONE_MAX_DIGITS} digits"
    return None


def validate_password(password: Optional[str]) -> Optional[str]:
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    return None


def validate_email(email: Optional[str]) -> Optional[str]:
    if not str(email or "").strip():
        return "Email is required"
    if not is_valid_email(email):
        return "Please enter a valid email address"
    return None


def validate_registration(
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
    phone: Optional[str] = None,
) -> dict[str, str]:
    checks = {
        "name": validate_name(name),
        "email": validate_email(email),
        "password": validate_password(password),
        "phone": validate_phone(phone),
    }
    return {field: message for field, message in checks.items() if message}


def validate_login(email: Optional[str], password: Optional[str]) -> dict[str, str]:
    field_errors = {}
    email_error = validate_email(email)
    if email_error:
        field_errors["email"] = email_error
    if not password:
        field_errors["password"] = "Password is required"
    return field_errors


def validate_profile_update(
    name: Optional[str] = None,
    phone: Optional[str] = None,
    password: Optional[str] = None,
) -> dict[str, str]:
    """Only the provided fields are checked."""
    field_errors = {}
    if name:
        error = validate_name(name)
        if error:
            field_errors["name"] = error
    if phone:
        error = validate_phone(phone)
        if error:
            field_errors["phone"] = error
    if password:
        error = validate_password(password)
        if error:
            field_errors["password"] = error
    return field_errors


def max_catalog_year(now: Optional[datetime] = None) -> int:
    now = now or datetime.now(timezone.utc)
    return now.year + YEAR_MAX_AHEAD


def validate_catalog_fields(
    title: Any,
    genre: Any,
    year: Any,
    rating: Any = None,
    now: Optional[datetime] = None,
) -> dict[str, str]:
    """
    Validate the editable fields of a catalog item.

    title, genre and year are required. year must be an integer in
    [1800, current year + 5]. rating is optional and bounded to [0, 10].
    """
    field_errors = {}

    if not str(title or "").strip():
        field_errors["title"] = "Title is required"
    if not str(genre or "").strip():
        field_errors["genre"] = "Genre is required"

    upper = max_catalog_year(now)
    if year is None or year == "":
        field_errors["year"] = "Year is required"
    elif not _is_integer(year) or not YEAR_MIN <= year <= upper:
        field_errors["year"] = f"Year must be between {YEAR_MIN} and {upper}"

    if rating is not None and (
        not _is_number(rating) or not ITEM_RATING_MIN <= rating <= ITEM_RATING_MAX
    ):
        field_errors["rating"] = f"Rating must be between {ITEM_RATING_MIN} and {ITEM_RATING_MAX}"

    return field_errors


def validate_score(score: Any, required: bool = True) -> Optional[str]:
    """User review scores are whole numbers from 1 to 5."""
    if score is None:
        return "Rating is required" if required else None
    if not _is_integer(score) or not SCORE_MIN <= score <= SCORE_MAX:
        return f"Rating must be between {SCORE_MIN} and {SCORE_MAX}"
    return None


def raise_for_field_errors(field_errors: dict[str, str], message: str = "Validation failed") -> None:
    if field_errors:
        raise ValidationError(message, field_errors=field_errors)


def parse_identifier(value: Optional[str], message: str = "Invalid id format") -> str:
    """
    Normalize a record identifier.

    Raises:
        InvalidIdentifierError: If value is not a UUID
    """
    try:
        return str(uuid.UUID(str(value)))
    except (ValueError, TypeError):
        raise InvalidIdentifierError(message, value=value)

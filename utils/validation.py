from typing import Any, Dict, Tuple

from email_validator import EmailNotValidError, validate_email

TEXT_MIN_LENGTH = 10
TEXT_MAX_LENGTH = 300


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty containers"""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (dict, list, tuple, set)):
        return len(value) == 0
    return False


def is_email(value: Any) -> bool:
    """Syntax-only email check (no DNS lookups)"""
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_post_input(data: Dict[str, Any]) -> Tuple[Dict[str, str], bool]:
    """
    Check a submitted post or comment payload.

    Every rule runs; messages accumulate per field. An empty text reports
    "required" rather than the length message. `email` and `password` are
    only checked when the caller sent them.

    Returns (errors, is_valid).
    """
    errors: Dict[str, str] = {}

    text = data.get("text")
    text = "" if is_empty(text) else str(text)

    if not TEXT_MIN_LENGTH <= len(text) <= TEXT_MAX_LENGTH:
        errors["text"] = f"Post must be between {TEXT_MIN_LENGTH} and {TEXT_MAX_LENGTH} characters"

    if text == "":
        errors["text"] = "Text field is required"

    if data.get("email") is not None and not is_email(data["email"]):
        errors["email"] = "Email is invalid"

    if data.get("password") is not None and is_empty(data["password"]):
        errors["password"] = "Password field is required"

    return errors, is_empty(errors)

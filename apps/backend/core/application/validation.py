"""
Input validation for use case commands.

Validators are pure functions returning a Result. Field-level messages are
accumulated so that a single ValidationError reports every bad field.

The email rule is a pluggable policy: any callable `str -> bool` can be
passed to the use cases in place of `default_email_policy`.
"""

import re
from typing import Any, Callable, Optional

from apps.backend.core.domain import UNSET
from apps.backend.core.application.result import FieldErrors


EmailPolicy = Callable[[str], bool]

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

USERNAME_MAX_LENGTH = 64
TITLE_MAX_LENGTH = 255


def default_email_policy(email: str) -> bool:
    """local@domain.tld with no whitespace and a single @."""
    return bool(_EMAIL.match(email))


def check_required_text(errors: FieldErrors, name: str, value: Any) -> Optional[str]:
    """
    Record an error unless `value` is a non-blank string.

    Returns the stripped value when valid, None otherwise.
    """
    if value is None or value is UNSET:
        errors.add(name, "can't be blank")
        return None
    if not isinstance(value, str):
        errors.add(name, "must be a string")
        return None
    if not value.strip():
        errors.add(name, "can't be blank")
        return None
    return value.strip()


def check_optional_text(errors: FieldErrors, name: str, value: Any) -> Any:
    """Accept UNSET, None or a string; anything else is an error."""
    if value is UNSET or value is None or isinstance(value, str):
        return value
    errors.add(name, "must be a string")
    return UNSET


def check_email(errors: FieldErrors, value: Any, policy: EmailPolicy) -> Optional[str]:
    email = check_required_text(errors, "email", value)
    if email is not None and not policy(email):
        errors.add("email", "is invalid")
        return None
    return email


def check_username(errors: FieldErrors, value: Any) -> Optional[str]:
    username = check_required_text(errors, "username", value)
    if username is None:
        return None
    if any(ch.isspace() for ch in username) or "/" in username:
        errors.add("username", "must not contain whitespace or slashes")
        return None
    if len(username) > USERNAME_MAX_LENGTH:
        errors.add("username", f"is too long (maximum is {USERNAME_MAX_LENGTH} characters)")
        return None
    return username


def check_password(errors: FieldErrors, value: Any) -> Optional[str]:
    # Passwords are not stripped: surrounding spaces are part of the secret.
    if value is None or value is UNSET or value == "":
        errors.add("password", "can't be blank")
        return None
    if not isinstance(value, str):
        errors.add("password", "must be a string")
        return None
    return value


def check_tag_list(errors: FieldErrors, value: Any) -> list[str]:
    if value is None or value is UNSET:
        return []
    if not isinstance(value, (list, tuple)):
        errors.add("tagList", "must be a list of strings")
        return []
    tags = []
    for tag in value:
        if not isinstance(tag, str) or not tag.strip():
            errors.add("tagList", "must contain only non-blank strings")
            return []
        tags.append(tag.strip())
    return tags

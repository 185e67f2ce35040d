import re
from uuid import UUID

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def parse_id(raw: object) -> UUID | None:
    """Parse a path/body identifier. Returns None for anything that isn't a UUID."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except (TypeError, ValueError):
        return None


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def normalize_user_name(user_name: str) -> str:
    return user_name.strip().lower()


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email.strip()))


def is_strong_password(password: str, pattern: str) -> bool:
    return re.fullmatch(pattern, password) is not None

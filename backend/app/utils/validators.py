from typing import Any

from app.core.exceptions import InvalidIdError


def parse_id(value: Any, field: str = "id") -> int:
    """Parse a path identifier; anything but a positive integer is rejected"""
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidIdError(field)
    if parsed <= 0:
        raise InvalidIdError(field)
    return parsed

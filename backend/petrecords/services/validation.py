"""Module: validation."""

from typing import Any


def parse_int(raw: Any) -> int | None:
    """Parse a base-10 integer from form/query input, or return None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def is_valid_age(raw: Any) -> bool:
    # No upper bound; zero and negatives are rejected.
    age = parse_int(raw)
    return age is not None and age > 0


def is_present(raw: Any) -> bool:
    return raw is not None and str(raw).strip() != ""

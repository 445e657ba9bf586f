"""Module: names."""


def split_owner_name(name: str) -> tuple[str, str]:
    """
    Split a free-text owner name into (first_name, last_name).

    The first whitespace-delimited token is the first name and everything
    after it is the last name, so "Mary Ann Smith" becomes
    ("Mary", "Ann Smith"). A single token yields an empty last name.

    Known limitation: multi-word first names ("Mary Ann") are split in the
    wrong place and the original spacing is not preserved, so the transform
    cannot be reversed.
    """
    parts = name.strip().split(None, 1)
    if not parts:
        return "", ""
    first_name = parts[0]
    last_name = parts[1].strip() if len(parts) > 1 else ""
    return first_name, last_name

from typing import Mapping, Sequence


def first_field(row: Mapping[str, str], aliases: Sequence[str]) -> str:
    """Return the first non-blank value among the aliases, stripped."""
    for alias in aliases:
        value = (row.get(alias) or "").strip()
        if value:
            return value
    return ""

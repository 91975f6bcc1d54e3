"""
Shared field validators for form-originated payloads.

HTML forms send every field as a string: an untouched numeric input arrives
as "" and list inputs arrive as "a, b, c". These helpers are used with
`field_validator(..., mode="before")` so that pydantic's own type checks
(numbers, dates) run on the cleaned value and still reject garbage such as
"abc" for a number.
"""

from typing import Any


def blank_to_none(value: Any) -> Any:
    """Map empty or whitespace-only strings to None, leave anything else alone."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def split_comma_list(value: Any) -> Any:
    """
    Accept either a list of strings or a comma separated string.

    "Asthma, Diabetes" -> ["Asthma", "Diabetes"]
    None or ""         -> []
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, list):
        return [
            item.strip() if isinstance(item, str) else item
            for item in value
            if not (isinstance(item, str) and not item.strip())
        ]
    return value

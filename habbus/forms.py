"""
Decoding of dashboard form input into canonical Python values.

Everything that arrives from an HTML form (or from a legacy settings
file) passes through these helpers once, so the rest of the code only
ever sees lists of ID strings, real booleans and integers.
"""

import base64
import re
from typing import Any

CHECKBOX_ON = "on"

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def decode_checkbox(value: Any) -> bool:
    """A checkbox is checked when the browser submits the literal 'on'."""
    return value == CHECKBOX_ON


def as_id_list(value: Any) -> list[str]:
    """
    Normalize a single ID or a sequence of IDs to a list of strings.

    Empty values are dropped, so ``None`` and ``""`` both yield ``[]``.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(item) for item in value if item not in (None, "")]
    value = str(value)
    return [value] if value else []


def parse_int(value: Any, default: int = 0) -> int:
    """
    Parse the leading integer of a form value, falling back to ``default``.

    ``"3.5"`` and ``"3px"`` both read as 3.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else default


def flatten_form(form) -> dict[str, Any]:
    """
    Collapse a Werkzeug MultiDict into a plain dict.

    Keys submitted once map to their single value; keys submitted
    several times (multi-selects) map to a list.
    """
    flat: dict[str, Any] = {}
    for key, values in form.lists():
        flat[key] = values if len(values) > 1 else values[0]
    return flat


def first_value(value: Any) -> Any:
    """Collapse a repeated form value to its first entry."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def avatar_data_uri(content: bytes, mimetype: str) -> str:
    """Encode uploaded image bytes as a data URI."""
    return f"data:{mimetype};base64,{base64.b64encode(content).decode('ascii')}"


def data_uri_bytes(uri: str) -> bytes:
    """Decode the payload of a base64 data URI."""
    if not uri.startswith("data:") or ";base64," not in uri:
        raise ValueError("Not a base64 data URI")
    return base64.b64decode(uri.split(";base64,", 1)[1])

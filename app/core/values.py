from __future__ import annotations

import re
from datetime import date
from typing import Any

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_absent(value: Any) -> bool:
    """None, or a string that is empty once whitespace is stripped."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def stringify(value: Any) -> str:
    # JSON spelling for booleans so "true" matches a submitted true
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_number(value: Any) -> float:
    """Raises ValueError when the value does not read as a number."""
    s = stringify(value).strip()
    if "_" in s:
        # float() would accept digit grouping like "1_000"
        raise ValueError(f"Not a number: {s!r}")
    return float(s)


def parse_iso_date(value: Any) -> date:
    """Strict YYYY-MM-DD. Raises ValueError otherwise."""
    s = stringify(value).strip()
    if not ISO_DATE_RE.match(s):
        raise ValueError(f"Not an ISO date: {s!r}")
    return date.fromisoformat(s)

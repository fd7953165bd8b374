# app/domain/parsing.py
from __future__ import annotations

import re
from typing import Any

from .types import Condition

_INT_RE = re.compile(r"^[+-]?\d+$")


def to_int(x: Any) -> int | None:
    """Strict integer coercion: 12, "12", " 12 " -> 12; 12.5, "12abc", "" -> None."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x
    if isinstance(x, float):
        return int(x) if x.is_integer() else None
    s = str(x).strip()
    if not _INT_RE.match(s):
        return None
    return int(s)


def parse_price(x: Any) -> int | None:
    """
    Currency text -> whole units. Accepts "$1,200", "1200", 1200.
    Returns None for anything negative or unparseable.
    """
    if isinstance(x, str):
        x = x.strip().replace("$", "").replace(",", "")
    v = to_int(x)
    if v is None or v < 0:
        return None
    return v


def parse_max_price(x: Any) -> int | None:
    """
    Price ceiling from request text. Empty or malformed => no ceiling.
    A negative ceiling is kept as-is and filters out every listing.
    """
    if x is None or (isinstance(x, str) and not x.strip()):
        return None
    if isinstance(x, str):
        x = x.strip().replace("$", "").replace(",", "")
    return to_int(x)


def format_price(price: int) -> str:
    return f"${price}"


def to_condition(x: Any) -> Condition | None:
    if isinstance(x, Condition):
        return x
    if x is None:
        return None
    s = str(x).strip()
    for c in Condition:
        if c.value.lower() == s.lower() or c.name == s.lower().replace(" ", "_"):
            return c
    return None


def get_first(payload: dict[str, Any], *keys: str) -> Any:
    """Return first non-empty key from payload."""
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None

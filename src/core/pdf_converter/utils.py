from __future__ import annotations

import hashlib
import os
import re
import time
from datetime import date


SAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def slugify(value: str, max_length: int = 120) -> str:
    normalized = SAFE_FILENAME_RE.sub("-", value.strip())
    normalized = re.sub("-+", "-", normalized)
    normalized = normalized.replace("-.", ".")
    normalized = normalized.strip("-._")
    if not normalized:
        normalized = "file"
    if len(normalized) > max_length:
        normalized = normalized[:max_length]
    return normalized


def generate_run_id(prefix: str = "run") -> str:
    epoch_ms = int(time.time() * 1000)
    random_bits = hashlib.sha256(os.urandom(16)).hexdigest()[:8]
    return f"{prefix}-{epoch_ms}-{random_bits}"


def format_long_date(day: date | None = None) -> str:
    """Format *day* as ``October 19, 2026`` independent of the process locale."""

    day = day or date.today()
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def parse_flag(value: str | None) -> bool:
    """Form toggles are on only for the literal string ``"true"``."""

    return value == "true"


__all__ = ["slugify", "generate_run_id", "format_long_date", "parse_flag"]

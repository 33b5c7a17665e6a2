"""Field formatters for the weather tooltip."""

import re

from weatherbar.config.defaults import CHANCE_NAMES, WEATHER_CODES
from weatherbar.models.widget import HourlyChances

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int | None:
    """Strict decimal integer: optional sign and ASCII digits only, else None."""
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def weather_icon(code: str) -> str:
    """Icon for a weather code, or "" for codes not in the table."""
    return WEATHER_CODES.get(code, "")


def format_time(value: str) -> str:
    """Turn an API hour ("0", "100", ..., "2300") into a 2-digit hour.

    Every "00" is stripped; an empty remainder becomes "24" and a single
    digit is zero-padded, so "0" -> "00", "900" -> "09", "1400" -> "14".
    """
    cleaned = value.replace("00", "")
    if not cleaned:
        return "24"
    if len(cleaned) == 1:
        return "0" + cleaned
    return cleaned


def format_temp(value: str) -> str:
    return f"{value}°".ljust(3)


def format_chances(chances: HourlyChances) -> str:
    """Summarize the non-zero chances, e.g. "Rain 80%, Wind 15%"."""
    conditions = []
    for name, raw in zip(CHANCE_NAMES, chances.values()):
        chance = parse_int(raw)
        if chance is not None and chance > 0:
            conditions.append(f"{name} {raw}%")
    return ", ".join(conditions)

from __future__ import annotations

import json
from typing import Any, Literal, Mapping

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
BOUNDARIES = ("open", "close")
EMPTY_SUMMARY = "N/A"

Boundary = Literal["open", "close"]
DayInterval = dict[str, str]
WeeklyHours = dict[str, DayInterval]


def initialize_empty() -> WeeklyHours:
    """Blank hours for a new bar: the seven weekdays, monday first."""
    return {day: {"open": "", "close": ""} for day in WEEKDAYS}


def hydrate(persisted: Any) -> WeeklyHours:
    """Rebuild hours from a stored record without imposing a schema.

    Keeps exactly the stored days in their stored order. Missing or broken
    fields become "". A missing record gives an empty mapping, not the
    seven blank weekdays from initialize_empty().
    """
    if not isinstance(persisted, Mapping):
        return {}
    hours: WeeklyHours = {}
    for day, interval in persisted.items():
        if not isinstance(interval, Mapping):
            interval = {}
        hours[str(day)] = {
            "open": _as_text(interval.get("open")),
            "close": _as_text(interval.get("close")),
        }
    return hours


def set_boundary(hours: WeeklyHours, day: str, boundary: Boundary, value: str) -> WeeklyHours:
    """Return a copy of ``hours`` with one day's open or close time replaced.

    Other days keep their interval objects as-is; the edited day gets a new
    one, so ``hours`` itself is never mutated. Unknown days are appended.
    """
    if boundary not in BOUNDARIES:
        raise ValueError("Invalid boundary")
    current = hours.get(day) or {}
    updated: WeeklyHours = dict(hours)
    updated[day] = {
        "open": current.get("open", ""),
        "close": current.get("close", ""),
        boundary: value,
    }
    return updated


def format_opening_hours(hours: Mapping[str, Mapping[str, Any]] | None) -> str:
    if hours is None:
        return EMPTY_SUMMARY
    lines = []
    for day, interval in hours.items():
        lines.append(f"{day[:1].upper()}{day[1:]} {interval.get('open', '')}-{interval.get('close', '')}")
    return "\n".join(lines)


def load_opening_hours(raw: str | None) -> WeeklyHours:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return hydrate(data)


def dump_opening_hours(hours: Mapping[str, Mapping[str, Any]] | None) -> str | None:
    if hours is None:
        return None
    return json.dumps(hydrate(hours), ensure_ascii=False)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)

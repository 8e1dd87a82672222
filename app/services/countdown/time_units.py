"""
Time decomposition and unit selection for countdown frames.
"""

from typing import List, NamedTuple

from ...models.countdown import CountdownConfig, UnitBox

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

UNIT_ORDER = ("days", "hours", "minutes", "seconds")


class TimeParts(NamedTuple):
    days: int
    hours: int
    minutes: int
    seconds: int


def decompose(remaining_ms: int) -> TimeParts:
    """
    Split a remaining duration into days, hours, minutes and seconds.

    Negative durations (frames rendered past the target time) clamp to zero.
    Each unit is computed from the full total, so hiding a unit drops it
    rather than folding its magnitude into the next visible one.

    Args:
        remaining_ms: Milliseconds remaining, may be negative

    Returns:
        TimeParts with every field non-negative
    """
    total_seconds = max(0, remaining_ms) // 1000
    return TimeParts(
        days=total_seconds // SECONDS_PER_DAY,
        hours=(total_seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR,
        minutes=(total_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE,
        seconds=total_seconds % SECONDS_PER_MINUTE,
    )


def format_value(value: int) -> str:
    """Zero-pad to two digits; wider values keep every digit."""
    return f"{value:02d}"


def select_units(config: CountdownConfig) -> List[str]:
    """Return the unit keys to render, always in days/hours/minutes/seconds order."""
    units = []
    if config.display_days:
        units.append("days")
    if config.display_hours:
        units.append("hours")
    units.extend(["minutes", "seconds"])
    return units


def build_unit_boxes(config: CountdownConfig, remaining_ms: int, units: List[str] = None) -> List[UnitBox]:
    """
    Build the unit boxes for one frame.

    Args:
        config: Countdown configuration
        remaining_ms: Milliseconds remaining for this frame
        units: Pre-selected unit keys, computed from config when omitted

    Returns:
        One UnitBox per displayed unit, in display order
    """
    if units is None:
        units = select_units(config)
    parts = decompose(remaining_ms)._asdict()
    return [
        UnitBox(key=unit, label=config.label_for(unit), value=parts[unit])
        for unit in units
    ]

"""Compact alarm status — mode glyph, alarm count, last sensor and time.

Runs as two hooks on the same event: ``parse_payload`` decodes the raw
JSON payload into ``event.data``, then ``render`` builds the three-line
text::

    🔒 ( 2 )
    Hall PIR
    14.11.23 22:13
"""

import sys
from datetime import datetime, tzinfo
from typing import Any, Optional

from alarm_widget.config import local_timezone
from alarm_widget.decoder import decode_payload, to_snapshot
from alarm_widget.domain.models import (
    MODE_ARMED,
    MODE_DISARMED,
    MODE_PERIMETER,
    MODE_STRICT,
    WidgetEvent,
)

OFFLINE_GLYPH = "Offline ⁉️"
# Data present but mode outside MODE_GLYPHS; same text as offline
UNRECOGNIZED_MODE_GLYPH = OFFLINE_GLYPH

MODE_GLYPHS = {
    MODE_DISARMED: "🔓",
    MODE_ARMED: "🔒",
    MODE_STRICT: "🔳",
    MODE_PERIMETER: "🏘️",
}

NO_VALUE = "-"
NO_SENSOR = "---"
NO_TIME = "---"
TIME_FORMAT = "%d.%m.%y %H:%M"


def _log(msg: str):
    print(f"[status_v1] {msg}", file=sys.stderr)


def parse_payload(event: WidgetEvent) -> None:
    """Decode ``event.payload`` into ``event.data``; empty payload leaves it unset."""
    data = decode_payload(event.payload)
    if data is not None:
        event.data = data


def mode_glyph(mode: Any) -> str:
    glyph = MODE_GLYPHS.get(mode) if mode is not None else None
    if glyph is None:
        _log(f"unrecognized mode {mode!r}, rendering as offline")
        return UNRECOGNIZED_MODE_GLYPH
    return glyph


def format_alarms(alarms: Any) -> str:
    if alarms is None:
        return NO_VALUE
    if isinstance(alarms, float) and alarms.is_integer():
        return str(int(alarms))
    return str(alarms)


def format_sensor(sensor: Optional[str]) -> str:
    if sensor is None:
        return NO_VALUE
    return sensor or NO_SENSOR


def format_event_time(unixtime: Optional[float], tz: Optional[tzinfo] = None) -> str:
    """Format a unix timestamp as ``DD.MM.YY HH:MM`` in ``tz`` (host local if None)."""
    if unixtime is None or unixtime <= 0:
        return NO_TIME
    try:
        return datetime.fromtimestamp(unixtime, tz).strftime(TIME_FORMAT)
    except (ValueError, OverflowError, OSError):
        _log(f"unrepresentable event time {unixtime!r}")
        return NO_TIME


def render(event: WidgetEvent, tz: Optional[tzinfo] = None) -> None:
    """Write the three-line status into ``event.text``.

    Without ``tz`` the configured timezone is used, or host local time
    when none is configured or the name is unknown.
    """
    glyph = OFFLINE_GLYPH
    alarms = NO_VALUE
    sensor = NO_VALUE
    when = NO_TIME

    if event.data is not None:
        snapshot = to_snapshot(event.data)
        if tz is None:
            tz = local_timezone()
        glyph = mode_glyph(snapshot.mode)
        alarms = format_alarms(snapshot.alarms)
        sensor = format_sensor(snapshot.event_sensor)
        when = format_event_time(snapshot.event_unixtime, tz)

    event.text = f"{glyph} ( {alarms} )\n{sensor}\n{when}"

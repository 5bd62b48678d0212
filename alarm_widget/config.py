"""Runtime configuration for the widget transforms."""

import os
import sys
from datetime import tzinfo
from typing import Optional

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _log(msg: str):
    print(msg, file=sys.stderr)


CONFIG = {
    # Empty -> host local timezone
    "timezone": os.getenv("ALARM_WIDGET_TZ", ""),
    "language": os.getenv("ALARM_WIDGET_LANG", "en"),
    "palette": {
        "offline": "#696969",
        "quiet": "#9ACD32",
        "armed": "#FFFF00",
        "alarm": "#FF0000",
    },
}

MESSAGES = {
    "en": {
        "offline": "Device is off or unavailable",
        "no_events": "No events",
    },
    "ru": {
        "offline": "Устройство выключено или не доступно",
        "no_events": "Нет событий",
    },
}


def resolve_timezone(name: Optional[str] = None) -> Optional[tzinfo]:
    """Return the configured zone, or None for the host local zone."""
    if name is None:
        name = CONFIG.get("timezone", "")
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, KeyError, ValueError):
        raise ValueError(f"Unknown timezone: {name!r}")


def local_timezone() -> Optional[tzinfo]:
    """Configured zone for rendering; an unknown name falls back to host local."""
    try:
        return resolve_timezone()
    except ValueError as e:
        _log(f"[config] {e}, using host local timezone")
        return None


def message(key: str) -> str:
    """Look up a display message in the configured language (falls back to en)."""
    table = MESSAGES.get(CONFIG.get("language", "en"), MESSAGES["en"])
    return table[key]

"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

# Panel operating modes
MODE_DISARMED = 0
MODE_ARMED = 1
MODE_STRICT = 2
MODE_PERIMETER = 3

# Host wire keys for the render outputs
_WIRE_KEYS = ("payload", "data", "text", "textColor", "blink")


@dataclass
class WidgetEvent:
    """Mutable event handed to a transform by the dashboard engine."""

    payload: str = ""
    data: Any = None  # None -> unset
    text: str = ""
    text_color: Optional[str] = None  # e.g. "#FF0000"
    blink: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "WidgetEvent":
        payload = raw.get("payload", "")
        return cls(
            payload="" if payload is None else str(payload),
            data=raw.get("data"),
            text=str(raw.get("text", "")),
            text_color=raw.get("textColor"),
            blink=raw.get("blink"),
            extra={k: v for k, v in raw.items() if k not in _WIRE_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.extra)
        out["payload"] = self.payload
        if self.data is not None:
            out["data"] = self.data
        out["text"] = self.text
        if self.text_color is not None:
            out["textColor"] = self.text_color
        if self.blink is not None:
            out["blink"] = self.blink
        return out


@dataclass
class EventDetail:
    """Last event recorded by the panel."""

    sensor: str
    time_short: str


@dataclass
class PanelSnapshot:
    """Alarm-state record as rendered by the compact status line.

    Every field is optional: the compact formatter substitutes
    placeholders rather than failing on a partial record.
    """

    mode: Optional[Union[int, float]] = None
    alarms: Any = None  # displayed verbatim
    event_sensor: Optional[str] = None
    event_unixtime: Optional[float] = None

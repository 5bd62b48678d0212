"""Alarm Widget — status transforms for an alarm-panel dashboard widget."""

from alarm_widget.config import CONFIG
from alarm_widget.domain.models import WidgetEvent, PanelSnapshot, EventDetail
from alarm_widget.errors import WidgetError, PayloadDecodeError, FieldAccessError
from alarm_widget.decoder import decode_payload, StatusRecord
from alarm_widget.formatters import status_v1, status_v2

__all__ = [
    "CONFIG",
    "WidgetEvent",
    "PanelSnapshot",
    "EventDetail",
    "WidgetError",
    "PayloadDecodeError",
    "FieldAccessError",
    "decode_payload",
    "StatusRecord",
    "status_v1",
    "status_v2",
]

"""Extended alarm status — status text, last event and urgency colour."""

from alarm_widget.config import CONFIG, message
from alarm_widget.decoder import StatusRecord
from alarm_widget.domain.models import MODE_DISARMED, WidgetEvent


def render(event: WidgetEvent) -> None:
    """Write text, colour and blink hint into ``event``.

    Raises FieldAccessError when ``event.data`` lacks a field that the
    branch being evaluated needs.
    """
    palette = CONFIG["palette"]

    if event.data is None:
        event.text = message("offline")
        event.text_color = palette["offline"]
        event.blink = False
        return

    record = StatusRecord(event.data)

    last = record.last_event
    if last is not None:
        details = f"{last.sensor}\n{last.time_short}"
    else:
        details = f"{message('no_events')}\n---"
    event.text = f"{record.status}\n{details}"

    if record.mode == MODE_DISARMED:
        # Disarmed: only zones that are alarming right now count
        alarming = record.annunciator_summary > 0
        idle_color = palette["quiet"]
    else:
        # Armed: any alarm since arming, or an active zone
        alarming = record.alarms > 0 or record.annunciator_summary > 0
        idle_color = palette["armed"]

    event.text_color = palette["alarm"] if alarming else idle_color
    event.blink = alarming

"""Widget transforms, keyed by the version a host asks for."""

from typing import Callable, Dict

from alarm_widget.domain.models import WidgetEvent
from alarm_widget.formatters import status_v1, status_v2


def run_v1(event: WidgetEvent):
    """Decode the payload, then render; both compact-status hooks in order."""
    status_v1.parse_payload(event)
    status_v1.render(event)


TRANSFORMS: Dict[str, Callable[[WidgetEvent], None]] = {
    "v1": run_v1,
    "v2": status_v2.render,
}

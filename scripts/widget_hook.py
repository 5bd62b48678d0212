"""Dashboard hook — transform one event read from stdin.

Usage: python scripts/widget_hook.py v1|v2 < event.json
"""

import json
import sys

from alarm_widget.formatters import TRANSFORMS
from alarm_widget.domain.models import WidgetEvent
from alarm_widget.errors import WidgetError


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1 or argv[0] not in TRANSFORMS:
        print(f"Usage: widget_hook.py {'|'.join(TRANSFORMS)}", file=sys.stderr)
        return 2

    try:
        raw = json.load(sys.stdin)
        if not isinstance(raw, dict):
            raise ValueError("event must be a JSON object")
        event = WidgetEvent.from_dict(raw)
        TRANSFORMS[argv[0]](event)
    except (ValueError, WidgetError) as e:
        print(f"Widget hook {argv[0]} failed: {e}", file=sys.stderr)
        return 1

    json.dump(event.to_dict(), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    print(f"Widget hook {argv[0]}: {event.text.splitlines()[0]}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Payload decoding and typed field access for alarm-state records.

Both formatters read the same JSON document published by the panel, but
with different tolerance: the compact formatter treats every field as
optional, while the extended formatter requires the fields it reads and
reports the first one that is missing or malformed as a
``FieldAccessError`` carrying the dotted field path.
"""

import json
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from alarm_widget.domain.models import EventDetail, PanelSnapshot
from alarm_widget.errors import FieldAccessError, PayloadDecodeError

_Types = Union[Type, Tuple[Type, ...]]

# bool is an int subclass; never accept it where a number is expected
_NUMBER = (int, float)


def decode_payload(payload: str) -> Optional[Dict[str, Any]]:
    """Decode a JSON payload into a record.

    Returns None for an empty payload or a JSON ``null``. Raises
    PayloadDecodeError on invalid JSON or a non-object document.
    """
    if payload == "":
        return None
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise PayloadDecodeError(f"Invalid JSON payload: {e.msg}", position=e.pos) from e
    if data is None:
        return None
    if not isinstance(data, dict):
        raise PayloadDecodeError(
            f"Payload must be a JSON object, got {type(data).__name__}"
        )
    return data


def _matches(value: Any, types: _Types) -> bool:
    if isinstance(value, bool) and bool not in _as_tuple(types):
        return False
    return isinstance(value, types)


def _as_tuple(types: _Types) -> tuple:
    return types if isinstance(types, tuple) else (types,)


def optional_field(record: Mapping[str, Any], key: str, types: _Types) -> Any:
    """Return ``record[key]`` if present with the right type, else None."""
    value = record.get(key)
    if value is None or not _matches(value, types):
        return None
    return value


def require_field(record: Any, path: str, types: _Types) -> Any:
    """Return the value at a dotted ``path`` or raise FieldAccessError."""
    current = record
    walked = []
    for key in path.split("."):
        walked.append(key)
        if not isinstance(current, Mapping):
            raise FieldAccessError(".".join(walked[:-1]) or "data", "not an object")
        if key not in current or current[key] is None:
            raise FieldAccessError(".".join(walked))
        current = current[key]
    if not _matches(current, types):
        expected = "/".join(t.__name__ for t in _as_tuple(types))
        raise FieldAccessError(path, f"expected {expected}, got {type(current).__name__}")
    return current


def to_snapshot(data: Any) -> PanelSnapshot:
    """Build the lenient compact-status record."""
    if not isinstance(data, Mapping):
        return PanelSnapshot()
    return PanelSnapshot(
        mode=optional_field(data, "mode", _NUMBER),
        alarms=data.get("alarms"),
        event_sensor=optional_field(data, "event_sensor", str),
        event_unixtime=optional_field(data, "event_unixtime", _NUMBER),
    )


class StatusRecord:
    """Typed accessors over the extended status document.

    Fields are validated when read, so a formatter that never reads a
    field never fails on it.
    """

    def __init__(self, data: Any):
        if not isinstance(data, Mapping):
            raise FieldAccessError("data", "not an object")
        self._data = data

    @property
    def status(self) -> str:
        return require_field(self._data, "status", str)

    @property
    def mode(self) -> Union[int, float]:
        return require_field(self._data, "mode", _NUMBER)

    @property
    def alarms(self) -> Union[int, float]:
        return require_field(self._data, "alarms", _NUMBER)

    @property
    def annunciator_summary(self) -> Union[int, float]:
        return require_field(self._data, "annunciator.summary", _NUMBER)

    @property
    def last_event(self) -> Optional[EventDetail]:
        """Last event, or None when the panel has not recorded one."""
        raw = self._data.get("event")
        if not raw:
            return None
        return EventDetail(
            sensor=require_field(self._data, "event.sensor", str),
            time_short=require_field(self._data, "event.time_short", str),
        )

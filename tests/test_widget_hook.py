"""Tests for the stdin/stdout dashboard hook script."""

import io
import json
import os

import importlib.util

spec = importlib.util.spec_from_file_location(
    "widget_hook",
    os.path.join(os.path.dirname(os.path.dirname(__file__)), "scripts", "widget_hook.py"),
)
widget_hook = importlib.util.module_from_spec(spec)
spec.loader.exec_module(widget_hook)


def _run(monkeypatch, argv, stdin: str) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    return widget_hook.main(argv)


class TestWidgetHook:
    def test_v2_round_trip(self, monkeypatch, capsys):
        event = {
            "data": {
                "status": "Disarmed",
                "mode": 0,
                "alarms": 0,
                "annunciator": {"summary": 2},
            }
        }
        assert _run(monkeypatch, ["v2"], json.dumps(event)) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["textColor"] == "#FF0000"
        assert out["blink"] is True
        assert out["text"].startswith("Disarmed\n")

    def test_v1_empty_payload(self, monkeypatch, capsys):
        assert _run(monkeypatch, ["v1"], '{"payload": ""}') == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)["text"] == "Offline ⁉️ ( - )\n-\n---"
        assert "Widget hook v1" in captured.err

    def test_v1_bad_payload_fails(self, monkeypatch, capsys):
        assert _run(monkeypatch, ["v1"], '{"payload": "{oops"}') == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "failed" in captured.err

    def test_v2_missing_field_fails(self, monkeypatch, capsys):
        assert _run(monkeypatch, ["v2"], '{"data": {"mode": 1}}') == 1
        assert "failed" in capsys.readouterr().err

    def test_invalid_stdin_fails(self, monkeypatch, capsys):
        assert _run(monkeypatch, ["v2"], "not json") == 1

    def test_usage(self, monkeypatch, capsys):
        assert _run(monkeypatch, [], "{}") == 2
        assert "Usage" in capsys.readouterr().err

    def test_uses_shared_transform_table(self):
        from alarm_widget.formatters import TRANSFORMS

        assert widget_hook.TRANSFORMS is TRANSFORMS
        assert not hasattr(widget_hook, "app")

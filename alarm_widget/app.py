"""FastAPI app — runs a widget transform on an event posted by the host."""

import sys
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from alarm_widget.domain.models import WidgetEvent
from alarm_widget.errors import FieldAccessError, PayloadDecodeError
from alarm_widget.formatters import TRANSFORMS


def _log(msg: str):
    print(msg, file=sys.stderr)


app = FastAPI(title="Alarm Widget")


@app.exception_handler(PayloadDecodeError)
async def _payload_decode_error(request: Request, exc: PayloadDecodeError):
    _log(f"[app] {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": "payload_decode"},
    )


@app.exception_handler(FieldAccessError)
async def _field_access_error(request: Request, exc: FieldAccessError):
    _log(f"[app] {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": "field_access", "field": exc.path},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/widgets/{version}")
async def transform_event(version: str, request: Request) -> Dict[str, Any]:
    """Apply the named transform and return the mutated event."""
    transform = TRANSFORMS.get(version)
    if transform is None:
        raise HTTPException(status_code=404, detail=f"Unknown widget version: {version}")

    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Event must be a JSON object")

    event = WidgetEvent.from_dict(body)
    transform(event)
    return event.to_dict()

# quickfetch/api/echo.py
from __future__ import annotations

import json
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..core.logging import get_logger
from ..core.schemas import EchoInfoResp, EchoResp, ErrorResp

log = get_logger(__name__)
router = APIRouter(prefix="/api/echo", tags=["echo"])

ECHO_OK_MESSAGE = "Echo API endpoint working!"
ECHO_INFO_MESSAGE = "Echo API is running! Send a POST request with JSON data."


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@router.get("", response_model=EchoInfoResp)
async def echo_info():
    return EchoInfoResp(message=ECHO_INFO_MESSAGE, timestamp=now_iso())


@router.post("", response_model=EchoResp, responses={400: {"model": ErrorResp}})
async def echo(request: Request):
    raw = await request.body()
    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        log.info("[echo] rejected body bytes=%d: %s", len(raw), e)
        return JSONResponse(ErrorResp(error="Invalid JSON in request body").model_dump(), status_code=400)
    return EchoResp(message=ECHO_OK_MESSAGE, timestamp=now_iso(), data=body)

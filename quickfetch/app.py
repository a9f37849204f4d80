# quickfetch/app.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.logging import get_logger, setup_logging

setup_logging()
log = get_logger(__name__)

_ENV_PATH = Path(__file__).resolve().parent / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=False)
log.info(f"[env] .env path={_ENV_PATH} exists={_ENV_PATH.exists()}")

from .api.echo import router as echo_router
from .api.health import router as health_router
from .api.posts import router as posts_router
from .api.settings import router as settings_router
from .core import request_ctx
from .core.http import close_client

app = FastAPI(title="QuickFetch")

origins = [
    o.strip() for o in os.getenv("APP_CORS_ORIGIN", "http://localhost:5173").split(",") if o.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(echo_router)
app.include_router(settings_router)
app.include_router(posts_router)


def _dump_routes() -> None:
    log.info("==== ROUTES (app) ====")
    for r in app.routes:
        methods = sorted(list(getattr(r, "methods", []) or []))
        log.info("[APP] %-12s %s type=%s", ",".join(methods), getattr(r, "path", ""), type(r).__name__)
    log.info("==== ROUTES END ====")


_dump_routes()


@app.on_event("shutdown")
async def _shutdown():
    await close_client()
    log.info("[http] shared client closed")


@app.middleware("http")
async def _capture_request_id(request: Request, call_next):
    request_ctx.set_x_id((request.headers.get("x-id") or "").strip())
    return await call_next(request)

# quickfetch/core/logging.py
from __future__ import annotations

import logging
import sys

from . import request_ctx


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.xid = (request_ctx.get_x_id() or "").strip() or "-"
        return True


def _default_formatter() -> logging.Formatter:
    fmt = "%(asctime)s %(levelname)s %(name)s xid=%(xid)s: %(message)s"
    return logging.Formatter(fmt)


def setup_logging(level: int = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    # ensure a single stdout handler exists (uvicorn may add one)
    stream = None
    for h in root.handlers:
        if isinstance(h, logging.StreamHandler):
            stream = h
            break
    if stream is None:
        stream = logging.StreamHandler(sys.stdout)
        root.addHandler(stream)

    stream.setFormatter(_default_formatter())
    if not any(isinstance(f, ContextFilter) for f in stream.filters):
        stream.addFilter(ContextFilter())

    # keep uvicorn loggers at same level so our logs aren't hidden
    logging.getLogger("uvicorn").setLevel(level)
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    lg = logging.getLogger(name or __name__)
    lg.propagate = True
    lg.setLevel(logging.NOTSET)
    return lg

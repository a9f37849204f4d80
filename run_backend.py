from __future__ import annotations

import contextlib
import os
import socket
import sys

import uvicorn

PREF_API = (8000, 8001)
API_RANGE = (10240, 11240)
BIND_HOST = os.getenv("QUICKFETCH_HOST", "127.0.0.1")


def _free(p: int) -> bool:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            s.bind((BIND_HOST, p))
            return True
        except OSError:
            return False


def choose_port() -> int:
    env_port = os.getenv("QUICKFETCH_PORT")
    if env_port:
        return int(env_port)
    print(f"[boot] choose_port prefer={PREF_API} fallback_range={API_RANGE}", flush=True)
    for p in PREF_API:
        if _free(p):
            return p
    for p in range(*API_RANGE):
        if _free(p):
            return p
    raise RuntimeError("no free port available")


def main() -> int:
    port = choose_port()
    print(f"[boot] python={sys.executable} host={BIND_HOST} port={port}", flush=True)
    uvicorn.run("quickfetch.app:app", host=BIND_HOST, port=port, log_level="info")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# quickfetch/core/files.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from ..core.logging import get_logger

log = get_logger(__name__)

DATA_DIR = Path.home() / ".quickfetch"


def defaults_settings_file() -> Path | None:
    p = os.getenv("QUICKFETCH_DEFAULTS_PATH")
    return Path(p) if p else None


def overrides_settings_file() -> Path:
    return Path(os.getenv("QUICKFETCH_OVERRIDES_PATH", str(DATA_DIR / "override_settings.json")))


def load_json_file(path: Path | None, default: Any = None) -> Any:
    try:
        if path is not None and path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("[files] could not read %s: %r", path, e)
    return {} if default is None else default


def save_json_file(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

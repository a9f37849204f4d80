from __future__ import annotations

import json
from threading import RLock
from typing import Any

from ..core.logging import get_logger
from .files import (
    defaults_settings_file,
    load_json_file,
    overrides_settings_file,
    save_json_file,
)

log = get_logger(__name__)

BUILTIN_DEFAULTS: dict[str, Any] = {
    "post_source_url": "https://jsonplaceholder.typicode.com/posts",
    "post_cache_enabled": True,
    "post_cache_ttl_sec": 3600,
    "http_timeout_sec": 10.0,
    "http_user_agent": "QuickFetch/0.1",
}


def _deep_merge(dst: dict[str, Any], src: dict[str, Any]) -> dict[str, Any]:
    out = dict(dst)
    for k, v in (src or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class _SettingsManager:
    def __init__(self) -> None:
        self._lock = RLock()
        self._defaults: dict[str, Any] = self._load_defaults()
        self._overrides: dict[str, Any] = self._load_overrides()
        log.info("[settings] init: defaults=%d keys, overrides=%d keys",
                 len(self._defaults), len(self._overrides))

    # ----- I/O -----
    def _load_defaults(self) -> dict[str, Any]:
        return _deep_merge(BUILTIN_DEFAULTS, load_json_file(defaults_settings_file(), default={}))

    def _load_overrides(self) -> dict[str, Any]:
        return load_json_file(overrides_settings_file(), default={})

    def _save_overrides_unlocked(self) -> None:
        save_json_file(overrides_settings_file(), self._overrides)

    def reload(self) -> None:
        with self._lock:
            self._defaults = self._load_defaults()
            self._overrides = self._load_overrides()
            log.info("[settings.reload] defaults=%d keys, overrides=%d keys",
                     len(self._defaults), len(self._overrides))

    # ----- Effective -----
    def _effective_unlocked(self) -> dict[str, Any]:
        return _deep_merge(self._defaults, self._overrides)

    def _get_unlocked(self, key: str, default: Any = None) -> Any:
        eff = self._effective_unlocked()
        if key in eff:
            return eff[key]
        if default is not None:
            return default
        raise KeyError(f"_SettingsManager has no key '{key}'")

    # ----- Public API -----
    @property
    def defaults(self) -> dict[str, Any]:
        with self._lock:
            return json.loads(json.dumps(self._defaults))

    @property
    def overrides(self) -> dict[str, Any]:
        with self._lock:
            return json.loads(json.dumps(self._overrides))

    def effective(self) -> dict[str, Any]:
        with self._lock:
            return self._effective_unlocked()

    def __getitem__(self, key: str) -> Any:
        with self._lock:
            return self._get_unlocked(key)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            try:
                return self._get_unlocked(key, default=default)
            except KeyError:
                return default

    # ----- Mutations -----
    def patch_overrides(self, patch: dict[str, Any]) -> None:
        def merge_delete(dst: dict, src: dict) -> dict:
            out = dict(dst)
            for k, v in (src or {}).items():
                if v is None:
                    out.pop(k, None)
                elif isinstance(v, dict) and isinstance(out.get(k), dict):
                    out[k] = merge_delete(out[k], v)
                else:
                    out[k] = v
            return out

        if not isinstance(patch, dict):
            return
        with self._lock:
            log.info("[settings.patch] incoming keys=%s", list(patch.keys()))
            self._overrides = merge_delete(self._overrides, patch)
            self._save_overrides_unlocked()
            log.info("[settings.patch] now overrides keys=%s", list(self._overrides.keys()))


SETTINGS = _SettingsManager()

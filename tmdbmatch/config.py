# tmdbmatch/config.py
from __future__ import annotations

import os
from typing import Any, Dict

BASE_TMDB_URL = "https://www.themoviedb.org/"
API_BASE = "https://api.themoviedb.org/3"
PROVIDER_NAME = "TheMovieDb"

# Search results further than this many years away from the query are not "close"
MAX_YEAR_DIFFERENCE = 3


def _as_bool(v: Any, default: bool = False) -> bool:
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    s = str(v).strip().lower()
    return s in ("1", "true", "yes", "y", "on")


def _as_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _as_lang(v: Any, default: str) -> str:
    s = str(v or "").strip()
    return s or default


class Config:
    """
    Settings holder that can be constructed from environment variables.
    - Attribute access: cfg.key
    - Mapping access:   cfg["key"], cfg.get("key", default)
    """

    _DEFAULTS: Dict[str, Any] = {
        "max_year_difference": MAX_YEAR_DIFFERENCE,
        "fallback_language": "en",
        "debug": False,
    }

    # Mapping of ENV -> internal key
    _ENV_MAP: Dict[str, str] = {
        "TMDB_MAX_YEAR_DIFFERENCE": "max_year_difference",
        "TMDB_FALLBACK_LANGUAGE": "fallback_language",
        "TMDBMATCH_DEBUG": "debug",
    }

    _CASTERS: Dict[str, Any] = {
        "max_year_difference": _as_int,
        "fallback_language": _as_lang,
        "debug": _as_bool,
    }

    def __init__(self, data: Dict[str, Any] | None = None):
        merged = dict(self._DEFAULTS)
        merged.update(data or {})
        for k, caster in self._CASTERS.items():
            if k in merged:
                merged[k] = caster(merged[k], self._DEFAULTS.get(k))
        self._d = merged

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build Config from process environment (plus defaults).
        Only whitelisted env vars are read via _ENV_MAP.
        """
        data: Dict[str, Any] = {}
        for env_key, cfg_key in cls._ENV_MAP.items():
            if env_key in os.environ:
                data[cfg_key] = os.environ[env_key]
        return cls(data)

    # --- dict-like API ---

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._d)

    def get(self, key: str, default: Any = None) -> Any:
        return self._d.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._d[key]

    def __contains__(self, key: str) -> bool:
        return key in self._d

    # --- attribute API ---

    def __getattr__(self, key: str) -> Any:
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._d[key]
        except KeyError as e:
            raise AttributeError(key) from e

    def __repr__(self) -> str:
        return f"Config({self._d!r})"

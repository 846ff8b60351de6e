# tmdbmatch/logging_utils.py
from __future__ import annotations
import sys
from typing import Any, Optional

from rich import print as rprint
from rich.markup import escape

from .config import Config


def breadcrumb(tag: str, cfg: Optional[Config] = None, **kv: Any) -> None:
    """Concise stderr breadcrumb, printed only when debug is on."""
    cfg = cfg if cfg is not None else Config.from_env()
    if not cfg.debug:
        return
    parts = " ".join(f"{k}={v!r}" for k, v in kv.items() if v is not None)
    rprint(f"[cyan]\\[{tag}][/cyan] {escape(parts)}".rstrip(), file=sys.stderr)

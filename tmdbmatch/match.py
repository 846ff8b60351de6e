# tmdbmatch/match.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import Config
from .logging_utils import breadcrumb
from .util.text import equals_ignore_case, parse_date, parse_year, remove_invalid_file_characters

_TITLE_MEDIA_TYPES = ("movie", "tv")


@dataclass(frozen=True)
class Candidate:
    """One TMDb search result, movie or TV, reduced to the fields matching needs."""
    display_name: Optional[str] = None
    original_name: Optional[str] = None
    release_year: Optional[int] = None
    tmdb_id: Optional[int] = None
    media_type: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_result(cls, r: Dict[str, Any], media_type: Optional[str] = None) -> "Candidate":
        """
        Build from a raw search result. Movie results carry title/original_title/release_date,
        TV results name/original_name/first_air_date; multi-search results say which via media_type.
        """
        media_type = media_type or r.get("media_type")
        if media_type is None:
            media_type = "tv" if ("name" in r or "first_air_date" in r) and "title" not in r else "movie"
        if media_type == "tv":
            title, original, when = r.get("name"), r.get("original_name"), r.get("first_air_date")
        else:
            title, original, when = r.get("title"), r.get("original_title"), r.get("release_date")
        d = parse_date(when) if isinstance(when, str) else None
        return cls(
            display_name=title,
            original_name=original,
            release_year=d.year if d else parse_year(when),
            tmdb_id=r.get("id"),
            media_type=media_type,
            raw=r,
        )


def candidates_from_results(results: Iterable[Any], media_type: Optional[str] = None) -> List[Candidate]:
    # multi-search also returns people and collections; only titles can match
    cands = (Candidate.from_result(r, media_type) for r in (results or []) if isinstance(r, dict))
    return [c for c in cands if c.media_type in _TITLE_MEDIA_TYPES]


def _is_near_exact(c: Candidate, name: str) -> bool:
    return (
        equals_ignore_case(remove_invalid_file_characters(c.display_name), name)
        or equals_ignore_case(remove_invalid_file_characters(c.original_name), name)
    )


def _is_close_year(c: Candidate, year: int, max_diff: int) -> bool:
    return c.release_year is not None and abs(c.release_year - year) < max_diff


def get_best_match(
    name: str,
    year: Optional[int],
    results: Sequence[Candidate],
    cfg: Optional[Config] = None,
) -> Optional[Candidate]:
    """
    Pick the result that best fits the searched name and year.

    TMDb search ranking is not always right: partial matches can come back
    ahead of an exact one, and an older production with the same title can
    outrank the intended year (searching "Hercules" 2014 gives the 1997 film
    first). Each filter only narrows when something survives it, so the
    provider's order stays the final tie-break.
    """
    cfg = cfg if cfg is not None else Config.from_env()
    filtered: List[Candidate] = list(results or [])

    near_exact = [c for c in filtered if _is_near_exact(c, name)]
    breadcrumb("match", cfg, stage="exact", name=name, total=len(filtered), kept=len(near_exact))
    if near_exact:
        filtered = near_exact

    if year and year > 0:
        close = [c for c in filtered if _is_close_year(c, year, cfg.max_year_difference)]
        breadcrumb("match", cfg, stage="year", year=year, total=len(filtered), kept=len(close))
        if close:
            filtered = close

    best = filtered[0] if filtered else None
    breadcrumb("match", cfg, stage="pick", result=best.display_name if best else None)
    return best


def best_match_result(
    name: str,
    year: Optional[int],
    results: Iterable[Any],
    media_type: Optional[str] = None,
    cfg: Optional[Config] = None,
) -> Optional[Dict[str, Any]]:
    """Run get_best_match over raw TMDb result dicts and hand back the chosen dict."""
    best = get_best_match(name, year, candidates_from_results(results, media_type), cfg)
    return best.raw if best is not None else None

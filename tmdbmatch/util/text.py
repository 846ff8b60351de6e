from __future__ import annotations
import re
from datetime import date, datetime
from typing import Any, Optional

_NON_WORDS = re.compile(r"[\W_]+")
_FILE_SYSTEM_INVALID = re.compile(r'[<>:;?*\\/"]')


def clean_name(name: Optional[str]) -> str:
    # TMDb expects a space separated list of words
    if not name:
        return ""
    return _NON_WORDS.sub(" ", name)


def remove_invalid_file_characters(name: Optional[str]) -> Optional[str]:
    """Strip characters that are invalid in file names so search result names compare like folder names."""
    if name is None:
        return None
    return _FILE_SYSTEM_INVALID.sub("", name)


def fold_case(s: str) -> str:
    """
    Upper-case one character at a time, leaving characters whose upper case
    is more than one character ("ß" -> "SS") as they are. Two strings with
    the same fold compare equal ordinally ignoring case, independent of locale.
    """
    return "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in s)


def equals_ignore_case(a: Optional[str], b: Optional[str]) -> bool:
    if a is None or b is None:
        return a is b
    return fold_case(a) == fold_case(b)


def contains_ignore_case(haystack: Optional[str], needle: str) -> bool:
    return fold_case(needle) in fold_case(haystack or "")


def startswith_ignore_case(s: Optional[str], prefix: str) -> bool:
    return fold_case(s or "").startswith(fold_case(prefix))


def parse_year(s: Any) -> Optional[int]:
    if isinstance(s, (date, datetime)):
        return s.year
    if not s or not isinstance(s, str):
        return None
    s = s.strip()
    if len(s) >= 4 and s[:4].isdigit():
        y = int(s[:4])
        if 1870 <= y <= 2100:
            return y
    return None


def parse_date(s: Optional[str]) -> Optional[date]:
    if not s:
        return None
    s = s.strip().split("T", 1)[0]
    for fmt in ("%Y-%m-%d", "%m/%d/%Y", "%d/%m/%Y", "%Y/%m/%d"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None

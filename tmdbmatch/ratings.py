# tmdbmatch/ratings.py
from __future__ import annotations
import re
from typing import Optional

from .util.text import equals_ignore_case

# Germany's rating board labels its certificates FSK
_GERMAN_PREFIX = re.compile(r"^DE-", re.IGNORECASE)


def build_parental_rating(country_code: Optional[str], rating_value: Optional[str]) -> str:
    """
    Combine a country code and a TMDb certification into the stored rating.

    US ratings are stored bare ("TV-14"); every other country is prefixed
    ("GB-15"), with German ones relabelled ("FSK-16").
    """
    prefix = "" if equals_ignore_case(country_code or "", "US") else f"{country_code or ''}-"
    return _GERMAN_PREFIX.sub("FSK-", prefix + (rating_value or ""), count=1)

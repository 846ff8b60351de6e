# tmdbmatch/language.py
from __future__ import annotations
from typing import List, Optional

from .config import Config
from .util.text import equals_ignore_case, fold_case, startswith_ignore_case

# TMDb has no Swiss localizations (de-CH, it-CH, fr-CH); those fall back to the bare language
_UNSUPPORTED_REGIONS = {"ch"}


def normalize_language(language: Optional[str]) -> Optional[str]:
    """
    Normalize a language tag for TMDb's `language` parameter.

    TMDb wants everything after the hyphen upper-cased ("en-us" -> "en-US").
    Unsupported regions are dropped ("de-ch" -> "de"). Tags without exactly
    one hyphen are returned as given.
    """
    if not language:
        return language
    parts = language.split("-")
    if len(parts) == 2:
        base, region = parts
        if any(equals_ignore_case(region, r) for r in _UNSUPPORTED_REGIONS):
            return base
        return f"{base}-{fold_case(region)}"
    return language


def get_image_languages_param(preferred_language: Optional[str], cfg: Optional[Config] = None) -> str:
    """
    Build TMDb's `include_image_language` value.

    Order: preferred tag, its 2-letter base for "xx-YY" tags, "null" (images
    without a language), then the fallback language unless it is already the
    preferred one.
    """
    cfg = cfg if cfg is not None else Config.from_env()
    languages: List[str] = []

    if preferred_language:
        preferred_language = normalize_language(preferred_language)
        languages.append(preferred_language)
        if len(preferred_language) == 5:
            # TMDb only matches 2-letter codes on images for now
            languages.append(preferred_language[:2])

    languages.append("null")

    fallback = cfg.fallback_language
    if not equals_ignore_case(preferred_language or "", fallback):
        languages.append(fallback)

    return ",".join(languages)


def adjust_image_language(image_language: Optional[str], request_language: Optional[str]) -> Optional[str]:
    """Widen a 2-letter image language to the requested 5-letter tag when they agree ("en" + "en-US" -> "en-US")."""
    if (
        image_language
        and request_language
        and len(request_language) > 2
        and len(image_language) == 2
        and startswith_ignore_case(request_language, image_language)
    ):
        return request_language
    return image_language

from __future__ import annotations

from .config import API_BASE, BASE_TMDB_URL, MAX_YEAR_DIFFERENCE, PROVIDER_NAME, Config
from .language import adjust_image_language, get_image_languages_param, normalize_language
from .match import Candidate, best_match_result, candidates_from_results, get_best_match
from .people import WANTED_CREW_TYPES, PersonRole, map_crew_to_person_type, wanted_crew
from .ratings import build_parental_rating
from .util.text import clean_name, remove_invalid_file_characters
from .videos import is_trailer_type, trailer_urls

__version__ = "0.1.0"

__all__ = [
    "API_BASE",
    "BASE_TMDB_URL",
    "MAX_YEAR_DIFFERENCE",
    "PROVIDER_NAME",
    "Config",
    "Candidate",
    "PersonRole",
    "WANTED_CREW_TYPES",
    "adjust_image_language",
    "best_match_result",
    "build_parental_rating",
    "candidates_from_results",
    "clean_name",
    "get_best_match",
    "get_image_languages_param",
    "is_trailer_type",
    "map_crew_to_person_type",
    "normalize_language",
    "remove_invalid_file_characters",
    "trailer_urls",
    "wanted_crew",
]

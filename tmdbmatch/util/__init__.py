from __future__ import annotations

from .text import (
    clean_name,
    contains_ignore_case,
    equals_ignore_case,
    fold_case,
    parse_date,
    parse_year,
    remove_invalid_file_characters,
    startswith_ignore_case,
)

__all__ = [
    "clean_name",
    "remove_invalid_file_characters",
    "equals_ignore_case",
    "contains_ignore_case",
    "startswith_ignore_case",
    "fold_case",
    "parse_year",
    "parse_date",
]

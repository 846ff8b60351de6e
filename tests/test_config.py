import pytest

from tmdbmatch.config import MAX_YEAR_DIFFERENCE, Config


def test_defaults():
    cfg = Config()
    assert cfg.max_year_difference == MAX_YEAR_DIFFERENCE == 3
    assert cfg.fallback_language == "en"
    assert cfg.debug is False
    assert cfg["fallback_language"] == "en"
    assert "debug" in cfg


def test_from_env(monkeypatch):
    monkeypatch.setenv("TMDB_MAX_YEAR_DIFFERENCE", "5")
    monkeypatch.setenv("TMDBMATCH_DEBUG", "yes")
    cfg = Config.from_env()
    assert cfg.max_year_difference == 5
    assert cfg.debug is True


def test_bad_values_fall_back_to_defaults():
    cfg = Config({"max_year_difference": "lots", "fallback_language": "  "})
    assert cfg.max_year_difference == 3
    assert cfg.fallback_language == "en"


def test_missing_attribute():
    with pytest.raises(AttributeError):
        Config().nope
    assert Config().get("nope", 1) == 1

from tmdbmatch.ratings import build_parental_rating
from tmdbmatch.videos import is_trailer_type, trailer_urls


def test_is_trailer_type():
    assert is_trailer_type("YouTube", "Teaser")
    assert is_trailer_type("youtube", "TRAILER")
    assert not is_trailer_type("Vimeo", "Trailer")
    assert not is_trailer_type("YouTube", "Featurette")
    assert not is_trailer_type(None, None)


def test_trailer_urls():
    videos = [
        {"site": "YouTube", "type": "Trailer", "key": "abc"},
        {"site": "YouTube", "type": "Clip", "key": "nope"},
        {"site": "Vimeo", "type": "Trailer", "key": "nope"},
        {"site": "YouTube", "type": "Teaser", "key": ""},
        {"site": "YouTube", "type": "Teaser", "key": "xyz"},
    ]
    assert trailer_urls(videos) == [
        "https://www.youtube.com/watch?v=abc",
        "https://www.youtube.com/watch?v=xyz",
    ]
    assert trailer_urls(None) == []


def test_build_parental_rating():
    assert build_parental_rating("US", "TV-14") == "TV-14"
    assert build_parental_rating("us", "PG-13") == "PG-13"
    assert build_parental_rating("GB", "15") == "GB-15"
    assert build_parental_rating("DE", "16") == "FSK-16"
    assert build_parental_rating("de", "12") == "FSK-12"


def test_build_parental_rating_only_rewrites_leading_prefix():
    assert build_parental_rating("FR", "DE-10") == "FR-DE-10"

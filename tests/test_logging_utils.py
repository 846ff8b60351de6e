from tmdbmatch.config import Config
from tmdbmatch.logging_utils import breadcrumb


def test_breadcrumb_accepts_stage_keyword(capsys):
    breadcrumb("match", Config({"debug": True}), stage="exact", kept=1)
    err = capsys.readouterr().err
    assert "[match]" in err
    assert "stage='exact'" in err


def test_breadcrumb_silent_without_debug(capsys):
    breadcrumb("match", Config(), stage="year", kept=0)
    captured = capsys.readouterr()
    assert captured.err == "" and captured.out == ""


def test_breadcrumb_escapes_markup_in_values(capsys):
    breadcrumb("match", Config({"debug": True}), result="Heat [bold]")
    assert "[bold]" in capsys.readouterr().err

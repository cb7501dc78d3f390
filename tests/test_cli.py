import pytest

from conftest import FakeRemoteClient
from newscheck.application.analyzer import AnalysisService
from newscheck.interfaces.cli import cli


@pytest.fixture
def offline_service(monkeypatch):
    service = AnalysisService(FakeRemoteClient())
    monkeypatch.setattr(cli, "create_analysis_service", lambda: service)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return service


@pytest.mark.parametrize("argv", [[], ["--help"], ["-h"]])
def test_help(argv, capsys):
    assert cli.main(argv) == 0
    assert "newscheck --url" in capsys.readouterr().out


def test_empty_content_is_an_error(offline_service, capsys):
    assert cli.main(["--json", "   "]) == 1
    assert "cannot be empty" in capsys.readouterr().out


def test_unknown_option(offline_service, capsys):
    assert cli.main(["--bogus", "text"]) == 1
    assert "Unknown option --bogus" in capsys.readouterr().out


def test_invalid_url(offline_service, capsys):
    assert cli.main(["--url", "not a url"]) == 1
    assert "Not a valid URL" in capsys.readouterr().out


def test_json_output(offline_service, capsys):
    assert cli.main(["--json", "Breaking", "news", "!!!!"]) == 0
    out = capsys.readouterr().out
    assert "analysisMethod" in out
    assert "heuristic" in out
    assert "detailedAnalysis" in out


def test_url_analysis_output(offline_service, capsys):
    assert cli.main(["--url", "https://www.infowars.com/x"]) == 0
    out = capsys.readouterr().out
    assert "low credibility rating" in out
    assert "pattern-based analysis" in out


def test_demo_runs_all_cases(offline_service, capsys):
    assert cli.main(["--demo"]) == 0
    out = capsys.readouterr().out
    for title, _ in cli.DEMO_CASES:
        assert title in out

"""Tests for the run_scraper.py command-line script."""

import json
import logging

import pytest

import run_scraper
from glypto.loader import PROVIDERS_ENV_VAR

PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Cli Page</title>
    <meta property="og:description" content="Described">
    <link rel="alternate" type="application/atom+xml" href="/atom.xml">
    <script type="application/ld+json">{"@type": "Article", "headline": "Structured"}</script>
  </head>
  <body></body>
</html>
"""


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(PROVIDERS_ENV_VAR, raising=False)
    # Keep a stray .env in the working directory out of the picture
    monkeypatch.setattr(run_scraper, "load_dotenv", lambda: False)


@pytest.fixture(autouse=True)
def restore_logging():
    package_logger = logging.getLogger("glypto")
    level = package_logger.level
    streams = [(h, h.stream) for h in package_logger.handlers]
    yield
    package_logger.setLevel(level)
    for handler, stream in streams:
        # Assign directly: setStream() would flush the current stream,
        # which capsys has already closed by teardown.
        handler.stream = stream
        handler.setLevel(level)


def run(args, tmp_path):
    out = tmp_path / "out.json"
    code = run_scraper.main([*args, "-o", str(out)])
    return code, json.loads(out.read_text(encoding="utf-8"))


class TestRunScraper:
    """main() end to end."""

    def test_scrapes_file(self, page, tmp_path):
        code, results = run([str(page)], tmp_path)
        assert code == 0
        assert results[0]["status"] == "success"
        metadata = results[0]["metadata"]
        assert metadata["title"] == "Cli Page"
        assert metadata["description"] == "Described"
        assert metadata["favicon"] == "/favicon.ico"
        assert metadata["feeds"] == [{"title": None, "type": "application/atom+xml", "href": "/atom.xml"}]
        assert metadata["open_graph"] == {"description": ["Described"]}

    def test_structured_data_flag(self, page, tmp_path):
        code, results = run([str(page), "--providers", "jsonLd,other", "-s", "-p", "lxml"], tmp_path)
        assert code == 0
        assert results[0]["metadata"]["title"] == "Structured"

    def test_missing_file_is_reported(self, page, tmp_path):
        code, results = run([str(tmp_path / "missing.html"), str(page)], tmp_path)
        assert code == 1
        assert results[0]["status"] == "error"
        assert results[1]["status"] == "success"

    def test_prints_to_stdout(self, page, capsys):
        assert run_scraper.main([str(page)]) == 0
        results = json.loads(capsys.readouterr().out)
        assert results[0]["metadata"]["title"] == "Cli Page"

    def test_rejects_unknown_parser(self, page):
        with pytest.raises(SystemExit):
            run_scraper.main([str(page), "--parser", "regex"])

    def test_warnings_go_to_stderr(self, page, capsys):
        assert run_scraper.main([str(page), "--providers", "bogus"]) == 0
        captured = capsys.readouterr()
        results = json.loads(captured.out)
        assert results[0]["metadata"]["title"] == "Cli Page"
        assert "Unknown provider 'bogus'" in captured.err

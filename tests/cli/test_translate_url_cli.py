from __future__ import annotations

import json

import pytest

from myct.cli import translate_url
from myct.translator.fetch import FetchedPage, FetchError


class _StaticFetcher:
    def __init__(self, html: str = "", error: FetchError | None = None) -> None:
        self._html = html
        self._error = error

    def fetch(self, url: str) -> FetchedPage:
        if self._error is not None:
            raise self._error
        return FetchedPage(html=self._html, content_type="text/html", final_url=url)


def test_main_prints_document(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    seen = {}

    def _build(settings):
        seen["timeout"] = settings.fetch_timeout_seconds
        return _StaticFetcher("<title>Hello</title><p>A paragraph of text</p>")

    monkeypatch.delenv("MYCT_FETCH_TIMEOUT_SECONDS", raising=False)
    monkeypatch.setattr(translate_url, "_build_fetcher", _build)

    exit_code = translate_url.main(["--url", "example.com", "--timeout", "3"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert seen["timeout"] == 3.0
    assert payload["url"] == "example.com"
    assert payload["error"] is None
    assert payload["document"]["metadata"]["source"] == "https://example.com"
    assert [child["role"] for child in payload["document"]["root"]["children"]] == ["page-title", "paragraph"]


def test_main_returns_one_on_fetch_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    error = FetchError("https://a.com", "Page not found (404)", 404)
    monkeypatch.setattr(translate_url, "_build_fetcher", lambda settings: _StaticFetcher(error=error))

    exit_code = translate_url.main(["--url", "https://a.com"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert payload == {"url": "https://a.com", "document": None, "error": "Page not found (404)"}


def test_main_returns_two_on_bad_config(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("MYCT_FETCH_TIMEOUT_SECONDS", "soon")

    exit_code = translate_url.main(["--url", "https://a.com"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 2
    assert payload["error"] == "MYCT_FETCH_TIMEOUT_SECONDS must be a number"


def test_main_rejects_too_small_timeout(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("MYCT_FETCH_TIMEOUT_SECONDS", raising=False)

    exit_code = translate_url.main(["--url", "https://a.com", "--timeout", "0.2"])

    assert exit_code == 2
    assert "--timeout must be >= 1.0" in capsys.readouterr().out

from __future__ import annotations

import pytest

from myct.extraction.urls import UrlResolutionError, resolve_url, url_host

BASE = "https://a.com/x/y"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("//cdn.b.com/i.png", "https://cdn.b.com/i.png"),
        ("/img.png", "https://a.com/img.png"),
        ("z.png", "https://a.com/x/z.png"),
        ("http://c.com/d", "http://c.com/d"),
        ("../up.png", "https://a.com/up.png"),
        ("/q?a=1&amp;b=2", "https://a.com/q?a=1&b=2"),
    ],
)
def test_resolve_url_against_page(raw: str, expected: str) -> None:
    assert resolve_url(raw, BASE) == expected


def test_data_uri_is_returned_unchanged() -> None:
    data = "data:image/png;base64,iVBORw0KGgo="

    assert resolve_url(data, BASE) == data


def test_empty_value_is_rejected() -> None:
    with pytest.raises(UrlResolutionError, match="Empty URL"):
        resolve_url("   ", BASE)


def test_relative_value_needs_absolute_base() -> None:
    with pytest.raises(UrlResolutionError, match="must be absolute"):
        resolve_url("/img.png", "not a url")


def test_absolute_value_ignores_base() -> None:
    assert resolve_url("https://b.com/", "not a url") == "https://b.com/"


def test_url_host_is_lowercased() -> None:
    assert url_host("https://WWW.YouTube.com/embed/1") == "www.youtube.com"
    assert url_host("no-host") is None

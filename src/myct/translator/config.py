"""Runtime configuration for page fetching."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_FETCH_TIMEOUT_SECONDS = 15.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"


def _parse_positive_float(*, name: str, raw_value: str, minimum: float = 0.001) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class TranslatorSettings:
    """Validated settings for the HTTP page fetcher."""

    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TranslatorSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        timeout_raw = source.get("MYCT_FETCH_TIMEOUT_SECONDS", str(DEFAULT_FETCH_TIMEOUT_SECONDS)).strip()
        user_agent = source.get("MYCT_USER_AGENT", DEFAULT_USER_AGENT).strip()
        accept_language = source.get("MYCT_ACCEPT_LANGUAGE", DEFAULT_ACCEPT_LANGUAGE).strip()

        if not timeout_raw:
            raise ValueError("MYCT_FETCH_TIMEOUT_SECONDS cannot be empty")
        if not user_agent:
            raise ValueError("MYCT_USER_AGENT cannot be empty")
        if not accept_language:
            raise ValueError("MYCT_ACCEPT_LANGUAGE cannot be empty")

        fetch_timeout_seconds = _parse_positive_float(
            name="MYCT_FETCH_TIMEOUT_SECONDS",
            raw_value=timeout_raw,
            minimum=1.0,
        )

        return cls(
            fetch_timeout_seconds=fetch_timeout_seconds,
            user_agent=user_agent,
            accept_language=accept_language,
        )

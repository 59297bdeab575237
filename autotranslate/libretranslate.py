"""
LibreTranslate REST API client.

Two calls are used against a single base URL:
  - GET  {base_url}            availability probe (HTTP 200 means healthy)
  - POST {base_url}/translate  body {q, source, target} -> {translatedText}

Strings are sent one per request. There is no batching, no retry and no
timeout beyond what requests does by default.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import requests

from autotranslate.errors import TranslationError


def translate_url(base_url: str) -> str:
    return base_url.rstrip("/") + "/translate"


# ── Module-level calls ─────────────────────────────────────────────────────────

def probe(base_url: str, session: Optional[requests.Session] = None) -> bool:
    """Return True only when the service answers the base URL with HTTP 200."""
    http = session or requests
    try:
        resp = http.get(base_url)
    except requests.RequestException:
        return False
    return resp.status_code == 200


def translate(
    text: str,
    source: str,
    target: str,
    base_url: str,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Translate one string. Raises TranslationError on transport failure,
    a non-success status or a payload without a string `translatedText`.
    """
    http = session or requests
    print(f"Translating text: {text}", flush=True)
    try:
        resp = http.post(
            translate_url(base_url),
            json={"q": text, "source": source, "target": target},
        )
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as exc:
        raise TranslationError(f"Translation request failed for '{text[:50]}': {exc}") from exc
    except ValueError as exc:
        raise TranslationError(f"Malformed response for '{text[:50]}': {exc}") from exc

    translated = data.get("translatedText") if isinstance(data, dict) else None
    if not isinstance(translated, str):
        raise TranslationError(
            f"Malformed response for '{text[:50]}': no translatedText in {data!r}"
        )
    return translated


# ── Clients ────────────────────────────────────────────────────────────────────

@runtime_checkable
class TranslationClient(Protocol):
    """What the file pipelines need from a translation backend."""

    translated: int

    def probe(self) -> bool: ...

    def translate(self, text: str) -> str: ...

    def close(self) -> None: ...


class LibreTranslateClient:
    """Binds the endpoint and language pair for one run."""

    def __init__(self, base_url: str, source: str, target: str) -> None:
        self.base_url = base_url
        self.source = source
        self.target = target
        self.translated = 0
        self._session = requests.Session()

    def probe(self) -> bool:
        return probe(self.base_url, session=self._session)

    def translate(self, text: str) -> str:
        result = translate(text, self.source, self.target, self.base_url, session=self._session)
        self.translated += 1
        return result

    def close(self) -> None:
        self._session.close()


class DryRunClient:
    """Stands in for the service when previewing: marks strings instead of translating."""

    def __init__(self) -> None:
        self.translated = 0

    def probe(self) -> bool:
        return True

    def translate(self, text: str) -> str:
        self.translated += 1
        return f"[TR]{text}"

    def close(self) -> None:
        pass

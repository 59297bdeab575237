"""
Shape-preserving translation of JSON documents.

Only string leaves are translated. Lists keep their length and order, objects
keep their keys and key order, and numbers, booleans and null are returned
untouched.
"""

from __future__ import annotations

import json
from typing import Any

from autotranslate.errors import ParseError
from autotranslate.libretranslate import TranslationClient


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not standard JSON.
    raise ParseError(f"Invalid JSON: non-standard constant {name}")


def translate_value(value: Any, client: TranslationClient) -> Any:
    if isinstance(value, str):
        if value.strip():
            return client.translate(value)
        return value
    if isinstance(value, list):
        return [translate_value(item, client) for item in value]
    if isinstance(value, dict):
        return {key: translate_value(val, client) for key, val in value.items()}
    return value


def translate_json(content: str, client: TranslationClient) -> str:
    try:
        document = json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Invalid JSON: document is nested too deeply") from exc

    try:
        translated = translate_value(document, client)
    except RecursionError as exc:
        raise ParseError("Invalid JSON: document is nested too deeply") from exc
    return json.dumps(translated, ensure_ascii=False, indent=2) + "\n"

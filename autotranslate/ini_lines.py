"""
Line classification for INI files.

Each raw line becomes a ClassifiedLine. Only `keyvalue` lines carry a
key/value split; every other kind is reproduced verbatim on output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

EMPTY = "empty"
COMMENT = "comment"
SECTION = "section"
KEYVALUE = "keyvalue"
OTHER = "other"

COMMENT_PREFIXES = (";", "#")
SECTION_RE = re.compile(r"^\[(.*?)\]$")
# Used on the raw line, so surrounding whitespace does not matter.
SECTION_NAME_RE = re.compile(r"\[(.*?)\]")
KEYVALUE_RE = re.compile(r"^([^=]+)=(.*)$")


@dataclass(frozen=True)
class ClassifiedLine:
    kind: str
    raw: str
    key: Optional[str] = None
    value: Optional[str] = None

    @property
    def has_content(self) -> bool:
        """True for key lines whose key and value are both non-empty."""
        return self.kind == KEYVALUE and bool(self.key) and bool(self.value)


def classify_line(line: str) -> ClassifiedLine:
    stripped = line.strip()

    if not stripped:
        return ClassifiedLine(EMPTY, line)

    if stripped.startswith(COMMENT_PREFIXES):
        return ClassifiedLine(COMMENT, line)

    if SECTION_RE.match(stripped):
        return ClassifiedLine(SECTION, line)

    m = KEYVALUE_RE.match(stripped)
    if m:
        return ClassifiedLine(KEYVALUE, line, key=m.group(1).strip(), value=m.group(2).strip())

    return ClassifiedLine(OTHER, line)


def split_lines(content: str) -> list[str]:
    """
    Split on newlines, dropping a trailing CR from each line. A final newline
    does not produce an extra empty line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def classify_lines(content: str) -> list[ClassifiedLine]:
    return [classify_line(line) for line in split_lines(content)]


def section_name(raw: str) -> Optional[str]:
    m = SECTION_NAME_RE.search(raw)
    return m.group(1) if m else None

"""
Two-pass INI translation.

Pass 1 walks the classified lines and builds a section table
{section: {key: translated value}}, translating each value once.
Pass 2 walks the same lines again and re-emits them, substituting only the
value of key lines from the table. Comments, blank lines, section headers and
unrecognised lines are copied verbatim.

Both passes must track the current section identically; they share
_enter_section / _enter_key_section for that.
"""

from __future__ import annotations

from typing import Optional

from autotranslate.ini_lines import SECTION, ClassifiedLine, classify_lines, section_name
from autotranslate.libretranslate import TranslationClient

DEFAULT_SECTION = "default"

SectionTable = dict[str, dict[str, str]]


def _enter_section(line: ClassifiedLine, current: Optional[str]) -> Optional[str]:
    name = section_name(line.raw)
    return name if name is not None else current


def _enter_key_section(current: Optional[str]) -> tuple[str, bool]:
    """Section a key line belongs to, and whether the default was opened for it."""
    if not current:
        return DEFAULT_SECTION, True
    return current, False


# ── Pass 1: collect and translate ──────────────────────────────────────────────

def build_section_table(lines: list[ClassifiedLine], client: TranslationClient) -> SectionTable:
    table: SectionTable = {}
    current: Optional[str] = None

    for line in lines:
        if line.kind == SECTION:
            current = _enter_section(line, current)
            if current is not None:
                # Re-opening a section keeps what was already collected.
                table.setdefault(current, {})
            continue

        if not line.has_content:
            continue

        current, _ = _enter_key_section(current)
        values = table.setdefault(current, {})
        if line.value.strip():
            values[line.key] = client.translate(line.value)
        else:
            values[line.key] = line.value

    return table


# ── Pass 2: re-emit ────────────────────────────────────────────────────────────

def render(lines: list[ClassifiedLine], table: SectionTable) -> str:
    out: list[str] = []
    current: Optional[str] = None

    for line in lines:
        if line.kind == SECTION:
            current = _enter_section(line, current)
            out.append(line.raw + "\n")
            continue

        # Key lines with an empty value fall through here and stay as written.
        if not line.has_content:
            out.append(line.raw + "\n")
            continue

        current, opened = _enter_key_section(current)
        if opened:
            out.append(f"[{DEFAULT_SECTION}]\n")
        out.append(f"{line.key}={table[current][line.key]}\n")

    return "".join(out)


def translate_ini(content: str, client: TranslationClient) -> str:
    lines = classify_lines(content)
    table = build_section_table(lines, client)
    return render(lines, table)

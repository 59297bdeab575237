"""
autotranslate command line.

Translates the string values of a JSON or INI file through a LibreTranslate
server and writes <name>_translated.<ext> next to the input, keeping keys,
ordering, comments and blank lines.

Usage:
    autotranslate strings.json --libretranslate-url http://localhost:5000 --to fr --json
    autotranslate settings.ini --libretranslate-url http://localhost:5000 --from en --to de --ini
    autotranslate settings.ini --libretranslate-url http://localhost:5000 --to de --ini --dry-run
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from autotranslate.errors import (
    AmbiguousFormat,
    AutotranslateError,
    InputFileNotFound,
    ReadError,
    ServiceUnreachable,
    WriteError,
)
from autotranslate.ini_rebuild import translate_ini
from autotranslate.json_walker import translate_json
from autotranslate.libretranslate import DryRunClient, LibreTranslateClient, TranslationClient

OUTPUT_SUFFIX = "_translated"

PIPELINES = {
    "json": translate_json,
    "ini": translate_ini,
}


@dataclass(frozen=True)
class RunConfig:
    path: Path
    api_url: str
    source: str
    target: str
    fmt: Optional[str]
    dry_run: bool = False


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="autotranslate",
        description="Translate JSON or INI file content using LibreTranslate.",
    )
    parser.add_argument("file", type=Path, help="Path to the file to translate.")
    parser.add_argument(
        "--libretranslate-url",
        required=True,
        metavar="URL",
        help="LibreTranslate API base URL.",
    )
    parser.add_argument("--to", required=True, metavar="LANG", help="Target language code.")
    parser.add_argument(
        "--from",
        dest="source",
        default="auto",
        metavar="LANG",
        help="Source language code (default: auto).",
    )
    parser.add_argument("--json", action="store_true", help="Process a JSON file.")
    parser.add_argument("--ini", action="store_true", help="Process an INI file.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Mark strings instead of calling the API, and do not write the output file.",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RunConfig:
    # Neither or both flags leave fmt unset; validate() rejects that.
    if args.json and not args.ini:
        fmt = "json"
    elif args.ini and not args.json:
        fmt = "ini"
    else:
        fmt = None
    return RunConfig(
        path=args.file,
        api_url=args.libretranslate_url,
        source=args.source,
        target=args.to,
        fmt=fmt,
        dry_run=args.dry_run,
    )


def output_path(path: Path) -> Path:
    return path.with_name(f"{path.stem}{OUTPUT_SUFFIX}{path.suffix}")


# ── Run steps ──────────────────────────────────────────────────────────────────

def validate(config: RunConfig) -> None:
    if not config.path.is_file():
        raise InputFileNotFound(f"File does not exist: {config.path}")
    if config.fmt is None:
        raise AmbiguousFormat("Please specify either --json or --ini")


def read_input(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Could not read {path}: {exc}") from exc


def write_output(path: Path, content: str) -> None:
    try:
        out = open(path, "w", encoding="utf-8")
    except OSError as exc:
        # Nothing was created or truncated; leave any earlier output alone.
        raise WriteError(f"Failed to write output file {path}: {exc}") from exc

    try:
        with out:
            out.write(content)
    except OSError as exc:
        try:
            path.unlink()
        except OSError as del_err:
            print(f"[WARN] Could not delete incomplete file {path}: {del_err}", file=sys.stderr)
        raise WriteError(f"Failed to write output file {path}: {exc}") from exc


def run(config: RunConfig, client: Optional[TranslationClient] = None) -> Path:
    """
    Translate one file according to `config` and return the output path.
    Nothing is written unless every string was translated.
    """
    validate(config)

    if client is None:
        if config.dry_run:
            client = DryRunClient()
        else:
            client = LibreTranslateClient(config.api_url, config.source, config.target)

    try:
        if not client.probe():
            raise ServiceUnreachable(f"LibreTranslate API is not accessible at {config.api_url}")

        print(f"Processing: {config.path} ({config.fmt})", flush=True)
        content = read_input(config.path)
        result = PIPELINES[config.fmt](content, client)

        dst = output_path(config.path)
        if config.dry_run:
            print(f"[dry-run] Would write: {dst}", flush=True)
        else:
            write_output(dst, result)
            print(f"Wrote: {dst}", flush=True)

        print(f"Done. {client.translated} string(s) translated.", flush=True)
        return dst
    finally:
        client.close()


# ── Entry point ────────────────────────────────────────────────────────────────

def main(argv: Optional[Sequence[str]] = None) -> int:
    config = config_from_args(parse_args(argv))
    try:
        run(config)
    except AutotranslateError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Translation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

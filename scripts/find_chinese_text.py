#!/usr/bin/env python3
"""Scan source and data files for Chinese characters that English pages could leak."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from fansite.chinese import find_chinese

logger = logging.getLogger("find_chinese_text")

DEFAULT_EXTENSIONS = {".tsx", ".ts", ".js", ".json", ".py", ".html"}
DEFAULT_TARGETS = ("app", "components", "lib", "data")
SKIP_DIRS = {
    ".git",
    ".next",
    ".venv",
    "venv",
    "node_modules",
    "dist",
    "build",
    "__pycache__",
}


@dataclass(frozen=True)
class Finding:
    path: Path
    line: int
    snippet: str
    characters: tuple[str, ...]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find Chinese text in source and data files.")
    parser.add_argument(
        "--targets",
        nargs="*",
        default=list(DEFAULT_TARGETS),
        help=f"Files or directories to scan (default: {', '.join(DEFAULT_TARGETS)}).",
    )
    parser.add_argument(
        "--ext",
        nargs="*",
        default=sorted(DEFAULT_EXTENSIONS),
        help="File extensions to scan, e.g. --ext .tsx .json",
    )
    parser.add_argument(
        "--exclude",
        nargs="*",
        default=[],
        help="Path fragments to ignore, e.g. locales/zh.json",
    )
    parser.add_argument(
        "--warn-only",
        action="store_true",
        help="Always exit 0 even when Chinese text is found.",
    )
    return parser.parse_args(argv)


def should_skip(path: Path, excludes: Sequence[str]) -> bool:
    if any(part in SKIP_DIRS for part in path.parts):
        return True
    text = path.as_posix()
    return any(fragment in text for fragment in excludes)


def iter_files(targets: Sequence[str], extensions: set[str], excludes: Sequence[str] = ()) -> Iterator[Path]:
    for raw_target in targets:
        target = Path(raw_target)
        if not target.exists():
            continue
        if target.is_file():
            if target.suffix.lower() in extensions and not should_skip(target, excludes):
                yield target
            continue
        for file_path in target.rglob("*"):
            if not file_path.is_file() or should_skip(file_path, excludes):
                continue
            if file_path.suffix.lower() in extensions:
                yield file_path


def scan_file(path: Path) -> Iterable[Finding]:
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return []

    findings: list[Finding] = []
    for line_num, line in enumerate(text.splitlines(), start=1):
        characters = find_chinese(line)
        if not characters:
            continue
        snippet = re.sub(r"\s+", " ", line.strip())
        if len(snippet) > 160:
            snippet = f"{snippet[:157]}..."
        findings.append(Finding(path=path, line=line_num, snippet=snippet, characters=tuple(characters)))
    return findings


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = parse_args(argv)
    extensions = {ext if ext.startswith(".") else f".{ext}" for ext in args.ext}
    files = sorted(set(iter_files(args.targets, extensions, args.exclude)))

    all_findings: list[Finding] = []
    for file_path in files:
        all_findings.extend(scan_file(file_path))

    if all_findings:
        total = sum(len(f.characters) for f in all_findings)
        print(f"[chinese-check] found {total} Chinese character(s) on {len(all_findings)} line(s):")
        for finding in all_findings:
            print(f"{finding.path}:{finding.line}: {finding.snippet}")
            print(f"    characters: {', '.join(finding.characters)}")
        if args.warn_only:
            print("[chinese-check] warn-only mode enabled; exiting with code 0.")
            return 0
        return 1

    print("[chinese-check] no Chinese text found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

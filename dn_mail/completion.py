"""Address completion for mail header lines.

The host calls `address_completion` twice per completion cycle, following
Vim's complete-functions convention: first with findstart=1 to learn where
the address being typed begins, then with findstart=0 and the text the host
extracted from that column to get the candidates.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from . import config
from .aliases import AliasFileError, load_aliases

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = ("From", "To", "Cc", "Bcc")
FIELD_DELIMITER = ": "

Warn = Callable[[str], None]


def _log_warning(msg: str) -> None:
    logger.warning(msg)


@dataclass(frozen=True)
class CompletionResult:
    start: int
    candidates: list[str]


def is_address_line(line: str) -> bool:
    return any(line.startswith(f"{field}{FIELD_DELIMITER}") for field in ADDRESS_FIELDS)


def find_start(line: str, col: int) -> int | None:
    """Zero-based column where the address under the cursor begins.

    Returns None when the line is not an address field.
    """
    if not is_address_line(line):
        return None

    # one-based from here on; the host column is taken as the position of
    # the character before the cursor
    address_begin = line.index(FIELD_DELIMITER) + len(FIELD_DELIMITER) + 1
    start = col
    while start > address_begin:
        if line[start - 3 : start - 1] == ", ":
            break
        if line[start - 2 : start - 1] == ",":
            break
        start -= 1

    return max(start, address_begin) - 1


def case_insensitive_pattern(base: str) -> str:
    """Expand ASCII letters to two-case classes; everything else is left as is."""
    return "".join(f"[{c.lower()}{c.upper()}]" if c.isascii() and c.isalpha() else c for c in base)


def filter_entries(base: str, entries: list[str]) -> list[str]:
    pattern = re.compile(case_insensitive_pattern(base))
    return [entry for entry in entries if pattern.search(entry)]


def find_matches(
    base: str,
    alias_file: str | Path | None = None,
    warn: Warn = _log_warning,
) -> list[str] | None:
    path = config.get_alias_file(alias_file)
    try:
        records = load_aliases(path)
    except AliasFileError as e:
        warn(str(e))
        return None

    try:
        return filter_entries(base, [r.entry for r in records])
    except re.error:
        warn(f"Invalid completion pattern '{base}'")
        return None


def address_completion(
    findstart: int,
    base: str,
    line: str,
    col: int,
    alias_file: str | Path | None = None,
    warn: Warn = _log_warning,
) -> int | list[str] | None:
    if not is_address_line(line):
        return None

    if findstart == 1:
        return find_start(line, col)

    return find_matches(base, alias_file, warn)


def complete(
    line: str,
    col: int,
    alias_file: str | Path | None = None,
    warn: Warn = _log_warning,
) -> CompletionResult | None:
    """Single-call completion: replacement start and candidates together."""
    start = find_start(line, col)
    if start is None:
        return None

    candidates = find_matches(line[start:col], alias_file, warn)
    if candidates is None:
        return None

    return CompletionResult(start=start, candidates=candidates)

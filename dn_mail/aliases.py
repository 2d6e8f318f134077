"""Neomutt alias file parsing.

One definition per line, for example:

    alias johnno John Citizen <john@isp.com> # personal email

Only the phrase and bracketed address are used for completion; the alias key
and any trailing comment are kept on the record for display.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

ALIAS_LINE = re.compile(r"^alias (\S+) ([^<]+)(<[^>]+>)(.*)$")


class AliasFileError(ValueError):
    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class AliasFileMissing(AliasFileError):
    def __init__(self, path: Path):
        super().__init__(path, f"Cannot locate aliases file: {path}")


class AliasFileUnreadable(AliasFileError):
    def __init__(self, path: Path):
        super().__init__(path, f"Unable to open file '{path}' for reading")


class NoAddressesFound(AliasFileError):
    def __init__(self, path: Path):
        super().__init__(path, f"No addresses found in aliases file '{path}'")


@dataclass(frozen=True)
class AliasRecord:
    key: str
    phrase: str
    address: str
    comment: str | None = None

    @property
    def entry(self) -> str:
        return f"{self.phrase}<{self.address}>"


def parse_alias_line(line: str) -> AliasRecord | None:
    match = ALIAS_LINE.match(line.rstrip("\r\n"))
    if not match:
        return None

    key, phrase, bracketed, rest = match.groups()
    comment = rest.strip().lstrip("#").strip() or None
    return AliasRecord(key=key, phrase=phrase, address=bracketed[1:-1], comment=comment)


def _is_readable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def load_aliases(path: Path) -> list[AliasRecord]:
    """Read and parse every alias line in file order.

    Raises an AliasFileError subclass if the file is missing, cannot be
    opened, or contains no parsable address lines.
    """
    if not _is_readable(path):
        raise AliasFileMissing(path)

    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise AliasFileUnreadable(path) from e

    records = [r for r in (parse_alias_line(line) for line in lines) if r is not None]
    if not records:
        raise NoAddressesFound(path)

    return records

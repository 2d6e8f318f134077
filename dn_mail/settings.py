"""Buffer-local preferences for composing mail.

Reflow support (textwidth, formatoptions, comments) assumes the mail agent
sends format=flowed text, e.g. neomutt with text_flowed set. Quoted text is
folded by quote depth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace

from . import config

FOLD_EXPR = r"strlen(substitute(matchstr(getline(v:lnum),'\v^\s*%(\>\s*)+'),'\s','','g'))"

QUOTE_PREFIX = re.compile(r"^\s*(?:>\s*)+")


@dataclass(frozen=True)
class MailBufferSettings:
    textwidth: int = 72
    formatoptions_append: str = "q"
    comments_append: str = "nb:>"
    foldexpr: str = FOLD_EXPR
    foldmethod: str = "expr"
    foldlevel: int = 1
    foldminlines: int = 2
    colorcolumn: str = "72"

    @classmethod
    def from_config(cls) -> MailBufferSettings:
        overrides = config.get_buffer_overrides()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown buffer settings: {', '.join(unknown)}")

        defaults = cls()
        for name, value in overrides.items():
            expected = type(getattr(defaults, name))
            # bool is an int subclass but never a valid option value here
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(f"Buffer setting {name} must be {expected.__name__}, got {value!r}")
        return replace(defaults, **overrides)

    def setlocal_commands(self) -> list[str]:
        return [
            f"setlocal textwidth={self.textwidth}",
            f"setlocal formatoptions+={self.formatoptions_append}",
            f"setlocal comments+={self.comments_append}",
            f"setlocal foldexpr={_escape(self.foldexpr)}",
            f"setlocal foldmethod={self.foldmethod}",
            f"setlocal foldlevel={self.foldlevel}",
            f"setlocal foldminlines={self.foldminlines}",
            f"setlocal colorcolumn={self.colorcolumn}",
        ]


def _escape(value: str) -> str:
    # :set needs backslashes, spaces and bars escaped
    return value.replace("\\", "\\\\").replace(" ", "\\ ").replace("|", "\\|")


def quote_depth(line: str) -> int:
    """Fold level for a line: number of leading `>` quote markers."""
    match = QUOTE_PREFIX.match(line)
    if not match:
        return 0
    return match.group(0).count(">")

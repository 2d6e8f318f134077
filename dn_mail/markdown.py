"""Markdown highlighting of the mail body, applied at most once per buffer.

There is no way back: once a buffer has the markdown region it keeps it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable

logger = logging.getLogger(__name__)

APPLIED_NOTICE = "Using markdown syntax for mail body"
ALREADY_APPLIED_NOTICE = "Markdown syntax already applied to mail body"

# region starts after the first empty line and runs to end of file
MARKDOWN_SYNTAX_COMMANDS = (
    "unlet! b:current_syntax",
    "syntax include @synMailIncludeMarkdown syntax/markdown.vim",
    'let b:current_syntax = "mail"',
    r"syntax region synMailIncludeMarkdown keepend start='\n\@1<=\_^$' end='\%$' "
    "containedin=ALL contains=@synMailIncludeMarkdown",
)


def _log_notice(msg: str) -> None:
    logger.info(msg)


class MarkdownToggle:
    def __init__(self):
        self._applied: dict[Hashable, bool] = {}

    def applied(self, buffer: Hashable) -> bool:
        return self._applied.get(buffer, False)

    def apply(
        self,
        buffer: Hashable,
        run: Callable[[str], None],
        notify: Callable[[str], None] = _log_notice,
    ) -> bool:
        """Switch `buffer` to markdown body highlighting.

        Returns True if the commands were run, False if the buffer already
        had them.
        """
        if self.applied(buffer):
            notify(ALREADY_APPLIED_NOTICE)
            return False

        self._applied[buffer] = True
        for command in MARKDOWN_SYNTAX_COMMANDS:
            run(command)
        notify(APPLIED_NOTICE)
        return True

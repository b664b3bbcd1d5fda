"""
Escaping helpers shared by every highlighting stage.
"""

import html
import re
from typing import Callable


def escape_html(text: str) -> str:
    """Escapes & < > " ' (ampersand first) so the result is inert markup."""
    return html.escape(text, quote=True)


def unescape_html(text: str) -> str:
    """Inverse of escape_html for text that escape_html produced."""
    return html.unescape(text)


def sub_escaped(pattern: re.Pattern, render: Callable[[re.Match], str], text: str) -> str:
    """
    Like pattern.sub(render, text) over raw text, except that every span
    between matches is escaped. render is responsible for escaping whatever
    it takes from the match.
    """
    parts = []
    last_end = 0
    for match in pattern.finditer(text):
        if match.start() > last_end:
            parts.append(escape_html(text[last_end:match.start()]))
        parts.append(render(match))
        last_end = match.end()
    if last_end < len(text):
        parts.append(escape_html(text[last_end:]))
    return ''.join(parts)

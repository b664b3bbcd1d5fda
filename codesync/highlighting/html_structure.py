"""
Structural highlighting of escaped HTML: comments, tags and attributes.
"""

import re

from codesync.highlighting.regions import (
    ATTRIBUTE_LIST, ATTRIBUTE_NAME, ATTRIBUTE_VALUE, COMMENT, EMBEDDED_TAGS, TAG_NAME,
)
from codesync.highlighting.theme import Theme

# Comment alternative comes first so tags inside a comment stay part of it
STRUCTURE_RE = re.compile(
    rf'(?P<comment>{COMMENT})'
    rf'|(?P<open>&lt;/?)(?P<name>{TAG_NAME})(?P<attrs>{ATTRIBUTE_LIST}\s*/?)(?P<close>&gt;)'
)
ATTRIBUTE_RE = re.compile(rf'(?P<name>{ATTRIBUTE_NAME})(?P<eq>\s*=\s*)(?P<value>{ATTRIBUTE_VALUE})')


def highlight_attributes(attrs: str, theme: Theme) -> str:
    """Wraps each name=value pair of an escaped attribute list."""
    def _render(match: re.Match) -> str:
        return (theme.wrap('html_attr_name', match.group('name'))
                + match.group('eq')
                + theme.wrap('html_attr_value', match.group('value')))
    return ATTRIBUTE_RE.sub(_render, attrs)


def highlight_structure(escaped_html: str, theme: Theme) -> str:
    """Annotates comments, tags and attributes; other text passes through."""
    def _render(match: re.Match) -> str:
        if match.group('comment') is not None:
            return theme.wrap('comment', match.group('comment'))

        name = match.group('name')
        format_key = 'html_tag_embed' if name.lower() in EMBEDDED_TAGS else 'html_tag'
        return (theme.wrap(format_key, match.group('open') + name)
                + highlight_attributes(match.group('attrs'), theme)
                + theme.wrap(format_key, match.group('close')))
    return STRUCTURE_RE.sub(_render, escaped_html)

"""
CSS highlighting for <style> bodies and inline style="..." attributes.

Style bodies arrive as raw text and every emitted piece is escaped here.
The inline pass runs last, over markup the structural highlighter already
produced, and only touches the values of style attributes.
"""

import re
from functools import lru_cache

from codesync.highlighting.config import HighlightConfig
from codesync.highlighting.escaper import escape_html, sub_escaped, unescape_html
from codesync.highlighting.theme import Theme

_COMMENT = r'/\*[\s\S]*?(?:\*/|\Z)'
_CLOSED_COMMENT = r'/\*[\s\S]*?\*/'

# selector { declarations }; selectors never contain braces or ';', and
# declarations may hold closed comments but no nested braces
CSS_RE = re.compile(
    rf'(?P<comment>{_COMMENT})'
    r'|(?P<selector>(?:[^{};/]|/(?!\*))+?)(?P<gap>\s*)'
    rf'\{{(?P<declarations>(?:[^{{}}/]|/(?!\*)|{_CLOSED_COMMENT})*)\}}'
)
SELECTOR_WORD_RE = re.compile(r'[.#]?[\w\-:]+')
DECLARATION_RE = re.compile(
    rf'(?P<comment>{_COMMENT})'
    r'|(?:(?P<property>-{0,2}[A-Za-z][\w\-]*)(?P<space>\s*))?:(?P<value>(?:[^;/]|/(?!\*))*)'
)


def _render_value(value: str, format_key: str, theme: Theme) -> str:
    core = value.strip()
    if not core:
        return escape_html(value)
    lead = value[:len(value) - len(value.lstrip())]
    trail = value[len(value.rstrip()):]
    return escape_html(lead) + theme.wrap(format_key, escape_html(core)) + escape_html(trail)


def highlight_declarations(raw_text: str, config: HighlightConfig, value_key: str = 'css_value') -> str:
    """
    Highlights 'prop: value; ...' text. Known property names followed by ':'
    get the property class; the value after any ':' up to the next ';' gets
    value_key.
    """
    theme = config.theme

    def _render(match: re.Match) -> str:
        if match.group('comment') is not None:
            return theme.wrap('comment', escape_html(match.group('comment')))

        parts = []
        prop = match.group('property')
        if prop is not None:
            prop_markup = escape_html(prop)
            if prop.lower() in config.css_properties:
                prop_markup = theme.wrap('css_property', prop_markup)
            parts.append(prop_markup + escape_html(match.group('space')))
        parts.append(':')
        parts.append(_render_value(match.group('value'), value_key, theme))
        return ''.join(parts)

    return sub_escaped(DECLARATION_RE, _render, raw_text)


def _render_selector(selector: str, theme: Theme) -> str:
    return sub_escaped(SELECTOR_WORD_RE,
                       lambda m: theme.wrap('css_selector', escape_html(m.group())),
                       selector)


def highlight_css(raw_body: str, config: HighlightConfig) -> str:
    """Highlights the raw body of a <style> block."""
    theme = config.theme

    def _render(match: re.Match) -> str:
        if match.group('comment') is not None:
            return theme.wrap('comment', escape_html(match.group('comment')))
        return (_render_selector(match.group('selector'), theme)
                + escape_html(match.group('gap'))
                + '{'
                + highlight_declarations(match.group('declarations'), config, 'css_value')
                + '}')

    return sub_escaped(CSS_RE, _render, raw_body)


@lru_cache(maxsize=8)
def _inline_style_re(name_span: str, value_span: str) -> re.Pattern:
    return re.compile(
        re.escape(name_span) + r'(?P<name>(?i:style))</span>'
        r'(?P<eq>\s*=\s*)'
        + re.escape(value_span) + r'(?P<quote>&quot;|&#x27;)(?P<body>[\s\S]*?)(?P=quote)</span>'
    )


def highlight_inline_styles(markup: str, config: HighlightConfig) -> str:
    """Re-renders the values of style="..." attributes in composed markup."""
    theme = config.theme
    pattern = _inline_style_re(theme.open_span('html_attr_name'), theme.open_span('html_attr_value'))

    def _render(match: re.Match) -> str:
        declarations = highlight_declarations(unescape_html(match.group('body')), config, 'css_inline_value')
        quote = match.group('quote')
        return (theme.wrap('html_attr_name', match.group('name'))
                + match.group('eq')
                + theme.wrap('html_attr_value', quote + declarations + quote))

    return pattern.sub(_render, markup)

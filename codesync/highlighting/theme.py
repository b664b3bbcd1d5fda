"""
Span classes and colors for highlight markup.

Every format key used by the highlighters maps to one span class. The
class names are stable; colors only matter to consumers that render the
markup with Theme.stylesheet().
"""

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType

_HEX_COLOR_RE = re.compile(r'#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')

# Atom One Dark palette
DEFAULT_COLORS = MappingProxyType({
    "black": "#282c34",      # background
    "white": "#abb2bf",      # main text
    "gray3": "#3e4451",      # borders
    "gray4": "#5c6370",      # comments
    "blue": "#61afef",
    "green": "#98c379",
    "red": "#e06c75",
    "orange": "#d19a66",
    "yellow": "#e5c07b",
    "purple": "#c678dd",
    "cyan": "#56b6c2",
})


@dataclass(frozen=True)
class SpanFormat:
    color_key: str
    fallback: str
    bold: bool = False
    italic: bool = False


FORMATS = MappingProxyType({
    # Script tokens
    'keyword': SpanFormat('purple', '#c678dd'),
    'string': SpanFormat('green', '#98c379'),
    'number': SpanFormat('orange', '#d19a66'),
    'func_name': SpanFormat('yellow', '#e5c07b'),
    'comment': SpanFormat('gray4', '#5c6370', italic=True),
    # HTML structure
    'html_tag': SpanFormat('blue', '#61afef'),
    'html_tag_embed': SpanFormat('purple', '#c678dd', bold=True),  # <script>, <style>
    'html_attr_name': SpanFormat('yellow', '#e5c07b'),
    'html_attr_value': SpanFormat('green', '#98c379'),
    # CSS
    'css_selector': SpanFormat('blue', '#61afef'),
    'css_property': SpanFormat('purple', '#c678dd'),
    'css_value': SpanFormat('green', '#98c379'),
    'css_inline_value': SpanFormat('cyan', '#56b6c2'),
})


@dataclass(frozen=True)
class Theme:
    colors: MappingProxyType = field(default_factory=lambda: DEFAULT_COLORS)
    class_prefix: str = 'hl-'

    def css_class(self, format_key: str) -> str:
        return self.class_prefix + format_key.replace('_', '-')

    def open_span(self, format_key: str) -> str:
        return f'<span class="{self.css_class(format_key)}">'

    def wrap(self, format_key: str, markup: str) -> str:
        """Wraps already-escaped markup in the span for format_key."""
        return f'{self.open_span(format_key)}{markup}</span>'

    def color_for(self, format_key: str) -> str:
        fmt = FORMATS[format_key]
        color_hex = self.colors.get(fmt.color_key, fmt.fallback)
        if not isinstance(color_hex, str) or not _HEX_COLOR_RE.fullmatch(color_hex):
            logging.warning(f"Invalid color {color_hex!r} for '{format_key}', using fallback '{fmt.fallback}'")
            return fmt.fallback
        return color_hex

    def stylesheet(self) -> str:
        """CSS rules giving each span class its color, weight and style."""
        rules = []
        for format_key, fmt in FORMATS.items():
            declarations = [f"color: {self.color_for(format_key)};"]
            if fmt.bold:
                declarations.append("font-weight: bold;")
            if fmt.italic:
                declarations.append("font-style: italic;")
            rules.append(f".{self.css_class(format_key)} {{ {' '.join(declarations)} }}")
        return '\n'.join(rules)


DEFAULT_THEME = Theme()

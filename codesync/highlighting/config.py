from dataclasses import dataclass, field

from codesync.highlighting.tables import CSS_PROPERTIES, SCRIPT_KEYWORDS
from codesync.highlighting.theme import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class HighlightConfig:
    """Data the highlighting pipeline reads; nothing in it is mutated."""
    keywords: frozenset = SCRIPT_KEYWORDS
    css_properties: frozenset = field(default_factory=lambda: frozenset(CSS_PROPERTIES))
    theme: Theme = DEFAULT_THEME


DEFAULT_CONFIG = HighlightConfig()

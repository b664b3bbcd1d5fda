from codesync.highlighting.composer import highlight_document
from codesync.highlighting.config import DEFAULT_CONFIG, HighlightConfig
from codesync.highlighting.theme import DEFAULT_THEME, Theme
from codesync.highlighting.tokenizer import Token, TokenKind, tokenize, tokenize_script

__all__ = [
    'highlight_document', 'HighlightConfig', 'DEFAULT_CONFIG', 'Theme', 'DEFAULT_THEME',
    'Token', 'TokenKind', 'tokenize', 'tokenize_script',
]

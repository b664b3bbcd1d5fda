from typing import Iterable

from codesync.highlighting.escaper import escape_html
from codesync.highlighting.theme import Theme
from codesync.highlighting.tokenizer import Token, TokenKind

# Token kind -> theme format key; kinds not listed render unwrapped
TOKEN_FORMATS = {
    TokenKind.KEYWORD: 'keyword',
    TokenKind.STRING: 'string',
    TokenKind.NUMBER: 'number',
    TokenKind.FUNCTION_CALL: 'func_name',
    TokenKind.COMMENT: 'comment',
}


def render_token(token: Token, theme: Theme) -> str:
    escaped = escape_html(token.text)
    format_key = TOKEN_FORMATS.get(token.kind)
    if format_key is None:
        return escaped
    return theme.wrap(format_key, escaped)


def render_tokens(tokens: Iterable[Token], theme: Theme) -> str:
    return ''.join(render_token(token, theme) for token in tokens)

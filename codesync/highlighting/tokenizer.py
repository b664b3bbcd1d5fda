"""
Lexer for script fragments embedded in HTML.

The lexer walks a single cursor through the fragment. At every offset each
rule is tried, the longest match wins and ties go to the earlier rule, so
the resulting tokens always cover the fragment exactly once.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Sequence


class TokenKind(str, Enum):
    COMMENT = 'comment'
    STRING = 'string'
    NUMBER = 'number'
    IDENTIFIER = 'identifier'
    KEYWORD = 'keyword'
    FUNCTION_CALL = 'function-call'
    PUNCTUATION = 'punctuation'
    WHITESPACE = 'whitespace'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class LexRule:
    kind: TokenKind
    pattern: re.Pattern


SCRIPT_RULES = (
    # // line and /* block */ comments; an unterminated block runs to the end
    LexRule(TokenKind.COMMENT, re.compile(r'//[^\n]*|/\*[\s\S]*?(?:\*/|\Z)')),
    # Quoted strings skip escaped characters; only template literals span lines
    LexRule(TokenKind.STRING, re.compile(
        r'"(?:\\[\s\S]|[^"\\\n])*"'
        r"|'(?:\\[\s\S]|[^'\\\n])*'"
        r'|`(?:\\[\s\S]|[^`\\])*`')),
    LexRule(TokenKind.NUMBER, re.compile(
        r'0[xX][0-9a-fA-F_]+n?|0[oO][0-7_]+n?|0[bB][01_]+n?'
        r'|(?:\d[\d_]*(?:\.\d+)?|\.\d+)(?:[eE][-+]?\d+)?n?')),
    LexRule(TokenKind.IDENTIFIER, re.compile(r'(?:[^\W\d]|\$)[\w$]*')),
    LexRule(TokenKind.PUNCTUATION, re.compile(r'[+\-*/%=<>!&|^~?:;,.(){}\[\]]')),
    LexRule(TokenKind.WHITESPACE, re.compile(r'\s+')),
)

# Previous-token texts after which `name(` reads as a call
_CALL_PREFIXES = ('=', ':')


def tokenize(source: str, rules: Sequence[LexRule] = SCRIPT_RULES) -> List[Token]:
    """Splits source into contiguous, non-overlapping tokens."""
    tokens = []
    pos = 0
    length = len(source)
    while pos < length:
        best_kind: Optional[TokenKind] = None
        best_end = pos
        for rule in rules:
            match = rule.pattern.match(source, pos)
            if match and match.end() > best_end:
                best_kind, best_end = rule.kind, match.end()
        if best_kind is None:
            # Stray character (e.g. '@', '#', an unclosed quote)
            best_kind, best_end = TokenKind.PUNCTUATION, pos + 1
        tokens.append(Token(best_kind, source[pos:best_end], pos, best_end))
        pos = best_end
    return tokens


def _is_call_position(previous: Optional[Token], following: Optional[Token]) -> bool:
    if following is None or following.kind != TokenKind.PUNCTUATION or following.text != '(':
        return False
    return (previous is None
            or previous.kind == TokenKind.WHITESPACE
            or previous.text in _CALL_PREFIXES)


def classify(tokens: Sequence[Token], keywords: Iterable[str]) -> List[Token]:
    """
    Retags identifiers as keywords or function calls.

    An identifier is a function call when the next token is '(' and the
    previous token is missing, whitespace, '=' or ':'. Method calls such as
    a.b() stay identifiers.
    """
    keyword_set = keywords if isinstance(keywords, (set, frozenset)) else frozenset(keywords)
    classified = []
    for index, token in enumerate(tokens):
        if token.kind == TokenKind.IDENTIFIER:
            previous = tokens[index - 1] if index > 0 else None
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if token.text in keyword_set:
                token = replace(token, kind=TokenKind.KEYWORD)
            elif _is_call_position(previous, following):
                token = replace(token, kind=TokenKind.FUNCTION_CALL)
        classified.append(token)
    return classified


def tokenize_script(source: str, keywords: Iterable[str]) -> List[Token]:
    return classify(tokenize(source), keywords)

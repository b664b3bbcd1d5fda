"""
Shallow splitter that isolates <script> and <style> bodies.

The escaped document is cut into a flat list of segments: HtmlText runs
(still escaped, tags included) and the script/style bodies between them.
Each body is highlighted by its own language and spliced back in order, so
HTML rules never see embedded code and no sentinel text is needed.
"""

import itertools
import logging
import re
from dataclasses import dataclass
from typing import List, Union

from codesync.highlighting.escaper import unescape_html

# --- Patterns over escape_html() output ---
ATTRIBUTE_NAME = r'[\w:@.\-]+'
ATTRIBUTE_VALUE = r'(?:&quot;[\s\S]*?&quot;|&#x27;[\s\S]*?&#x27;|(?:(?!&gt;)\S)+)'
ATTRIBUTE_LIST = rf'(?:\s+{ATTRIBUTE_NAME}(?:\s*=\s*{ATTRIBUTE_VALUE})?)*'
TAG_NAME = r'[A-Za-z][\w\-]*'
COMMENT = r'&lt;!--[\s\S]*?--&gt;'

EMBEDDED_TAGS = ('script', 'style')


def _embedded_block(tag: str) -> str:
    # Body ends before the closing tag; the closing tag is left for the next text run
    return (rf'(?P<{tag}_open>&lt;{tag}\b{ATTRIBUTE_LIST}\s*&gt;)'
            rf'(?P<{tag}_body>[\s\S]*?)(?=&lt;/{tag}\s*&gt;)')


# Comments and ordinary tags are matched only so that they are skipped as a
# whole: a <script> inside a comment or an attribute value is not a region.
_SPLIT_RE = re.compile(
    rf'(?P<comment>{COMMENT})'
    rf'|{_embedded_block("script")}'
    rf'|{_embedded_block("style")}'
    rf'|(?P<tag>&lt;/?{TAG_NAME}{ATTRIBUTE_LIST}\s*/?&gt;)',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class HtmlText:
    text: str  # escaped


@dataclass(frozen=True)
class Region:
    index: int
    raw_body: str  # unescaped


@dataclass(frozen=True)
class ScriptRegion(Region):
    pass


@dataclass(frozen=True)
class StyleRegion(Region):
    pass


Segment = Union[HtmlText, ScriptRegion, StyleRegion]

_REGION_TYPES = {'script': ScriptRegion, 'style': StyleRegion}


def split_regions(escaped: str) -> List[Segment]:
    """Splits an escaped document into HTML text runs and embedded regions."""
    segments: List[Segment] = []
    counter = itertools.count()
    last_end = 0

    for match in _SPLIT_RE.finditer(escaped):
        tag = next((name for name in EMBEDDED_TAGS if match.group(f'{name}_body') is not None), None)
        if tag is None:
            continue

        text = escaped[last_end:match.end(f'{tag}_open')]
        if text:
            segments.append(HtmlText(text))
        body = unescape_html(match.group(f'{tag}_body'))
        segments.append(_REGION_TYPES[tag](next(counter), body))
        last_end = match.end()

    if last_end < len(escaped):
        segments.append(HtmlText(escaped[last_end:]))

    logging.debug(f"split_regions: {len(segments)} segments, "
                  f"{sum(isinstance(s, Region) for s in segments)} regions")
    return segments

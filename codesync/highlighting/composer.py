"""
Full highlighting pipeline: source buffer in, highlight markup out.
"""

import logging

from codesync.highlighting.config import DEFAULT_CONFIG, HighlightConfig
from codesync.highlighting.css import highlight_css, highlight_inline_styles
from codesync.highlighting.escaper import escape_html
from codesync.highlighting.html_structure import highlight_structure
from codesync.highlighting.regions import HtmlText, Region, ScriptRegion, StyleRegion, split_regions
from codesync.highlighting.renderer import render_tokens
from codesync.highlighting.tokenizer import tokenize_script


def _render_region(region: Region, config: HighlightConfig) -> str:
    try:
        if isinstance(region, ScriptRegion):
            return render_tokens(tokenize_script(region.raw_body, config.keywords), config.theme)
        if isinstance(region, StyleRegion):
            return highlight_css(region.raw_body, config)
    except Exception:
        logging.exception(f"Failed to highlight {type(region).__name__} #{region.index}, showing it as plain text")
    return escape_html(region.raw_body)


def highlight_document(source: str, config: HighlightConfig = DEFAULT_CONFIG) -> str:
    """
    Produces display markup for a mixed HTML/CSS/script buffer.

    Stages: escape the whole buffer, split out <script>/<style> bodies,
    annotate HTML structure, highlight each body in its own language,
    splice everything back in document order, then annotate inline style
    attributes. Never raises for str input; the result depends only on
    source and config.
    """
    segments = split_regions(escape_html(source))

    parts = []
    for segment in segments:
        if isinstance(segment, HtmlText):
            parts.append(highlight_structure(segment.text, config.theme))
        else:
            parts.append(_render_region(segment, config))

    return highlight_inline_styles(''.join(parts), config)

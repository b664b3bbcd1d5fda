"""
Highlighted view of the source buffer.

Displays the markup produced by highlight_document(). The markup is only
ever shown as rich text here; the document is never executed in this pane.
"""

import logging
import time

from codesync.components.base_preview_viewer import BasePreviewViewer
from codesync.highlighting import DEFAULT_CONFIG, HighlightConfig, highlight_document


class HighlightViewer(BasePreviewViewer):
    def __init__(self, colors, config: HighlightConfig = DEFAULT_CONFIG):
        self.config = config
        super().__init__(colors)

    def setup_custom_style(self):
        self.document().setDefaultStyleSheet(self.config.theme.stylesheet())

    def set_font_size(self, size: int):
        font = self.font()
        font.setPixelSize(size)
        self.setFont(font)
        self.document().setDefaultFont(font)

    def update_content(self, text: str):
        if not text:
            self.show_empty_message("HTML")
            return

        started = time.perf_counter()
        markup = highlight_document(text, self.config)
        logging.debug(f"HighlightViewer - highlighted {len(text)} chars in "
                      f"{(time.perf_counter() - started) * 1000:.1f} ms")

        self.preserve_scroll_position(lambda: self.setHtml(f"<pre>{markup}</pre>"))

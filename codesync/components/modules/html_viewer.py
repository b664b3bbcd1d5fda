"""
Live preview of the raw source buffer.

The buffer is rendered unmodified in its own QWebEngineView, isolated
from the host: scripts run, but the page cannot reach local files, remote
URLs, the clipboard or open new windows.
"""

import html
import logging
import os
import tempfile

from PyQt6.QtCore import QUrl
from PyQt6.QtWebEngineCore import QWebEngineSettings
from PyQt6.QtWebEngineWidgets import QWebEngineView

_SANDBOX_ATTRIBUTES = {
    QWebEngineSettings.WebAttribute.JavascriptEnabled: True,
    QWebEngineSettings.WebAttribute.LocalContentCanAccessFileUrls: False,
    QWebEngineSettings.WebAttribute.LocalContentCanAccessRemoteUrls: False,
    QWebEngineSettings.WebAttribute.JavascriptCanOpenWindows: False,
    QWebEngineSettings.WebAttribute.JavascriptCanAccessClipboard: False,
    QWebEngineSettings.WebAttribute.LocalStorageEnabled: False,
}


class HTMLViewer(QWebEngineView):
    """
    A QWebEngineView that renders the user's document in isolation.
    """
    def __init__(self, colors):
        super().__init__()
        self.colors = colors
        self.temp_file = None
        self.setup_sandbox()
        self.setStyleSheet(f"""
            QWebEngineView {{
                background-color: {self.colors["white"]};
                border: none;
            }}
        """)

    def setup_sandbox(self):
        settings = self.settings()
        for attribute, enabled in _SANDBOX_ATTRIBUTES.items():
            settings.setAttribute(attribute, enabled)

    def update_content(self, html_text: str):
        """
        Renders the buffer through a temporary file (setHtml is capped at 2 MB).
        """
        if not html_text.strip():
            self.setHtml("<p style='color: #858585; font-family: sans-serif;'>Nothing to preview yet.</p>")
            return

        try:
            self.cleanup()
            with tempfile.NamedTemporaryFile(mode='w', suffix='.html', delete=False, encoding='utf-8') as f:
                f.write(html_text)
                self.temp_file = f.name
            self.load(QUrl.fromLocalFile(self.temp_file))
        except OSError as e:
            logging.exception(f"HTMLViewer - failed to write preview file: {e}")
            self.setHtml(f"<h3>Preview unavailable</h3><p>{html.escape(str(e))}</p>")

    def cleanup(self):
        if self.temp_file and os.path.exists(self.temp_file):
            try:
                os.unlink(self.temp_file)
            except OSError as e:
                logging.warning(f"HTMLViewer - could not remove {self.temp_file}: {e}")
        self.temp_file = None

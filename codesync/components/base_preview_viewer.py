"""
Base viewer for read-only panes that show generated markup.
"""

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QTextBrowser


class BasePreviewViewer(QTextBrowser):
    """
    Read-only rich text pane with shared dark styling.
    Subclasses provide setup_custom_style() and update_content().
    """

    def __init__(self, colors):
        super().__init__()
        self.colors = colors
        self.setOpenLinks(False)
        self.setup_base_style()
        self.setup_custom_style()

    def setup_base_style(self):
        """Apply common base styling to all viewers"""
        base_style = f"""
            QTextBrowser {{
                font-family: 'Consolas', 'Menlo', 'Courier New', monospace;
                color: {self.colors["white"]};
                background-color: {self.colors["black"]};
                border: none;
                padding: 16px;
            }}

            QScrollBar:vertical {{
                background: {self.colors["black"]};
                width: 8px;
                border: none;
            }}

            QScrollBar::handle:vertical {{
                background: {self.colors["gray3"]};
                min-height: 30px;
                border: none;
            }}

            QScrollBar::handle:vertical:hover {{
                background: {self.colors["gray4"]};
            }}

            QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical,
            QScrollBar::add-page:vertical, QScrollBar::sub-page:vertical {{
                background: none;
                border: none;
            }}
        """
        self.setStyleSheet(base_style)

    def setup_custom_style(self):
        raise NotImplementedError("Subclasses must implement setup_custom_style()")

    def update_content(self, text: str):
        raise NotImplementedError("Subclasses must implement update_content()")

    def show_empty_message(self, what: str):
        self.setHtml(f"<p style='color: #858585;'>Start typing {what} here...</p>")

    def preserve_scroll_position(self, update_func):
        """Keep the scroll offset across a content replacement"""
        scrollbar = self.verticalScrollBar()
        scroll_pos = scrollbar.value()

        update_func()

        QTimer.singleShot(10, lambda: scrollbar.setValue(scroll_pos))

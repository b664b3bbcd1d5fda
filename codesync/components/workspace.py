"""
Editor workspace: source editor and highlighted view on the left, live
preview on the right, with debounced refresh of both views.
"""

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QSplitter, QVBoxLayout, QWidget

from codesync.components.code_editor import CodeEditor
from codesync.components.modules.highlight_viewer import HighlightViewer
from codesync.components.modules.html_viewer import HTMLViewer
from codesync.highlighting import DEFAULT_CONFIG

HIGHLIGHT_DELAY_MS = 120
PREVIEW_DELAY_MS = 300


class WorkspaceWidget(QWidget):
    def __init__(self, colors, config=None):
        super().__init__()
        self.colors = colors
        self.config = config
        self.live_preview_enabled = True

        # Debounce timers
        self.highlight_timer = QTimer(self)
        self.highlight_timer.setSingleShot(True)
        self.highlight_timer.timeout.connect(self._do_update_highlight)

        self.preview_timer = QTimer(self)
        self.preview_timer.setSingleShot(True)
        self.preview_timer.timeout.connect(self._do_update_preview)

        self.setup_ui()
        self.text_edit.textChanged.connect(self.schedule_refresh)

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = CodeEditor()
        self.highlight_view = HighlightViewer(self.colors, self.config or DEFAULT_CONFIG)
        self.preview = HTMLViewer(self.colors)

        self.code_splitter = QSplitter(Qt.Orientation.Vertical)
        self.code_splitter.addWidget(self.text_edit)
        self.code_splitter.addWidget(self.highlight_view)
        self.code_splitter.setSizes([300, 300])

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.code_splitter)
        self.splitter.addWidget(self.preview)
        self.splitter.setSizes([400, 400])

        self.splitter.setStyleSheet(f"""
            QSplitter::handle {{
                background-color: {self.colors["gray3"]};
                width: 1px;
            }}
            QSplitter::handle:hover {{
                background-color: {self.colors["blue"]};
            }}
        """)

        layout.addWidget(self.splitter)

    def schedule_refresh(self):
        self.highlight_timer.stop()
        self.highlight_timer.start(HIGHLIGHT_DELAY_MS)
        if self.live_preview_enabled:
            self.preview_timer.stop()
            self.preview_timer.start(PREVIEW_DELAY_MS)

    def refresh_now(self):
        self._do_update_highlight()
        self._do_update_preview()

    def set_live_preview(self, enabled: bool):
        self.live_preview_enabled = enabled
        if not enabled:
            self.preview_timer.stop()

    def set_font_size(self, size: int):
        self.text_edit.set_font_size(size)
        self.highlight_view.set_font_size(size)

    def _do_update_highlight(self):
        self.highlight_view.update_content(self.text_edit.toPlainText())

    def _do_update_preview(self):
        self.preview.update_content(self.text_edit.toPlainText())

import sys
import os
import platform
import logging
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QFileDialog, QMessageBox, QStatusBar, QLabel,
)
from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtCore import QSettings, QTimer

from codesync.collab.session import EditSession
from codesync.collab.transport import LoopbackHub, LoopbackTransport
from codesync.components.workspace import WorkspaceWidget
from codesync.highlighting.theme import DEFAULT_COLORS

# --- Configuration ---
APP_NAME = "CodeSync Studio"
ORG_NAME = "CodeSync"
DEFAULT_ENCODING = 'utf-8'
DEFAULT_DOCUMENT = "<h1>Hello World</h1>"
DEFAULT_USER = "You"
EXPORT_FILENAME = "code.html"
CONNECT_DELAY_MS = 2000
TYPING_INDICATOR_MS = 800
FONT_SIZE_DEFAULT = 14
FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 24
FONT_SIZE_STEP = 2


def clamp_font_size(size):
    return min(max(size, FONT_SIZE_MIN), FONT_SIZE_MAX)


class CodeSyncWindow(QMainWindow):
    def __init__(self, hub=None, user_id=DEFAULT_USER):
        super().__init__()
        self.settings = QSettings(ORG_NAME, APP_NAME)
        self.colors = dict(DEFAULT_COLORS)
        self.current_file = None
        self.font_size = FONT_SIZE_DEFAULT
        self._applying_remote = False

        self.hub = hub or LoopbackHub()
        self.transport = LoopbackTransport(self.hub)
        self.session = EditSession(user_id, self.transport, on_remote_code=self.apply_remote_code)
        self.transport.on_remote_edit(lambda event: self.refresh_presence())

        self.initUI()
        self.setupTimers()
        self.loadSettings()

        self.workspace.text_edit.setPlainText(DEFAULT_DOCUMENT)
        self.workspace.refresh_now()
        self.connect_transport()

    def initUI(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1200, 760)
        self.setStyleSheet(f"QMainWindow {{ background-color: {self.colors['black']}; }}")

        self.workspace = WorkspaceWidget(self.colors)
        self.setCentralWidget(self.workspace)

        editor = self.workspace.text_edit
        editor.setFont(QFont('Consolas' if platform.system() == 'Windows' else 'Menlo'))
        editor.textChanged.connect(self.on_text_changed)
        editor.cursorPositionChanged.connect(self.on_cursor_moved)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.connection_label = QLabel("Connecting to CodeSync Studio...")
        self.users_label = QLabel("0 users online")
        self.typing_label = QLabel("")
        self.font_label = QLabel(f"{self.font_size}px")
        self.status_bar.addWidget(self.connection_label)
        self.status_bar.addWidget(self.users_label)
        self.status_bar.addWidget(self.typing_label)
        self.status_bar.addWidget(QLabel(), 1)
        self.status_bar.addWidget(self.font_label)

        self.createMenus()

    def createMenus(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu('&File')
        self.add_menu_action(file_menu, '&Open...', self.open_file, QKeySequence.StandardKey.Open)
        self.add_menu_action(file_menu, '&Export...', self.export_file, 'Ctrl+E')
        file_menu.addSeparator()
        self.add_menu_action(file_menu, 'E&xit', self.close, QKeySequence.StandardKey.Quit)

        view_menu = menu_bar.addMenu('&View')
        self.add_menu_action(view_menu, 'Increase Font Size', self.increase_font_size, QKeySequence.StandardKey.ZoomIn)
        self.add_menu_action(view_menu, 'Decrease Font Size', self.decrease_font_size, QKeySequence.StandardKey.ZoomOut)
        view_menu.addSeparator()
        self.live_preview_action = self.add_menu_action(
            view_menu, '&Live Preview', self.toggle_live_preview, checkable=True, checked=True)
        self.add_menu_action(view_menu, '&Refresh Preview', self.workspace.refresh_now, 'F5')

    def add_menu_action(self, menu, text, slot, shortcut=None, checkable=False, checked=False):
        action = QAction(text, self)
        action.triggered.connect(slot)
        if shortcut:
            action.setShortcut(shortcut)
        action.setCheckable(checkable)
        if checkable:
            action.setChecked(checked)
        menu.addAction(action)
        return action

    def setupTimers(self):
        self.typing_timer = QTimer(self)
        self.typing_timer.setSingleShot(True)
        self.typing_timer.timeout.connect(lambda: self.typing_label.setText(""))

    # --- Collaboration ---
    def connect_transport(self):
        QTimer.singleShot(CONNECT_DELAY_MS, self.on_connected)

    def on_connected(self):
        self.transport.connect()
        self.connection_label.setText("Connected")
        self.refresh_presence()

    def refresh_presence(self):
        count = len(self.session.users)
        self.users_label.setText(f"{count} user{'s' if count != 1 else ''} online")
        self.workspace.text_edit.presence.set_cursors(self.session.remote_cursors.values())

    def apply_remote_code(self, content):
        self._applying_remote = True
        try:
            self.workspace.text_edit.setPlainText(content)
        finally:
            self._applying_remote = False

    def on_text_changed(self):
        if self._applying_remote:
            return
        editor = self.workspace.text_edit
        self.session.local_edit(editor.toPlainText(), editor.textCursor().position())
        self.typing_label.setText("typing...")
        self.typing_timer.stop()
        self.typing_timer.start(TYPING_INDICATOR_MS)

    def on_cursor_moved(self):
        if self._applying_remote:
            return
        cursor = self.workspace.text_edit.textCursor()
        self.session.move_cursor(cursor.position())
        if cursor.hasSelection():
            self.session.select(cursor.selectionStart(), cursor.selectionEnd())

    # --- Font size ---
    def set_font_size(self, size):
        self.font_size = clamp_font_size(size)
        self.workspace.set_font_size(self.font_size)
        self.font_label.setText(f"{self.font_size}px")

    def increase_font_size(self):
        self.set_font_size(self.font_size + FONT_SIZE_STEP)

    def decrease_font_size(self):
        self.set_font_size(self.font_size - FONT_SIZE_STEP)

    def toggle_live_preview(self):
        self.workspace.set_live_preview(self.live_preview_action.isChecked())

    # --- Files ---
    def open_file(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Open File", self.settings.value("lastDir", ""),
                                                   "HTML Files (*.html *.htm);;All Files (*)")
        if not file_path:
            return
        try:
            with open(file_path, 'r', encoding=DEFAULT_ENCODING, errors='replace') as f:
                content = f.read()
        except OSError as e:
            logging.exception(f"Failed to open '{file_path}': {e}")
            QMessageBox.critical(self, "Open Failed", f"Could not open file:\n{e}")
            return
        logging.info(f"Opened '{file_path}'")
        self.current_file = file_path
        self.settings.setValue("lastDir", os.path.dirname(file_path))
        self.workspace.text_edit.setPlainText(content)

    def export_file(self):
        default_path = os.path.join(self.settings.value("lastDir", ""), EXPORT_FILENAME)
        file_path, _ = QFileDialog.getSaveFileName(self, "Export", default_path,
                                                   "HTML Files (*.html);;All Files (*)")
        if not file_path:
            return
        try:
            with open(file_path, 'w', encoding=DEFAULT_ENCODING) as f:
                f.write(self.workspace.text_edit.toPlainText())
        except OSError as e:
            logging.exception(f"Failed to export '{file_path}': {e}")
            QMessageBox.critical(self, "Export Failed", f"Could not write file:\n{e}")
            return
        logging.info(f"Exported buffer to '{file_path}'")
        self.settings.setValue("lastDir", os.path.dirname(file_path))
        self.status_bar.showMessage(f"Exported to {file_path}", 3000)

    # --- Settings ---
    def loadSettings(self):
        if geom := self.settings.value("geometry"):
            self.restoreGeometry(geom)
        if sizes := self.settings.value("splitterSizes"):
            self.workspace.splitter.setSizes([int(s) for s in sizes])
        self.set_font_size(self.settings.value("font/size", FONT_SIZE_DEFAULT, type=int))

    def saveSettings(self):
        self.settings.setValue("geometry", self.saveGeometry())
        self.settings.setValue("splitterSizes", self.workspace.splitter.sizes())
        self.settings.setValue("font/size", self.font_size)

    def closeEvent(self, event):
        self.saveSettings()
        self.session.close()
        self.workspace.preview.cleanup()
        event.accept()


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    app = QApplication(sys.argv)
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)

    window = CodeSyncWindow()
    window.show()

    if len(sys.argv) > 1 and os.path.isfile(sys.argv[1]):
        path = sys.argv[1]
        with open(path, 'r', encoding=DEFAULT_ENCODING, errors='replace') as f:
            window.workspace.text_edit.setPlainText(f.read())
        window.current_file = path

    sys.exit(app.exec())


if __name__ == '__main__':
    main()

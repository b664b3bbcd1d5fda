"""
Source editor pane: plain text editing with line numbers and carets of
remote participants drawn on top.
"""

from PyQt6.QtCore import QRect, QRectF, QSize, Qt
from PyQt6.QtGui import QColor, QPainter, QTextFormat
from PyQt6.QtWidgets import QPlainTextEdit, QTextEdit, QWidget

from codesync.collab.presence import cursor_position


class LineNumberArea(QWidget):
    def __init__(self, editor):
        super().__init__(editor)
        self.editor = editor

    def sizeHint(self):
        return QSize(self.calculate_width(), 0)

    def calculate_width(self):
        digits = len(str(max(1, self.editor.blockCount())))
        return self.fontMetrics().horizontalAdvance('9' * digits) + 20

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(event.rect(), QColor("#21252b"))

        block = self.editor.firstVisibleBlock()
        top = int(self.editor.blockBoundingGeometry(block).translated(self.editor.contentOffset()).top())
        bottom = top + int(self.editor.blockBoundingRect(block).height())
        current_line = self.editor.textCursor().blockNumber()

        while block.isValid() and top <= event.rect().bottom():
            if block.isVisible() and bottom >= event.rect().top():
                painter.setPen(QColor("#c6c6c6") if block.blockNumber() == current_line else QColor("#858585"))
                painter.drawText(0, top, self.width() - 8, self.fontMetrics().height(),
                                 Qt.AlignmentFlag.AlignRight, str(block.blockNumber() + 1))

            block = block.next()
            top = bottom
            bottom = top + int(self.editor.blockBoundingRect(block).height())


class PresenceOverlay(QWidget):
    """Transparent layer over the editor viewport that paints remote carets."""

    def __init__(self, editor):
        super().__init__(editor.viewport())
        self.editor = editor
        self.cursors = []
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

    def set_cursors(self, cursors):
        self.cursors = list(cursors)
        self.update()

    def paintEvent(self, event):
        if not self.cursors:
            return
        painter = QPainter(self)
        metrics = self.editor.fontMetrics()
        text = self.editor.toPlainText()
        margin = self.editor.document().documentMargin()
        # QPlainTextEdit scrolls by whole lines
        scroll_y = self.editor.verticalScrollBar().value() * metrics.lineSpacing()

        for cursor in self.cursors:
            pos = cursor_position(
                text, cursor.position,
                font_size=metrics.height(),
                wrap_width=self.width(),
                padding=margin,
                char_width=metrics.horizontalAdvance('M'),
                line_height=metrics.lineSpacing(),
            )
            color = QColor(cursor.color)
            y = pos.y - scroll_y
            painter.fillRect(QRectF(pos.x, y, 2, metrics.height()), color)

            label_rect = QRectF(pos.x, y + metrics.height(), metrics.horizontalAdvance(cursor.user_id) + 8,
                                metrics.height() + 2)
            painter.fillRect(label_rect, color)
            painter.setPen(QColor("#ffffff"))
            painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, cursor.user_id)


class CodeEditor(QPlainTextEdit):
    def __init__(self):
        super().__init__()
        self.lineNumberArea = LineNumberArea(self)
        self.presence = PresenceOverlay(self)

        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.setPlaceholderText("Start typing your code here...")
        self.verticalScrollBar().setSingleStep(20)

        self.blockCountChanged.connect(self.update_line_numbers)
        self.updateRequest.connect(self.update_line_number_area)
        self.cursorPositionChanged.connect(self.highlight_current_line)

        self.update_line_numbers()
        self.highlight_current_line()

    def set_font_size(self, size: int):
        font = self.font()
        font.setPixelSize(size)
        self.setFont(font)
        self.update_line_numbers()

    def update_line_numbers(self):
        self.setViewportMargins(self.lineNumberArea.calculate_width(), 0, 0, 0)
        self.lineNumberArea.setFixedWidth(self.lineNumberArea.calculate_width())

    def update_line_number_area(self, rect, dy):
        if dy:
            self.lineNumberArea.scroll(0, dy)
        else:
            self.lineNumberArea.update(0, rect.y(), self.lineNumberArea.width(), rect.height())
        self.presence.update()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        cr = self.contentsRect()
        self.lineNumberArea.setGeometry(QRect(cr.left(), cr.top(),
                                              self.lineNumberArea.width(), cr.height()))
        self.presence.setGeometry(self.viewport().rect())

    def highlight_current_line(self):
        selections = []
        if not self.isReadOnly():
            selection = QTextEdit.ExtraSelection()
            selection.format.setBackground(QColor("#2c313c"))
            selection.format.setProperty(QTextFormat.Property.FullWidthSelection, True)
            selection.cursor = self.textCursor()
            selection.cursor.clearSelection()
            selections.append(selection)
        self.setExtraSelections(selections)

from PyQt6.QtCore import pyqtSignal as Signal, Qt
from PyQt6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextBlockFormat, QTextCharFormat, QTextCursor
from PyQt6.QtWidgets import QTextEdit

from livemark.document import DEFAULT_STYLE, HIGHLIGHT_STYLE
from livemark.fileio import MARKDOWN_EXTENSIONS, accepts_drop

STYLE_IDS = {DEFAULT_STYLE: 0, HIGHLIGHT_STYLE: 1}


def char_format_for(style):
    fmt = QTextCharFormat()
    fmt.setBackground(QColor(style.background))
    fmt.setForeground(QColor(style.foreground))
    fmt.setFontWeight(QFont.Weight.Bold if style.bold else QFont.Weight.Normal)
    return fmt


class CueHighlighter(QSyntaxHighlighter):
    # block state holds the painted style id
    def __init__(self, document):
        super().__init__(document)
        self.styles = []
        self.formats = {style: char_format_for(style) for style in STYLE_IDS}

    def style_at(self, number):
        if 0 <= number < len(self.styles):
            return self.styles[number]
        return DEFAULT_STYLE

    def highlightBlock(self, text):
        style = self.style_at(self.currentBlock().blockNumber())
        if text:
            self.setFormat(0, len(text), self.formats[style])
        self.setCurrentBlockState(STYLE_IDS[style])


class MarkdownEditorWidget(QTextEdit):
    zoomRequested = Signal(int)
    filesDropped = Signal(list)

    def __init__(self, font_size=14, extensions=MARKDOWN_EXTENSIONS, parent=None):
        super().__init__(parent)
        self.extensions = extensions
        self.setAcceptRichText(False)
        font = QFont("Consolas")
        font.setPixelSize(int(font_size))
        self.setFont(font)
        self.setTabStopDistance(48)
        self.setPlaceholderText("Type markdown here or drop a .md file...")
        self.setStyleSheet("background-color: #1E1E1E; color: #D4D4D4; border-radius: 10px; border: none;")
        self.highlighter = CueHighlighter(self.document())

    def set_text(self, text):
        self.setPlainText(text)

    def apply_block_styles(self, styles):
        self.highlighter.styles = list(styles)
        block = self.document().begin()
        while block.isValid():
            wanted = STYLE_IDS[self.highlighter.style_at(block.blockNumber())]
            if block.userState() != wanted:
                self.highlighter.rehighlightBlock(block)
            block = block.next()

    def apply_line_height(self, value):
        fmt = QTextBlockFormat()
        fmt.setLineHeight(float(value), QTextBlockFormat.LineHeightTypes.FixedHeight.value)
        cursor = QTextCursor(self.document())
        cursor.beginEditBlock()
        cursor.select(QTextCursor.SelectionType.Document)
        cursor.mergeBlockFormat(fmt)
        cursor.endEditBlock()

    def set_font_size(self, size):
        font = self.font()
        # pixels, to match the fixed pixel line height
        font.setPixelSize(int(size))
        self.setFont(font)

    def wheelEvent(self, event):
        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            delta = event.angleDelta().y() or event.pixelDelta().y()
            if delta:
                self.zoomRequested.emit(1 if delta > 0 else -1)
            event.accept()
            return
        super().wheelEvent(event)

    def _accept_drag(self, event):
        mime = event.mimeData()
        if not mime.hasUrls():
            return False
        if accepts_drop([url.toLocalFile() for url in mime.urls()], self.extensions):
            event.acceptProposedAction()
        else:
            event.ignore()
        return True

    def dragEnterEvent(self, event):
        if not self._accept_drag(event):
            super().dragEnterEvent(event)

    def dragMoveEvent(self, event):
        if not self._accept_drag(event):
            super().dragMoveEvent(event)

    def dropEvent(self, event):
        mime = event.mimeData()
        if mime.hasUrls():
            self.filesDropped.emit([url.toLocalFile() for url in mime.urls()])
            event.acceptProposedAction()
            return
        super().dropEvent(event)

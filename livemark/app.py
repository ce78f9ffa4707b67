import argparse
import logging
import sys

from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication

from livemark import __version__
from livemark.config import APPLICATION, ORGANIZATION, load_config
from livemark.controller import OpenFile
from livemark.ui.window import MarkdownEditor

logger = logging.getLogger(__name__)

DARK_THEME_QSS = """
QWidget {
    background-color: #181A1B;
    color: #E4E6EB;
}
QMainWindow, QDialog, QMenuBar, QMenu, QStatusBar {
    background-color: #181A1B;
    color: #E4E6EB;
    border: none;
}
QMenuBar::item {
    background: transparent;
    padding: 6px 18px;
    border-radius: 8px;
}
QMenuBar::item:selected, QMenu::item:selected {
    background-color: #31343B;
    color: #7FDBFF;
}
QMenu::item {
    padding: 6px 18px;
    border-radius: 6px;
}
QPushButton {
    background-color: #23272E;
    color: #E4E6EB;
    border-radius: 12px;
    padding: 10px 20px;
}
QPushButton:hover {
    background-color: #31343B;
    color: #7FDBFF;
}
QTextEdit {
    selection-background-color: #31343B;
    selection-color: #7FDBFF;
}
QStatusBar {
    color: #7FDBFF;
}
QSplitter::handle {
    background: #23272E;
    width: 4px;
}
QScrollBar:vertical, QScrollBar:horizontal {
    background: #23272E;
    border-radius: 8px;
    width: 14px;
    margin: 2px;
}
QScrollBar::handle:vertical, QScrollBar::handle:horizontal {
    background: #31343B;
    border-radius: 8px;
    min-height: 20px;
    min-width: 20px;
}
QScrollBar::handle:hover {
    background: #7FDBFF;
}
"""


def apply_modern_dark_theme(app):
    app.setStyle("Fusion")
    app.setFont(QFont("Segoe UI", 11))
    app.setStyleSheet(DARK_THEME_QSS)


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="livemark", description="Markdown editor with live preview")
    parser.add_argument("file", nargs="?", help="markdown file to open")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)
    app = QApplication(sys.argv[:1])
    app.setOrganizationName(ORGANIZATION)
    app.setApplicationName(APPLICATION)
    apply_modern_dark_theme(app)
    settings = QSettings(ORGANIZATION, APPLICATION)
    window = MarkdownEditor(load_config(settings), settings)
    if args.file:
        window.dispatch(OpenFile(args.file))
    window.show()
    logger.info("livemark %s started", __version__)
    sys.exit(app.exec())

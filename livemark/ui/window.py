import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QFileDialog, QHBoxLayout, QMainWindow, QMessageBox, QSplitter, QWidget

from livemark.config import save_config
from livemark.controller import (
    EditStateController, ExportHtml, FileDropped, OpenFile, Save, SaveAs, TextChanged, ToggleSimpleMode, Zoom,
)
from livemark.render import RenderPipeline
from livemark.session import EditSession
from livemark.ui.editor_widget import MarkdownEditorWidget
from livemark.ui.preview import PreviewSurface
from livemark.zoom import Direction, Pane, ZoomController

logger = logging.getLogger(__name__)

APP_TITLE = "Livemark"
MARKDOWN_FILTER = "Markdown Files (*.md);;All Files (*)"


class MarkdownEditor(QMainWindow):
    def __init__(self, config, settings):
        super().__init__()
        self.config = config
        self.settings = settings
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(800, 600)
        self.session = EditSession(
            simple_edit_mode=config.simple_edit_mode,
            editor_zoom=ZoomController(config.editor_zoom),
            preview_zoom=ZoomController(config.preview_zoom),
        )
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.editor = MarkdownEditorWidget(
            font_size=self.session.editor_zoom.scale, extensions=config.markdown_extensions,
        )
        self.preview = PreviewSurface(config.asset_folder)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setSizes([400, 400])
        self.main_layout.addWidget(self.splitter)
        self.pipeline = RenderPipeline(self.preview, on_error=self.show_render_error)
        self.controller = EditStateController(
            self.session, self.editor, self.pipeline,
            notify=self.show_notice, extensions=config.markdown_extensions,
        )
        self.create_menu()
        self.statusBar().showMessage("Ready")
        self.editor.apply_line_height(self.session.editor_zoom.line_height)
        self.preview.surfaceReady.connect(self.pipeline.surface_ready)
        self.preview.loadFailed.connect(self.pipeline.load_failed)
        self.editor.textChanged.connect(self.handle_text_changed)
        self.editor.zoomRequested.connect(self.handle_zoom_requested)
        self.editor.filesDropped.connect(lambda paths: self.dispatch(FileDropped(tuple(paths))))
        self.autosave_timer = QTimer(self)
        self.autosave_timer.timeout.connect(self.autosave)
        if config.autosave_interval_ms > 0:
            self.autosave_timer.start(config.autosave_interval_ms)
        self.load_settings()
        self.dispatch(TextChanged(""))

    def create_menu(self):
        file_menu = self.menuBar().addMenu("&File")
        open_action = QAction("&Open...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.open_file)
        file_menu.addAction(open_action)
        file_menu.addSeparator()
        save_action = QAction("&Save", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.save_file)
        file_menu.addAction(save_action)
        save_as_action = QAction("Save &As...", self)
        save_as_action.setShortcut("Ctrl+Shift+S")
        save_as_action.triggered.connect(self.save_file_as)
        file_menu.addAction(save_as_action)
        export_html_action = QAction("Export to &HTML...", self)
        export_html_action.triggered.connect(self.export_html)
        file_menu.addAction(export_html_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)
        view_menu = self.menuBar().addMenu("&View")
        self.simple_mode_action = QAction("&Simple edit mode", self)
        self.simple_mode_action.setCheckable(True)
        self.simple_mode_action.setChecked(self.session.simple_edit_mode)
        self.simple_mode_action.toggled.connect(lambda on: self.dispatch(ToggleSimpleMode(on)))
        view_menu.addAction(self.simple_mode_action)
        view_menu.addSeparator()
        for label, shortcut, direction in (
            ("Zoom &in preview", "Ctrl+=", Direction.INCREASE),
            ("Zoom &out preview", "Ctrl+-", Direction.DECREASE),
        ):
            action = QAction(label, self)
            action.setShortcut(shortcut)
            action.triggered.connect(lambda _=False, d=direction: self.dispatch(Zoom(d, Pane.PREVIEW)))
            view_menu.addAction(action)
        view_menu.addSeparator()
        editor_only_action = QAction("&Editor only", self)
        editor_only_action.triggered.connect(self.show_editor_only)
        view_menu.addAction(editor_only_action)
        preview_only_action = QAction("&Preview only", self)
        preview_only_action.triggered.connect(self.show_preview_only)
        view_menu.addAction(preview_only_action)
        split_view_action = QAction("Split &view", self)
        split_view_action.triggered.connect(self.show_split_view)
        view_menu.addAction(split_view_action)

    def dispatch(self, trigger):
        self.controller.dispatch(trigger)
        self.update_title()

    def update_title(self):
        name = self.session.file_name
        title = f"{APP_TITLE} - {name}" if name else APP_TITLE
        if self.session.dirty:
            title += " *"
        self.setWindowTitle(title)

    def handle_text_changed(self):
        self.dispatch(TextChanged(self.editor.toPlainText()))

    def handle_zoom_requested(self, step):
        direction = Direction.INCREASE if step > 0 else Direction.DECREASE
        self.dispatch(Zoom(direction, Pane.EDITOR))

    def show_notice(self, notice):
        if notice.kind == "error":
            QMessageBox.warning(self, "Error", notice.message)
        else:
            self.statusBar().showMessage(notice.message, 5000)

    def show_render_error(self, error):
        self.statusBar().showMessage(f"Preview not updated: {error}", 5000)

    def show_editor_only(self):
        self.splitter.setSizes([1, 0])

    def show_preview_only(self):
        self.splitter.setSizes([0, 1])

    def show_split_view(self):
        self.splitter.setSizes([1, 1])

    def open_file(self):
        if self.maybe_save():
            file_path, _ = QFileDialog.getOpenFileName(self, "Open file", "", MARKDOWN_FILTER)
            if file_path:
                self.dispatch(OpenFile(file_path))

    def save_file(self):
        if not self.session.file_path:
            return self.save_file_as()
        self.dispatch(Save())
        return self.report_saved()

    def save_file_as(self):
        file_path, _ = QFileDialog.getSaveFileName(self, "Save file", self.session.file_path or "", MARKDOWN_FILTER)
        if not file_path:
            return False
        self.dispatch(SaveAs(file_path))
        return self.report_saved()

    def report_saved(self):
        if self.session.dirty:
            return False
        self.statusBar().showMessage(f"Saved {self.session.file_name}", 3000)
        return True

    def autosave(self):
        if self.session.dirty and self.session.file_path:
            self.dispatch(Save())

    def export_html(self):
        file_path, _ = QFileDialog.getSaveFileName(self, "Export to HTML", "", "HTML Files (*.html);;All Files (*)")
        if file_path:
            self.dispatch(ExportHtml(file_path))

    def maybe_save(self):
        if not self.session.dirty:
            return True
        reply = QMessageBox.question(
            self, "Unsaved changes",
            "The document has been modified. Save changes?",
            QMessageBox.StandardButton.Save | QMessageBox.StandardButton.Discard | QMessageBox.StandardButton.Cancel
        )
        if reply == QMessageBox.StandardButton.Save:
            return self.save_file()
        elif reply == QMessageBox.StandardButton.Cancel:
            return False
        return True

    def closeEvent(self, event):
        if self.maybe_save():
            self.save_settings()
            event.accept()
        else:
            event.ignore()

    def load_settings(self):
        geometry = self.settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)
        splitter_sizes = self.settings.value("splitterSizes")
        if splitter_sizes and isinstance(splitter_sizes, list) and all(isinstance(size, int) for size in splitter_sizes):
            self.splitter.setSizes(splitter_sizes)

    def save_settings(self):
        self.config.simple_edit_mode = self.session.simple_edit_mode
        self.settings.setValue("geometry", self.saveGeometry())
        self.settings.setValue("splitterSizes", self.splitter.sizes())
        save_config(self.settings, self.config)

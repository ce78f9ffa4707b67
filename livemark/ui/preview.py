import logging
import os

from PyQt6.QtCore import pyqtSignal as Signal, QUrl
from PyQt6.QtWebEngineCore import QWebEngineSettings
from PyQt6.QtWebEngineWidgets import QWebEngineView

logger = logging.getLogger(__name__)


class PreviewSurface(QWebEngineView):
    """Web view the rendered page is pushed into.

    ``surfaceReady`` fires once, after the initial blank page has loaded;
    documents loaded before that would be lost. A document arriving while
    another is still loading waits for it instead of cancelling it, and only
    the newest waiting document is kept. Relative image and font references
    resolve against ``asset_folder``.
    """

    surfaceReady = Signal()
    loadFailed = Signal(str)

    def __init__(self, asset_folder, parent=None):
        super().__init__(parent)
        self.ready = False
        self._loading = True
        self._next = None
        self._zoom_factor = 1.0
        self.set_asset_folder(asset_folder)
        settings = self.settings()
        settings.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessFileUrls, True)
        settings.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessRemoteUrls, True)
        self.setAcceptDrops(False)
        self.loadFinished.connect(self._on_load_finished)
        self.setHtml("<!DOCTYPE html><html><body></body></html>", self.base_url)

    def set_asset_folder(self, folder):
        self.base_url = QUrl.fromLocalFile(f"{os.path.abspath(folder)}/")

    def load_document(self, html):
        if self._loading:
            self._next = html
            return
        self._loading = True
        self.setHtml(html, self.base_url)

    def set_zoom_factor(self, factor):
        self._zoom_factor = max(0.25, min(5.0, float(factor)))
        self.setZoomFactor(self._zoom_factor)

    def _on_load_finished(self, ok):
        self._loading = False
        # a new page may come back at the default zoom
        self.setZoomFactor(self._zoom_factor)
        if not self.ready:
            self.ready = True
            logger.debug("preview surface ready")
            self.surfaceReady.emit()
        elif not ok and self._next is None:
            self.loadFailed.emit("Preview load failed")
        pending, self._next = self._next, None
        if pending is not None:
            self.load_document(pending)

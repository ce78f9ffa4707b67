import logging
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass

from livemark.cues import apply_cues, clear_cues
from livemark.errors import DropRejected, FileAccessError, RenderError
from livemark.fileio import MARKDOWN_EXTENSIONS, read_text, validate_drop, write_text
from livemark.session import EditState
from livemark.zoom import Direction, Pane

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextChanged:
    text: str


@dataclass(frozen=True)
class FileDropped:
    paths: tuple


@dataclass(frozen=True)
class Zoom:
    direction: Direction
    pane: Pane = Pane.EDITOR


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class SaveAs:
    path: str


@dataclass(frozen=True)
class OpenFile:
    path: str


@dataclass(frozen=True)
class ToggleSimpleMode:
    enabled: bool


@dataclass(frozen=True)
class ExportHtml:
    path: str


@dataclass(frozen=True)
class Notice:
    kind: str
    message: str


class EditStateController:
    """Turns typed triggers from the window into buffer, view and preview updates.

    The controller is the only writer of the session. Its state is ``IDLE``
    between triggers; a text change that arrives while it is busy was caused
    by the controller itself and is dropped, any other trigger is queued and
    handled once the current one finishes.
    """

    def __init__(self, session, view, pipeline, notify=None, extensions=MARKDOWN_EXTENSIONS):
        self.session = session
        self.view = view
        self.pipeline = pipeline
        self.notify = notify
        self.extensions = extensions
        self._queue = deque()
        self._handlers = {
            TextChanged: self._on_text_changed,
            FileDropped: self._on_file_dropped,
            Zoom: self._on_zoom,
            Save: self._on_save,
            SaveAs: self._on_save_as,
            OpenFile: self._on_open_file,
            ToggleSimpleMode: self._on_toggle_simple_mode,
            ExportHtml: self._on_export_html,
        }

    @property
    def state(self):
        return self.session.state

    def dispatch(self, trigger):
        """Handle one trigger; returns True when it was processed now."""
        if self.session.busy:
            if isinstance(trigger, TextChanged):
                logger.debug("text change suppressed while %s", self.session.state.value)
            else:
                logger.debug("queueing %s while %s", type(trigger).__name__, self.session.state.value)
                self._queue.append(trigger)
            return False
        handler = self._handlers.get(type(trigger))
        if handler is None:
            raise TypeError(f"unknown trigger: {trigger!r}")
        logger.debug("dispatch %s", type(trigger).__name__)
        try:
            handler(trigger)
        except DropRejected as exc:
            logger.info("drop rejected: %s", exc.reason)
            self._notify("info", exc.reason)
        except FileAccessError as exc:
            logger.warning("file access failed: %s", exc)
            self._notify("error", str(exc.error))
        while self._queue and not self.session.busy:
            self.dispatch(self._queue.popleft())
        return True

    @contextmanager
    def _entered(self, state):
        self.session.state = state
        try:
            yield
        finally:
            self.session.state = EditState.IDLE

    def _notify(self, kind, message):
        if self.notify is not None:
            self.notify(Notice(kind, message))

    def _apply_cues_and_render(self):
        buffer = self.session.buffer
        with self._entered(EditState.APPLYING_CUES):
            if not self.session.simple_edit_mode:
                apply_cues(buffer)
                self.view.apply_block_styles(buffer.styles())
        with self._entered(EditState.RENDERING):
            self.pipeline.render(buffer.text)

    def _load(self, path):
        text = read_text(path)
        session = self.session
        with self._entered(EditState.LOADING):
            session.buffer.replace_text(text)
            self.view.set_text(text)
            self.view.apply_line_height(session.editor_zoom.line_height)
            session.file_path = path
            session.dirty = False
        self._apply_cues_and_render()

    def _on_text_changed(self, trigger):
        if self.session.buffer.set_text(trigger.text):
            self.session.dirty = True
        self._apply_cues_and_render()

    def _on_file_dropped(self, trigger):
        self._load(validate_drop(trigger.paths, self.extensions))

    def _on_open_file(self, trigger):
        self._load(validate_drop([trigger.path], self.extensions))

    def _on_zoom(self, trigger):
        zoom = self.session.zoom_for(trigger.pane)
        with self._entered(EditState.ZOOMING):
            if not zoom.step(trigger.direction):
                return
            if trigger.pane is Pane.EDITOR:
                zoom.apply_to(self.session.buffer)
                self.view.set_font_size(zoom.scale)
                self.view.apply_line_height(zoom.line_height)
            else:
                self.pipeline.set_zoom_factor(zoom.factor)

    def _on_save(self, trigger):
        if not self.session.file_path:
            logger.debug("save ignored, no file associated")
            return
        write_text(self.session.file_path, self.session.buffer.text)
        self.session.dirty = False

    def _on_save_as(self, trigger):
        write_text(trigger.path, self.session.buffer.text)
        self.session.file_path = trigger.path
        self.session.dirty = False

    def _on_toggle_simple_mode(self, trigger):
        session = self.session
        if session.simple_edit_mode == trigger.enabled:
            return
        session.simple_edit_mode = trigger.enabled
        with self._entered(EditState.APPLYING_CUES):
            if trigger.enabled:
                clear_cues(session.buffer)
            else:
                apply_cues(session.buffer)
            self.view.apply_block_styles(session.buffer.styles())

    def _on_export_html(self, trigger):
        try:
            html = self.pipeline.renderer.render(self.session.buffer.text)
        except RenderError as exc:
            logger.exception("export failed")
            self._notify("error", str(exc))
            return
        write_text(trigger.path, html)

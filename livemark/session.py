import os
from dataclasses import dataclass, field
from enum import Enum

from livemark.document import DocumentBuffer
from livemark.zoom import EDITOR_ZOOM, PREVIEW_ZOOM, Pane, ZoomController


class EditState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    APPLYING_CUES = "applying-cues"
    RENDERING = "rendering"
    ZOOMING = "zooming"


PROGRAMMATIC_STATES = (EditState.LOADING, EditState.APPLYING_CUES)


@dataclass
class EditSession:
    buffer: DocumentBuffer = field(default_factory=DocumentBuffer)
    file_path: str | None = None
    dirty: bool = False
    simple_edit_mode: bool = True
    editor_zoom: ZoomController = field(default_factory=lambda: ZoomController(EDITOR_ZOOM))
    preview_zoom: ZoomController = field(default_factory=lambda: ZoomController(PREVIEW_ZOOM))
    state: EditState = EditState.IDLE

    def __post_init__(self):
        self.editor_zoom.apply_to(self.buffer)

    @property
    def programmatic_edit(self):
        return self.state in PROGRAMMATIC_STATES

    @property
    def zoom_in_progress(self):
        return self.state is EditState.ZOOMING

    @property
    def busy(self):
        return self.state is not EditState.IDLE

    @property
    def file_name(self):
        return os.path.basename(self.file_path) if self.file_path else None

    def zoom_for(self, pane):
        return self.editor_zoom if pane is Pane.EDITOR else self.preview_zoom

import pytest

from livemark.controller import EditStateController, TextChanged
from livemark.render import RenderPipeline
from livemark.session import EditSession


class RecordingView:
    """Stands in for the editor widget; echoes programmatic edits like Qt does."""

    def __init__(self):
        self.controller = None
        self.texts = []
        self.style_calls = []
        self.line_heights = []
        self.font_sizes = []

    def _echo(self, text):
        if self.controller is not None:
            self.controller.dispatch(TextChanged(text))

    def set_text(self, text):
        self.texts.append(text)
        self._echo(text)

    def apply_block_styles(self, styles):
        self.style_calls.append(list(styles))
        self._echo(self.controller.session.buffer.text if self.controller else "")

    def apply_line_height(self, value):
        self.line_heights.append(value)
        self._echo(self.controller.session.buffer.text if self.controller else "")

    def set_font_size(self, size):
        self.font_sizes.append(size)


class RecordingSurface:
    def __init__(self, fail=False):
        self.documents = []
        self.zoom_factors = []
        self.fail = fail

    def load_document(self, html):
        if self.fail:
            raise RuntimeError("surface gone")
        self.documents.append(html)

    def set_zoom_factor(self, factor):
        self.zoom_factors.append(factor)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def pipeline(surface):
    pipeline = RenderPipeline(surface)
    pipeline.surface_ready()
    return pipeline


@pytest.fixture
def session():
    return EditSession(simple_edit_mode=False)


@pytest.fixture
def controller(session, view, pipeline, notices):
    controller = EditStateController(session, view, pipeline, notify=notices.append)
    view.controller = controller
    return controller

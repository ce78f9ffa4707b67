import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Direction(Enum):
    INCREASE = 1
    DECREASE = -1


class Pane(Enum):
    EDITOR = "editor"
    PREVIEW = "preview"


@dataclass(frozen=True)
class ZoomRange:
    default: float
    minimum: float
    maximum: float
    step: float = 2
    line_height_multiplier: float = 1.5

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError(f"zoom minimum {self.minimum} exceeds maximum {self.maximum}")
        if self.step <= 0:
            raise ValueError("zoom step must be positive")

    def clamp(self, value):
        return max(self.minimum, min(self.maximum, value))


EDITOR_ZOOM = ZoomRange(default=14, minimum=10, maximum=60)
PREVIEW_ZOOM = ZoomRange(default=16, minimum=6, maximum=48)


def next_scale(current, direction, zoom_range):
    return zoom_range.clamp(current + direction.value * zoom_range.step)


class ZoomController:
    def __init__(self, zoom_range, scale=None):
        self.range = zoom_range
        self.scale = zoom_range.clamp(zoom_range.default if scale is None else scale)

    @property
    def line_height(self):
        return self.scale * self.range.line_height_multiplier

    @property
    def factor(self):
        return self.scale / self.range.default

    def step(self, direction):
        new_scale = next_scale(self.scale, direction, self.range)
        if new_scale == self.scale:
            return False
        logger.debug("zoom %s -> %s", self.scale, new_scale)
        self.scale = new_scale
        return True

    def apply_to(self, buffer):
        if buffer is not None:
            buffer.set_line_height(self.line_height)
        return self.line_height

import logging
import os
from dataclasses import dataclass, field, replace

from livemark.fileio import MARKDOWN_EXTENSIONS
from livemark.zoom import EDITOR_ZOOM, PREVIEW_ZOOM, ZoomRange

logger = logging.getLogger(__name__)

ORGANIZATION = "Livemark"
APPLICATION = "Livemark"


@dataclass
class EditorConfig:
    editor_zoom: ZoomRange = EDITOR_ZOOM
    preview_zoom: ZoomRange = PREVIEW_ZOOM
    simple_edit_mode: bool = True
    asset_folder: str = field(default_factory=os.getcwd)
    autosave_interval_ms: int = 0
    markdown_extensions: tuple = MARKDOWN_EXTENSIONS


def _load_range(settings, prefix, fallback):
    values = {}
    for name in ("default", "minimum", "maximum", "step"):
        values[name] = settings.value(f"{prefix}/{name}", getattr(fallback, name), type=float)
    try:
        zoom_range = replace(fallback, **values)
    except ValueError as exc:
        logger.warning("ignoring stored %s zoom range: %s", prefix, exc)
        return fallback
    return replace(zoom_range, default=zoom_range.clamp(zoom_range.default))


def load_config(settings):
    config = EditorConfig()
    config.editor_zoom = _load_range(settings, "editorZoom", config.editor_zoom)
    config.preview_zoom = _load_range(settings, "previewZoom", config.preview_zoom)
    config.simple_edit_mode = settings.value("simpleEditMode", config.simple_edit_mode, type=bool)
    asset_folder = settings.value("assetFolder", "", type=str)
    if asset_folder and os.path.isdir(asset_folder):
        config.asset_folder = asset_folder
    config.autosave_interval_ms = max(0, settings.value("autosaveIntervalMs", 0, type=int))
    return config


def save_config(settings, config):
    for prefix, zoom_range in (("editorZoom", config.editor_zoom), ("previewZoom", config.preview_zoom)):
        for name in ("default", "minimum", "maximum", "step"):
            settings.setValue(f"{prefix}/{name}", getattr(zoom_range, name))
    settings.setValue("simpleEditMode", config.simple_edit_mode)
    settings.setValue("assetFolder", config.asset_folder)
    settings.setValue("autosaveIntervalMs", config.autosave_interval_ms)

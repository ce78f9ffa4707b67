import logging

from livemark.classifier import CueCategory, classify_line

logger = logging.getLogger(__name__)


def apply_cues(buffer, simple_edit_mode=False):
    if not buffer or simple_edit_mode:
        return []
    changed = []
    for index, block in enumerate(buffer.blocks):
        if block.set_category(classify_line(block.text)):
            changed.append(index)
    logger.debug("cue pass over %d blocks, %d changed", len(buffer), len(changed))
    return changed


def clear_cues(buffer):
    if not buffer:
        return []
    changed = []
    for index, block in enumerate(buffer.blocks):
        if block.set_category(CueCategory.NONE):
            changed.append(index)
    return changed

import re
from enum import Enum


class CueCategory(Enum):
    NONE = "none"
    HEADING = "heading"
    IMAGE_REF = "image-ref"


HEADING_PATTERN = re.compile(r"^#{1,5}\s")
IMAGE_REF_PATTERN = re.compile(r"^!\[.*?\]\([^)]*\)")

RULES = (
    (HEADING_PATTERN, CueCategory.HEADING),
    (IMAGE_REF_PATTERN, CueCategory.IMAGE_REF),
)


def classify_line(text):
    """Return the cue category of a single editor line.

    Leading whitespace is ignored. Rules are tried in order and the first
    match wins, so a line can only ever carry one category.
    """
    line = text.lstrip()
    for pattern, category in RULES:
        if pattern.match(line):
            return category
    return CueCategory.NONE

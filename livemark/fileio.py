import logging
import os

from livemark.errors import DropRejected, FileAccessError

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md",)


def is_markdown_path(path, extensions=MARKDOWN_EXTENSIONS):
    return os.path.splitext(path)[1].lower() in extensions


def validate_drop(paths, extensions=MARKDOWN_EXTENSIONS):
    paths = list(paths or ())
    if len(paths) != 1:
        raise DropRejected(f"drop exactly one file (got {len(paths)})")
    path = paths[0]
    if not is_markdown_path(path, extensions):
        raise DropRejected(f"not a markdown file: {os.path.basename(path)}")
    return path


def accepts_drop(paths, extensions=MARKDOWN_EXTENSIONS):
    try:
        validate_drop(paths, extensions)
    except DropRejected:
        return False
    return True


def read_text(path):
    # plain open() does not take an exclusive lock, other writers keep working
    try:
        with open(path, "r", encoding="utf-8") as file:
            text = file.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(path, exc) from exc
    logger.info("loaded %s (%d chars)", path, len(text))
    return text


def write_text(path, text):
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(text)
    except OSError as exc:
        raise FileAccessError(path, exc) from exc
    logger.info("saved %s", path)

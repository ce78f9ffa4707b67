from dataclasses import dataclass, field

from livemark.classifier import CueCategory


@dataclass(frozen=True)
class BlockStyle:
    background: str
    foreground: str
    bold: bool


DEFAULT_STYLE = BlockStyle(background="#1E1E1E", foreground="#D4D4D4", bold=False)
HIGHLIGHT_STYLE = BlockStyle(background="#23272E", foreground="#569CD6", bold=True)


def style_for(category):
    if category is CueCategory.NONE:
        return DEFAULT_STYLE
    return HIGHLIGHT_STYLE


@dataclass
class Block:
    """One line of the editable document.

    ``style`` is only ever derived from ``category`` through :meth:`set_category`.
    ``line_height`` belongs to zoom and is never touched by cue application.
    """

    text: str
    category: CueCategory = CueCategory.NONE
    line_height: float | None = None
    _style: BlockStyle = field(default=DEFAULT_STYLE, repr=False)

    @property
    def style(self):
        return self._style

    def set_category(self, category):
        previous = self._style
        self.category = category
        self._style = style_for(category)
        return previous != self._style


class DocumentBuffer:
    def __init__(self, text=""):
        self.line_height = None
        self.blocks = []
        self.set_text(text)

    def __len__(self):
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    @property
    def text(self):
        return "\n".join(block.text for block in self.blocks)

    def set_text(self, text):
        """Replace the block texts, keeping cue state for lines that did not change.

        Returns True when the text actually differed.
        """
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if [block.text for block in self.blocks] == lines:
            return False
        old = self.blocks
        blocks = []
        for index, line in enumerate(lines):
            if index < len(old) and old[index].text == line:
                blocks.append(old[index])
            else:
                blocks.append(Block(line, line_height=self.line_height))
        self.blocks = blocks
        return True

    def replace_text(self, text):
        self.blocks = []
        self.set_text(text)

    def set_line_height(self, value):
        self.line_height = value
        for block in self.blocks:
            block.line_height = value

    def styles(self):
        return [block.style for block in self.blocks]

from livemark.classifier import CueCategory
from livemark.cues import apply_cues, clear_cues
from livemark.document import DEFAULT_STYLE, HIGHLIGHT_STYLE, DocumentBuffer


def test_apply_cues_sets_styles_from_categories():
    buffer = DocumentBuffer("# Title\nbody\n![pic](a.png)")
    changed = apply_cues(buffer)
    assert changed == [0, 2]
    assert [block.category for block in buffer] == [
        CueCategory.HEADING, CueCategory.NONE, CueCategory.IMAGE_REF,
    ]
    assert buffer.styles() == [HIGHLIGHT_STYLE, DEFAULT_STYLE, HIGHLIGHT_STYLE]


def test_apply_cues_is_idempotent():
    buffer = DocumentBuffer("# a\nb\n## c")
    apply_cues(buffer)
    first = buffer.styles()
    assert apply_cues(buffer) == []
    assert buffer.styles() == first


def test_cues_never_touch_text_or_line_height():
    buffer = DocumentBuffer("  # spaced\ntext")
    buffer.set_line_height(21.0)
    apply_cues(buffer)
    assert buffer.text == "  # spaced\ntext"
    assert [block.line_height for block in buffer] == [21.0, 21.0]
    assert buffer.blocks[0].style is HIGHLIGHT_STYLE


def test_simple_edit_mode_skips_classification():
    buffer = DocumentBuffer("# Title")
    assert apply_cues(buffer, simple_edit_mode=True) == []
    assert buffer.blocks[0].category is CueCategory.NONE


def test_empty_or_missing_buffer_is_a_no_op():
    assert apply_cues(None) == []
    assert clear_cues(None) == []
    assert apply_cues(DocumentBuffer("")) == []


def test_clear_cues_resets_highlighted_blocks():
    buffer = DocumentBuffer("# a\nb")
    apply_cues(buffer)
    assert clear_cues(buffer) == [0]
    assert buffer.styles() == [DEFAULT_STYLE, DEFAULT_STYLE]


def test_edited_line_is_reclassified():
    buffer = DocumentBuffer("# a\nb")
    apply_cues(buffer)
    buffer.set_text("a\nb")
    apply_cues(buffer)
    assert buffer.styles() == [DEFAULT_STYLE, DEFAULT_STYLE]


def test_heading_marker_with_only_trailing_space_is_cued():
    buffer = DocumentBuffer("## \n# Title   ")
    assert apply_cues(buffer) == [0, 1]
    assert [block.category for block in buffer] == [CueCategory.HEADING, CueCategory.HEADING]
    assert buffer.styles() == [HIGHLIGHT_STYLE, HIGHLIGHT_STYLE]

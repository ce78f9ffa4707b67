import pytest

from livemark.classifier import CueCategory, classify_line


@pytest.mark.parametrize("line", ["# Title", "## Sub", "##### Five", "#\tTab", "   ### indented", "# "])
def test_heading_lines(line):
    assert classify_line(line) is CueCategory.HEADING


@pytest.mark.parametrize("line", ["![logo](img/logo.png)", "![](a.png) trailing text", "  ![alt]()"])
def test_image_reference_lines(line):
    assert classify_line(line) is CueCategory.IMAGE_REF


@pytest.mark.parametrize("line", [
    "",
    "plain text",
    "###### six hashes",
    "#no-space",
    "text with ![img](x.png) inside",
    "[link](x.md)",
    "![broken](",
    "- list item",
])
def test_uncued_lines(line):
    assert classify_line(line) is CueCategory.NONE


def test_first_matching_rule_wins():
    assert classify_line("# ![alt](pic.png)") is CueCategory.HEADING
    assert classify_line("![# not a heading](pic.png)") is CueCategory.IMAGE_REF

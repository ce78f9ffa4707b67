import logging

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from livemark.errors import RenderError

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif;
            font-size: 16px;
            line-height: 1.6;
            color: #24292e;
            background: #ffffff;
            padding: 20px;
            max-width: 800px;
            margin: 0 auto;
        }}
        h1, h2, h3, h4, h5, h6 {{
            margin-top: 24px;
            margin-bottom: 16px;
            font-weight: 600;
            line-height: 1.25;
            color: #0366d6;
        }}
        h1 {{ font-size: 2em; padding-bottom: .3em; border-bottom: 1px solid #eaecef; }}
        h2 {{ font-size: 1.5em; padding-bottom: .3em; border-bottom: 1px solid #eaecef; }}
        h3 {{ font-size: 1.25em; }}
        h4 {{ font-size: 1em; }}
        h5 {{ font-size: .875em; }}
        h6 {{ font-size: .85em; color: #6a737d; }}
        p, blockquote, ul, ol, table {{
            margin: 16px 0;
        }}
        li {{ margin: 4px 0; }}
        code {{
            font-family: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, Courier, monospace;
            padding: 0.2em 0.4em;
            font-size: 85%;
            background-color: rgba(27, 31, 35, 0.05);
            border-radius: 3px;
        }}
        pre {{
            font-family: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, Courier, monospace;
            padding: 16px;
            overflow: auto;
            font-size: 85%;
            line-height: 1.45;
            background-color: #f6f8fa;
            border-radius: 6px;
        }}
        pre code {{
            background-color: transparent;
            padding: 0;
            font-size: 100%;
            white-space: pre;
        }}
        blockquote {{
            padding: 0 1em;
            color: #6a737d;
            border-left: 0.25em solid #dfe2e5;
        }}
        ul, ol {{ padding-left: 2em; }}
        a {{ color: #0366d6; text-decoration: none; }}
        a:hover {{ text-decoration: underline; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ padding: 6px 13px; border: 1px solid #dfe2e5; }}
        th {{ background: #f6f8fa; font-weight: 600; }}
        tr:nth-child(even) {{ background: #fafbfc; }}
        hr {{ border: 0; border-top: 1px solid #eaecef; margin: 24px 0; }}
        img {{ max-width: 100%; height: auto; }}
        .task-list-item {{ list-style-type: none; }}
        .task-list-item input {{ margin-right: .5em; }}
    </style>
</head>
<body>
<div id="content">
{body}
</div>
</body>
</html>
"""


def highlight_code(code, lang, attrs):
    if not lang:
        return ""
    try:
        lexer = get_lexer_by_name(lang, stripall=True)
    except ClassNotFound:
        return ""
    return highlight(code, lexer, HtmlFormatter(nowrap=True, noclasses=True))


class MarkdownRenderer:
    """Buffer text to a complete, styled HTML page.

    Output depends only on the input text, so equal text always yields an
    identical page.
    """

    def __init__(self):
        self.md = MarkdownIt("commonmark", {"html": True, "typographer": True})
        self.md.enable(["table", "strikethrough"])
        self.md.use(tasklists_plugin)
        self.md.options.highlight = highlight_code

    def convert(self, text):
        return self.md.render(text)

    def wrap(self, fragment):
        return PAGE_TEMPLATE.format(body=fragment)

    def render(self, text):
        try:
            fragment = self.convert(text)
        except Exception as exc:
            raise RenderError(f"markdown conversion failed: {exc}") from exc
        return self.wrap(fragment)


class RenderPipeline:
    """Pushes rendered pages to a display surface.

    Every delivery is a full ``load_document`` replace. A page equal to the
    last delivered one is skipped. Until the surface reports ready, only the
    newest page is kept and delivered by :meth:`surface_ready`. Failures go
    to ``on_error`` and never reach the caller.
    """

    def __init__(self, surface, renderer=None, on_error=None):
        self.surface = surface
        self.renderer = renderer or MarkdownRenderer()
        self.on_error = on_error
        self.ready = False
        self.snapshot = None
        self._pending = None

    def render(self, text):
        try:
            html = self.renderer.render(text)
        except RenderError as exc:
            logger.exception("render failed; keeping previous preview")
            self._report(exc)
            return False
        return self.deliver(html)

    def deliver(self, html):
        if not self.ready:
            logger.debug("display surface not ready; queueing render")
            self._pending = html
            return False
        if html == self.snapshot:
            logger.debug("render skipped, page unchanged")
            return False
        try:
            self.surface.load_document(html)
        except Exception as exc:
            logger.exception("display surface rejected the document")
            self._report(RenderError(str(exc)))
            return False
        self.snapshot = html
        return True

    def surface_ready(self):
        self.ready = True
        pending, self._pending = self._pending, None
        if pending is not None:
            self.deliver(pending)

    def load_failed(self, message="preview load failed"):
        """Called by the surface when an accepted document failed to display."""
        logger.warning(message)
        self.snapshot = None
        self._report(RenderError(message))

    def set_zoom_factor(self, factor):
        self.surface.set_zoom_factor(factor)

    def _report(self, error):
        if self.on_error is not None:
            self.on_error(error)

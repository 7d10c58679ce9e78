"""
HTML rendering for Wiki and Markdown input.

Markdown rendering is delegated to markdown-it-py. Wiki input is first
converted to Markdown, then rendered. Renderer options are explicit values
passed at construction; nothing here touches global renderer state.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .converters.wiki_converter import to_markdown


@dataclass(frozen=True)
class RenderOptions:
    """Options handed to the Markdown renderer."""
    breaks: bool = True  # Single newlines become <br>
    typographer: bool = True  # Smart quotes and dashes
    tables: bool = True
    strikethrough: bool = True
    html: bool = True  # Pass <ins>/<sup>/<sub> through


class MarkdownRenderer:
    """Renders Markdown to HTML with markdown-it-py."""

    def __init__(self, options: Optional[RenderOptions] = None):
        try:
            from markdown_it import MarkdownIt
        except ImportError:
            raise RuntimeError("markdown-it-py is not installed. Run: pip install markdown-it-py")

        self.options = options or RenderOptions()
        self._md = MarkdownIt(
            "commonmark",
            {
                "breaks": self.options.breaks,
                "html": self.options.html,
                "typographer": self.options.typographer,
            },
        )

        extensions = []
        if self.options.tables:
            extensions.append("table")
        if self.options.strikethrough:
            extensions.append("strikethrough")
        if self.options.typographer:
            extensions.extend(["replacements", "smartquotes"])
        if extensions:
            self._md.enable(extensions)

    def render(self, text: str) -> str:
        return self._md.render(text)

    __call__ = render


class PresentationBridge:
    """
    Produces HTML from Wiki or Markdown text.

    Any ``str -> str`` callable can stand in for the renderer. Renderer
    errors propagate to the caller as-is.
    """

    def __init__(
        self,
        renderer: Optional[Callable[[str], str]] = None,
        options: Optional[RenderOptions] = None,
    ):
        """
        Initialize the bridge.

        Args:
            renderer: Markdown-to-HTML callable. Defaults to a
                MarkdownRenderer built from ``options``.
            options: Options for the default renderer. Ignored when a
                renderer is supplied.
        """
        self.renderer = renderer or MarkdownRenderer(options)

    def wiki_to_html(self, text: str) -> str:
        """Convert Wiki markup to Markdown, then render it."""
        return self.renderer(to_markdown(text))

    def markdown_to_html(self, text: str) -> str:
        return self.renderer(text)


def wiki_to_html(text: str) -> str:
    """Render Wiki markup to HTML with the default options."""
    return PresentationBridge().wiki_to_html(text)


def markdown_to_html(text: str) -> str:
    """Render Markdown to HTML with the default options."""
    return PresentationBridge().markdown_to_html(text)

"""
Wikimark - Wiki markup <-> Markdown converter

Converts Jira/Confluence wiki markup to Markdown and back with ordered
surface rewrites, and renders either one to HTML through markdown-it-py.
Conversion is best effort: unknown or malformed markup passes through.
"""

from .converters import MarkdownConverter, WikiConverter, to_markdown, to_wiki
from .nesting import reindent_nested_lists
from .rendering import MarkdownRenderer, PresentationBridge, RenderOptions, markdown_to_html, wiki_to_html

__version__ = "1.0.0"

__all__ = [
    "WikiConverter",
    "MarkdownConverter",
    "to_markdown",
    "to_wiki",
    "reindent_nested_lists",
    "RenderOptions",
    "MarkdownRenderer",
    "PresentationBridge",
    "wiki_to_html",
    "markdown_to_html",
]

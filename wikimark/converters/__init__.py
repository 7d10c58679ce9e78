from .wiki_converter import WikiConverter, to_markdown
from .markdown_converter import MarkdownConverter, to_wiki

__all__ = ["WikiConverter", "MarkdownConverter", "to_markdown", "to_wiki"]

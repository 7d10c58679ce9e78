# Test fixtures
from .sample_documents import (
    WIKI_DOCUMENT,
    MARKDOWN_DOCUMENT,
    WIKI_TABLE,
    MARKDOWN_TABLE,
    WIKI_PANEL,
    MARKDOWN_PANEL,
    PLAIN_PROSE,
    ROUND_TRIP_CONSTRUCTS,
)

__all__ = [
    "WIKI_DOCUMENT",
    "MARKDOWN_DOCUMENT",
    "WIKI_TABLE",
    "MARKDOWN_TABLE",
    "WIKI_PANEL",
    "MARKDOWN_PANEL",
    "PLAIN_PROSE",
    "ROUND_TRIP_CONSTRUCTS",
]

"""
Markdown-to-Wiki Converter

Rewrites Markdown into Jira/Confluence wiki markup. Mirrors the Wiki
converter rule by rule, with extra structural work for tables (a
single-cell table becomes a panel) and for nested lists, whose
whitespace indentation is rebuilt as repeated Wiki markers.
"""

import os
import re

from ..nesting import reindent_nested_lists
from ..rules import MAX_INLINE_SPAN, Rule, apply_rules

# HTML tag → wiki delimiter
INLINE_TAGS = {
    "del": "-",
    "ins": "+",
    "sup": "^",
    "sub": "~",
}

EMPHASIS = {
    1: "_{}_",
    2: "*{}*",
    3: "_*{}*_",
}

CELL = re.compile(r"[^|]+(?=\|)")


def _table(match: re.Match) -> str:
    header_line, separator_line, rows = match.groups()
    headers = CELL.findall(header_line)
    separators = CELL.findall(separator_line)
    if len(headers) != len(separators):
        return match.group(0)

    if len(headers) == 1 and len(rows.split("\n")) == 2:
        body = re.sub(r"^\|(.*)[ \t]*\|", r"\1", rows, count=1).strip()
        return f"{{panel:title={headers[0].strip()}}}\n{body}\n{{panel}}\n"

    return "||" + "||".join(headers) + "||\n" + rows


def _emphasis(match: re.Match) -> str:
    wrapper, content = match.groups()
    template = EMPHASIS.get(len(wrapper))
    if template is None:
        return wrapper + content + wrapper
    return template.format(content)


def _heading(match: re.Match) -> str:
    return f"h{len(match.group(1))}.{match.group(2)}"


def _setext_heading(match: re.Match) -> str:
    level = 1 if match.group(2)[0] == "=" else 2
    return f"h{level}. {match.group(1)}"


def _ordered_list(match: re.Match) -> str:
    return "#" * (len(match.group(1)) // 3 + 1) + " "


def _unordered_list(match: re.Match) -> str:
    width = len(match.group(1))
    width -= width % 2
    return "*" * (width // 2 + 1) + " "


def _inline_tag(match: re.Match) -> str:
    delimiter = INLINE_TAGS[match.group(1)]
    return delimiter + match.group(2) + delimiter


def _code_block(match: re.Match) -> str:
    syntax, content = match.groups()
    if syntax:
        return "{code:" + syntax.replace("\n", "") + "}\n" + content + "{code}"
    return "{code}" + content + "{code}"


class MarkdownConverter:
    """Converts Markdown to Wiki markup."""

    SUPPORTED_EXTENSIONS = {".md", ".markdown"}
    OUTPUT_EXTENSION = ".jira"

    RULES = (
        Rule(
            "table",
            r"^\n((?:\|.*?)+\|)[ \t]*\n((?:\|\s*?-{3,}\s*?)+\|)[ \t]*\n((?:(?:\|.*?)+\|[ \t]*\n)*)$",
            _table,
            re.MULTILINE,
        ),
        Rule("emphasis", r"([*_]+)(\S.*?)\1", _emphasis),
        Rule("heading", r"^(#+)(.*?)$", _heading, re.MULTILINE),
        Rule("setext_heading", r"^(.*?)\n([=-]+)$", _setext_heading, re.MULTILINE),
        Rule("ordered_list", r"^([ \t]*)\d+\.\s+", _ordered_list, re.MULTILINE),
        Rule("unordered_list", r"^([ \t]*)[*\-+]\s+", _unordered_list, re.MULTILINE),
        reindent_nested_lists,
        Rule("inline_tag", r"<(" + "|".join(INLINE_TAGS) + r")>(.*?)</\1>", _inline_tag),
        Rule(
            "strikethrough",
            r"(\s+)~~(.{0," + str(MAX_INLINE_SPAN) + r"}?)~~(\s+)",
            r"\1-\2-\3",
        ),
        Rule("code_block", r"```(.+\n)?([\s\S]*?)```", _code_block),
        Rule("inline_code", r"`([^`]+)`", r"{{\1}}"),
        Rule("image", r"!\[[^\]]*\]\(([^)]+)\)", r"!\1!"),
        Rule("named_link", r"\[([^\]]+)\]\(([^)]+)\)", r"[\1|\2]"),
        Rule("autolink", r"<([^>]+)>", r"[\1]"),
        Rule("blockquote", r"^>", "bq.", re.MULTILINE),
    )

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in MarkdownConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(text: str) -> str:
        """
        Convert Markdown to Wiki markup.

        Args:
            text: Markdown text.

        Returns:
            The Wiki markup. Never raises for malformed markup; tables whose
            header and separator disagree on column count are left as is.
        """
        return apply_rules(text, MarkdownConverter.RULES)


def to_wiki(text: str) -> str:
    """Convert Markdown to Wiki markup."""
    return MarkdownConverter.convert(text)

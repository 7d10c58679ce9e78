"""
Wiki-to-Markdown Converter

Rewrites Jira/Confluence wiki markup into Markdown with an ordered list of
surface rules. Constructs the Markdown dialect cannot express (colors,
code block titles and borders) are dropped rather than approximated.
Anything the rules do not recognize passes through untouched.
"""

import os
import re

from ..rules import MAX_INLINE_SPAN, Rule, apply_rules

CODE_ATTRIBUTES = ("title", "borderStyle", "borderColor", "borderWidth", "bgColor", "titleBGColor")
# An attribute value ends where the next attribute key begins
CODE_ATTRIBUTE_KEY = r"[:|]?(?:" + "|".join(CODE_ATTRIBUTES) + r")="
CODE_ATTRIBUTE = CODE_ATTRIBUTE_KEY + r"(?:(?!" + CODE_ATTRIBUTE_KEY + r")[^}\n])+"


def _unordered_list(match: re.Match) -> str:
    return "  " * (len(match.group(1)) - 1) + "* "


def _ordered_list(match: re.Match) -> str:
    return "   " * (len(match.group(1)) - 1) + "1. "


def _heading(match: re.Match) -> str:
    return "#" * int(match.group(1)) + match.group(2)


def _table_header(match: re.Match) -> str:
    single_barred = match.group(1).replace("||", "|")
    separator = re.sub(r"\|[^|]+", "| --- ", single_barred)
    return f"\n{single_barred}\n{separator}"


class WikiConverter:
    """Converts Wiki markup to Markdown."""

    SUPPORTED_EXTENSIONS = {".jira", ".wiki", ".confluence"}
    OUTPUT_EXTENSION = ".md"

    # Order matters: later rules must not re-match what earlier ones produced
    RULES = (
        Rule("unordered_list", r"^[ \t]*(\*+)\s+", _unordered_list, re.MULTILINE),
        Rule("ordered_list", r"^[ \t]*(#+)\s+", _ordered_list, re.MULTILINE),
        Rule("heading", r"^h([0-6])\.(.*)$", _heading, re.MULTILINE),
        Rule("bold", r"\*(\S.*)\*", r"**\1**"),
        Rule("italic", r"_(\S.*)_", r"*\1*"),
        Rule("monospace", r"\{\{([^}]+)\}\}", r"`\1`"),
        Rule("insert", r"\+([^+]*)\+", r"<ins>\1</ins>"),
        Rule("superscript", r"\^([^^]*)\^", r"<sup>\1</sup>"),
        Rule("subscript", r"~([^~]*)~", r"<sub>\1</sub>"),
        Rule(
            "strikethrough",
            r"(\s+)-(\S+.{0," + str(MAX_INLINE_SPAN) + r"}?\S)-(\s+)",
            r"\1~~\2~~\3",
        ),
        Rule(
            "code_block",
            r"\{code(:([a-z]+))?(?:" + CODE_ATTRIBUTE + r")*\}([\s\S]*?)\n?\{code\}",
            r"```\2\3\n```",
            re.MULTILINE,
        ),
        Rule("noformat", r"\{noformat\}", "```"),
        Rule("unnamed_link", r"\[([^|]+?)\]", r"<\1>"),
        Rule("image", r"!(.+)!", r"![](\1)"),
        Rule("named_link", r"\[(.+?)\|(.+?)\]", r"[\1](\2)"),
        Rule("blockquote", r"^bq\.\s+", "> ", re.MULTILINE),
        Rule("color", r"\{color:[^}]+\}([\s\S]*?)\{color\}", r"\1", re.MULTILINE),
        Rule(
            "panel",
            r"\{panel:title=([^}]*)\}\n?([\s\S]*?)\n?\{panel\}",
            r"\n| \1 |\n| --- |\n| \2 |",
            re.MULTILINE,
        ),
        Rule("table_header", r"^[ \t]*((?:\|\|.*?)+\|\|)[ \t]*$", _table_header, re.MULTILINE),
        Rule("table_indent", r"^[ \t]*\|", "|", re.MULTILINE),
    )

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in WikiConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(text: str) -> str:
        """
        Convert Wiki markup to Markdown.

        Args:
            text: Wiki markup.

        Returns:
            The Markdown text. Never raises for malformed markup.
        """
        return apply_rules(text, WikiConverter.RULES)


def to_markdown(text: str) -> str:
    """Convert Wiki markup to Markdown."""
    return WikiConverter.convert(text)

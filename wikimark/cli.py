"""
Wikimark command-line filter.

Reads one document from a file (or stdin) and writes the converted text to
stdout (or a file). The first argument names the markup being read.
"""

import argparse
import sys

from .converters import to_markdown, to_wiki
from .rendering import markdown_to_html, wiki_to_html

# (input markup, render HTML) -> conversion
CONVERSIONS = {
    ("wiki", False): to_markdown,
    ("wiki", True): wiki_to_html,
    ("markdown", False): to_wiki,
    ("markdown", True): markdown_to_html,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikimark",
        description="Convert Wiki markup to Markdown, Markdown to Wiki markup, or either to HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  wikimark wiki ticket.jira                 # Markdown on stdout\n"
            "  wikimark markdown README.md -o README.jira\n"
            "  cat notes.md | wikimark markdown --html\n"
        ),
    )
    parser.add_argument("markup", choices=["wiki", "markdown"], help="Markup of the input document")
    parser.add_argument("source", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout")
    parser.add_argument("--html", action="store_true", help="Render the input to HTML")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    convert = CONVERSIONS[(args.markup, args.html)]

    try:
        result = convert(_read(args.source))
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        else:
            sys.stdout.write(result)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


def _read(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


if __name__ == "__main__":
    sys.exit(main())

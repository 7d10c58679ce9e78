"""
Nested list re-indentation for Wiki output.

After the Markdown list markers have been rewritten to runs of ``*`` and
``#`` whose length follows the source indentation, this module rebuilds the
Wiki nesting encoding, where each level repeats the marker of its parent
(``#*`` is a bullet nested in a numbered item).
"""

import re
from typing import Optional

MARKER_RUN = re.compile(r"^([*#]+\s)")
BLOCK_SEPARATOR = "\n\n"


def reindent_nested_lists(text: str) -> str:
    """
    Rewrite list marker runs so they encode true nesting depth.

    Each blank-line separated block is processed independently.

    Args:
        text: Wiki text whose list lines start with ``*`` or ``#`` runs.

    Returns:
        The text with marker runs rebuilt from the per-depth marker stack.
    """
    return BLOCK_SEPARATOR.join(
        _reindent_block(block) for block in text.split(BLOCK_SEPARATOR)
    )


def _reindent_block(block: str) -> str:
    lines = block.split("\n")
    # Marker recorded at each depth; None marks a skipped level
    stack: list[Optional[str]] = []
    indent_distance: Optional[int] = None

    for index, line in enumerate(lines):
        if not line.startswith(("#", "*")):
            stack = []
            continue

        match = MARKER_RUN.match(line)
        if not match:
            continue

        run = match.group(1)[:-1]
        separator = match.group(1)[-1]
        indent = len(run) // 2

        # Characters per level, fixed by the first indented line of the block
        if indent > 0 and not indent_distance:
            indent_distance = len(run) - len(stack)
        step = indent_distance if indent_distance is not None else 1

        stack = stack[:indent]
        stack.extend([None] * (indent - len(stack)))
        stack.append(line[0])

        prefix = ""
        remaining = run
        for level in range(indent):
            if stack[level]:
                prefix += stack[level]
            remaining = remaining[step:]

        lines[index] = prefix + remaining + separator + line[match.end():]

    return "\n".join(lines)

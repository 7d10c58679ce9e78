"""
Rule records for the ordered text-rewriting pipelines.

A pipeline is a tuple of steps applied strictly in order. Each step is a
callable taking text and returning new text: either a ``Rule`` (a compiled
pattern plus a replacement) or a plain function such as the nested-list
re-indenter.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Union

Replacement = Union[str, Callable[[re.Match], str]]
Step = Callable[[str], str]

# Longest single-line span an inline strikethrough may cover
MAX_INLINE_SPAN = 256


@dataclass(frozen=True)
class Rule:
    """
    A single global rewrite.

    ``replacement`` is a ``re`` template string or a function of the match,
    exactly as accepted by ``re.sub``.
    """
    name: str
    pattern: str
    replacement: Replacement
    flags: int = 0
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "compiled", re.compile(self.pattern, self.flags))

    def __call__(self, text: str) -> str:
        return self.compiled.sub(self.replacement, text)


def apply_rules(text: str, steps: Iterable[Step]) -> str:
    """
    Run ``text`` through every step in order.

    Args:
        text: The input document.
        steps: Rules or ``str -> str`` functions.

    Returns:
        The rewritten document.
    """
    for step in steps:
        text = step(text)
    return text

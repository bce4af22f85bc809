"""Markup rules - text substitutions and slide qualifiers."""

from __future__ import annotations

import re

ELLIPSIS = "\\ldots{}"

# Text between two delimiters, with no delimiter in between
ITALIC = re.compile(r"/([^/]+)/")
MONOSPACE = re.compile(r"\|([^|]+)\|")


def translate(text: str) -> str:
    """Apply the lightweight markup rules to a piece of text.

    Rules are applied in a fixed order:
    - ``...`` becomes ``\\ldots{}``
    - ``/word/`` becomes ``\\textit{word}``
    - ``|word|`` becomes ``\\texttt{word}``

    Unbalanced delimiters do not match and are left as they are.

    Example:
        >>> translate("/foo/ and |bar| and ...")
        '\\\\textit{foo} and \\\\texttt{bar} and \\\\ldots{}'
    """
    text = text.replace("...", ELLIPSIS)
    text = ITALIC.sub(lambda m: f"\\textit{{{m.group(1)}}}", text)
    return MONOSPACE.sub(lambda m: f"\\texttt{{{m.group(1)}}}", text)


def slide_range(n: int) -> str:
    """Overlay specification for ``\\item`` and blocks.

    ``3`` means from slide 3 onward (``<3->``), ``-3`` means only at
    slide 3 (``<only@3>``).
    """
    if n < 0:
        return f"<only@{-n}>"
    return f"<{n}->"


def on_slide(n: int) -> str:
    """Overlay command wrapping a qualified piece of content.

    ``3`` gives ``\\onslide<3->``, ``-3`` gives ``\\only<3>``.
    """
    if n < 0:
        return f"\\only<{-n}>"
    return f"\\onslide<{n}->"

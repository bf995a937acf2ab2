"""Render a rewritten stylesheet back to text.

Only substituted value nodes are serialized. Everything else is copied from
the source text verbatim, so escapes, comments and formatting the rewriter
never touched survive exactly as written.
"""

from __future__ import annotations

import re
from typing import Any

import tinycss2

from varify.stylesheet.model import Stylesheet

__all__ = ["SourceMap", "serialize_stylesheet"]

# The line breaks tinycss2 counts when it assigns source positions.
_LINE_BREAK_RE = re.compile(r"\r\n|[\r\n\f]")

# A function token glued to one of these would lex as part of the previous token.
_NAME_CHAR_RE = re.compile(r"[\w\\-]|[^\x00-\x7f]")

_WINDOW = 256


class SourceMap:
    """Translate tinycss2 ``(line, column)`` positions into offsets in *text*.

    tinycss2 folds ``\\r\\n``, ``\\r`` and ``\\f`` into ``\\n`` before
    tokenizing; offsets here point into the text as it was given.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = [0] + [m.end() for m in _LINE_BREAK_RE.finditer(text)]

    def offset(self, line: int, column: int) -> int:
        return self._line_starts[line - 1] + column - 1

    def token_end(self, node: Any, start: int) -> int:
        """Offset just past the source text of *node*, which begins at *start*.

        The text after *start* is re-tokenized in growing windows until the
        first token matches *node* and is known to be complete.
        """
        expected = (node.type, node.serialize())
        size = _WINDOW
        while True:
            window = self.text[start : start + size]
            at_end = start + size >= len(self.text)
            tokens = tinycss2.parse_component_value_list(window)
            if tokens and (tokens[0].type, tokens[0].serialize()) == expected:
                if len(tokens) > 1:
                    following = tokens[1]
                    return start + SourceMap(window).offset(
                        following.source_line, following.source_column
                    )
                if at_end:
                    return len(self.text)
            if at_end:
                raise ValueError(
                    f"{node.type} token at line {node.source_line}, column "
                    f"{node.source_column} is not in the source text"
                )
            size *= 2


def _splice_text(source: str, start: int, node: Any) -> str:
    text = node.serialize()
    if start and _NAME_CHAR_RE.match(source[start - 1]):
        return "/**/" + text
    return text


def serialize_stylesheet(stylesheet: Stylesheet) -> str:
    """Return the stylesheet source with every substitution spliced in."""
    source = stylesheet.source
    if not stylesheet.substitutions:
        return source

    source_map = SourceMap(source)
    edits: list[tuple[int, int, str]] = []
    for substitution in stylesheet.substitutions:
        original = substitution.original
        start = source_map.offset(original.source_line, original.source_column)
        end = source_map.token_end(original, start)
        edits.append((start, end, _splice_text(source, start, substitution.replacement)))
    edits.sort()

    parts: list[str] = []
    cursor = 0
    for start, end, text in edits:
        parts.append(source[cursor:start])
        parts.append(text)
        cursor = end
    parts.append(source[cursor:])
    return "".join(parts)

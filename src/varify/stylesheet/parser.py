"""Tree acquisition: parse stylesheet source with tinycss2.

Top-level rules come from ``tinycss2.parse_stylesheet``; each ``{}`` body is
expanded with ``tinycss2.parse_blocks_contents`` so that declarations and
nested rules (including those inside ``@media`` and friends) become
addressable nodes.

Invalid content is recovered from the way CSS Syntax prescribes: tinycss2
turns it into an error node, which stays in the tree as opaque content and
is logged as a warning.
"""

from __future__ import annotations

import logging
from typing import Any

import tinycss2

from varify.errors import ParseError
from varify.stylesheet.model import RuleBlock, Stylesheet

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

_RULE_TYPES = ("qualified-rule", "at-rule")


def _warn_invalid(node: Any, where: str) -> None:
    logger.warning(
        "Ignoring invalid %s at line %s, column %s: %s",
        where,
        node.source_line,
        node.source_column,
        node.message,
    )


def _expand(node: Any) -> Any:
    if node.type == "error":
        _warn_invalid(node, "rule")
        return node
    if node.type in _RULE_TYPES and node.content is not None:
        children = tinycss2.parse_blocks_contents(node.content)
        return RuleBlock(rule=node, children=[_expand(child) for child in children])
    if node.type == "declaration":
        for token in node.value:
            if token.type == "error":
                _warn_invalid(token, f"value in {node.name!r}")
    return node


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse *source* into a :class:`Stylesheet`.

    Comments and whitespace are kept, and the source text is stored on the
    stylesheet so untouched parts can be written back verbatim.

    Raises:
        ParseError: the source has syntax errors and not a single rule
            could be recovered from it.
    """
    logger.info("Parsing stylesheet (%d characters)", len(source))
    nodes = tinycss2.parse_stylesheet(source)
    errors = [node for node in nodes if node.type == "error"]
    if errors and not any(node.type in _RULE_TYPES for node in nodes):
        first = errors[0]
        raise ParseError(
            f"Invalid stylesheet syntax: {first.message}",
            line=first.source_line,
            column=first.source_column,
        )
    return Stylesheet(nodes=[_expand(node) for node in nodes], source=source)

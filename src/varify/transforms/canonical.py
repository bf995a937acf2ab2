"""Canonical value strings used as exact-match keys."""

from __future__ import annotations

from collections.abc import Iterable

from tinycss2.ast import Node


def canonical_string(value: Node | Iterable[Node]) -> str:
    """Return the canonical text of a component value or a value list.

    Top-level comments are dropped and runs of top-level whitespace collapse
    to a single space before trimming. Nothing else is normalized: case,
    number spelling, units and color notation are compared verbatim.
    """
    nodes = [value] if isinstance(value, Node) else value
    parts: list[str] = []
    for node in nodes:
        if node.type == "comment":
            continue
        if node.type == "whitespace":
            if parts and parts[-1] != " ":
                parts.append(" ")
            continue
        parts.append(node.serialize())
    return "".join(parts).strip()

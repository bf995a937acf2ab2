"""Stylesheet tree model: tinycss2 nodes with their rule bodies expanded."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from tinycss2.ast import AtRule, Declaration, Node, QualifiedRule

CUSTOM_PROPERTY_PREFIX = "--"


def is_custom_property(declaration: Declaration) -> bool:
    """True if *declaration* defines a custom property (``--name: value``)."""
    return declaration.name.startswith(CUSTOM_PROPERTY_PREFIX)


@dataclass
class RuleBlock:
    """A qualified rule or at-rule whose ``{}`` body has been expanded.

    ``children`` holds the body in source order: declarations, nested
    ``RuleBlock`` objects, and the whitespace and comments between them.
    Invalid content tinycss2 could not parse is kept as its error node.
    """

    rule: QualifiedRule | AtRule
    children: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Substitution:
    """A value node swapped out of a declaration, and what took its place."""

    original: Node
    replacement: Node


@dataclass
class Stylesheet:
    """A parsed stylesheet, mutable in place.

    ``source`` is the text the tree was parsed from; ``substitutions``
    records every value node replaced since then, in the order made.
    """

    nodes: list[Any] = field(default_factory=list)
    source: str = ""
    substitutions: list[Substitution] = field(default_factory=list)

    def declarations(self) -> Iterator[Declaration]:
        """Yield every declaration in document order, depth first."""
        return iter_declarations(self.nodes)

    def substitute(self, declaration: Declaration, position: int, node: Node) -> Node:
        """Put *node* at *position* in the declaration's value and return the old node."""
        original = declaration.value[position]
        declaration.value[position] = node
        self.substitutions.append(Substitution(original=original, replacement=node))
        return original


def iter_declarations(nodes: list[Any]) -> Iterator[Declaration]:
    for node in nodes:
        if isinstance(node, RuleBlock):
            yield from iter_declarations(node.children)
        elif node.type == "declaration":
            yield node

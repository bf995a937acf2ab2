"""Value kinds: the tagged variant used to decide substitution eligibility."""

from __future__ import annotations

import re
from enum import Enum

from tinycss2.ast import Node

_HEX_COLOR_RE = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class ValueKind(Enum):
    """Kind of a single component value inside a declaration."""

    DIMENSION = "dimension"
    HEX_COLOR = "hex-color"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PERCENTAGE = "percentage"
    URL = "url"
    STRING = "string"
    FUNCTION = "function"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> ValueKind:
        """Look up a kind by value (``hex-color``) or member name (``HEX_COLOR``)."""
        key = name.strip()
        for kind in cls:
            if key.lower() == kind.value or key.upper().replace("-", "_") == kind.name:
                return kind
        raise ValueError(f"Unknown value kind: {name!r}")


# Literal kinds that may be replaced by a var() reference.
ELIGIBLE_KINDS: frozenset[ValueKind] = frozenset(
    {
        ValueKind.DIMENSION,
        ValueKind.HEX_COLOR,
        ValueKind.IDENTIFIER,
        ValueKind.NUMBER,
        ValueKind.PERCENTAGE,
        ValueKind.URL,
        ValueKind.STRING,
    }
)

_TOKEN_KINDS: dict[str, ValueKind] = {
    "dimension": ValueKind.DIMENSION,
    "ident": ValueKind.IDENTIFIER,
    "number": ValueKind.NUMBER,
    "percentage": ValueKind.PERCENTAGE,
    "url": ValueKind.URL,
    "string": ValueKind.STRING,
}


def kind_of(node: Node) -> ValueKind:
    """Classify a tinycss2 component value.

    ``#abc`` style hashes are colors only when the digits form a valid hex
    color; ``url("...")`` is parsed by tinycss2 as a function but is treated
    as a URL literal like the unquoted form.
    """
    node_type = node.type
    if node_type in _TOKEN_KINDS:
        return _TOKEN_KINDS[node_type]
    if node_type == "hash":
        if _HEX_COLOR_RE.match(node.value):
            return ValueKind.HEX_COLOR
        return ValueKind.OTHER
    if node_type == "function":
        if node.lower_name == "url":
            return ValueKind.URL
        return ValueKind.FUNCTION
    return ValueKind.OTHER


def is_eligible(node: Node, kinds: frozenset[ValueKind] = ELIGIBLE_KINDS) -> bool:
    """True if the kind of *node* is in *kinds* (every eligible kind by default)."""
    return kind_of(node) in kinds

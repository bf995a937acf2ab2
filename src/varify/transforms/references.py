"""Construction of ``var(--name)`` reference nodes."""

from __future__ import annotations

from tinycss2.ast import FunctionBlock, IdentToken


def build_reference(name: str, line: int = 0, column: int = 0) -> FunctionBlock:
    """Build a new ``var()`` function node referencing custom property *name*."""
    return FunctionBlock(line, column, "var", [IdentToken(line, column, name)])

"""Result model: replacement records and the outcome of a processing run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Replacement:
    """A single literal value rewritten into a custom property reference.

    Attributes:
        property: Name of the declaration the value belongs to.
        value: Canonical text of the literal that was replaced.
        variable: Custom property the literal now references.
        line: Source line of the replaced literal.
        column: Source column of the replaced literal.
    """

    property: str
    value: str
    variable: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column} {self.property}: {self.value} -> var({self.variable})"


@dataclass
class ProcessResult:
    """Rewritten stylesheet text plus the replacements that produced it."""

    output_text: str
    replacements: list[Replacement] = field(default_factory=list)
    index_size: int = 0

    @property
    def replacement_count(self) -> int:
        return len(self.replacements)

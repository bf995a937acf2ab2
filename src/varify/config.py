"""Run configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from varify.model.value import ELIGIBLE_KINDS, ValueKind


@dataclass(frozen=True)
class VarifyConfig:
    kinds: frozenset[ValueKind] = ELIGIBLE_KINDS
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        kinds = frozenset(self.kinds)
        ineligible = kinds - ELIGIBLE_KINDS
        if ineligible:
            names = ", ".join(sorted(k.value for k in ineligible))
            raise ValueError(f"Value kinds cannot be replaced: {names}")
        object.__setattr__(self, "kinds", kinds)

    @classmethod
    def with_kinds(cls, names: Iterable[str], encoding: str = "utf-8") -> VarifyConfig:
        """Config that only replaces the named kinds (e.g. ``"hex-color"``)."""
        return cls(kinds=frozenset(ValueKind.from_name(n) for n in names), encoding=encoding)

    @classmethod
    def without_kinds(cls, names: Iterable[str], encoding: str = "utf-8") -> VarifyConfig:
        """Config that replaces every eligible kind except the named ones."""
        excluded = {ValueKind.from_name(n) for n in names}
        return cls(kinds=ELIGIBLE_KINDS - excluded, encoding=encoding)

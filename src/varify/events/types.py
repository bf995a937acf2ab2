"""Event types emitted while a stylesheet is processed."""

from dataclasses import dataclass

from varify.model.result import Replacement


@dataclass(frozen=True)
class IndexBuilt:
    size: int


@dataclass(frozen=True)
class ValueReplaced:
    replacement: Replacement


@dataclass(frozen=True)
class ProcessCompleted:
    replacement_count: int

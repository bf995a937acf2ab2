"""Varify model layer -- public type re-exports."""

from varify.model.result import ProcessResult, Replacement
from varify.model.value import ELIGIBLE_KINDS, ValueKind, is_eligible, kind_of

__all__ = [
    # value
    "ValueKind",
    "ELIGIBLE_KINDS",
    "kind_of",
    "is_eligible",
    # result
    "Replacement",
    "ProcessResult",
]

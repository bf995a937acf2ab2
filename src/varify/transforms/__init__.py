"""Value indexing and substitution passes."""

from varify.transforms.canonical import canonical_string
from varify.transforms.index import ValueIndex, build_value_index
from varify.transforms.references import build_reference
from varify.transforms.rewriter import rewrite_values

__all__ = [
    "canonical_string",
    "ValueIndex",
    "build_value_index",
    "build_reference",
    "rewrite_values",
]

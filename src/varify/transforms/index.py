"""First pass: index custom property values."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from varify.stylesheet.model import Stylesheet, is_custom_property
from varify.transforms.canonical import canonical_string

logger = logging.getLogger(__name__)

# canonical value string -> custom property name
ValueIndex = Mapping[str, str]


def _has_error(nodes: Iterable[Any]) -> bool:
    for node in nodes:
        if node.type == "error":
            return True
        if node.type == "function" and _has_error(node.arguments):
            return True
        if node.type in ("() block", "[] block", "{} block") and _has_error(node.content):
            return True
    return False


def build_value_index(stylesheet: Stylesheet) -> ValueIndex:
    """Map each custom property value to the property that defines it.

    Declarations are visited in document order, so when several custom
    properties share a value the last one wins. Properties with an empty
    value, or with a value tinycss2 could not parse, are ignored. The
    returned mapping is read-only.
    """
    index: dict[str, str] = {}
    for declaration in stylesheet.declarations():
        if not is_custom_property(declaration):
            continue
        if _has_error(declaration.value):
            logger.debug("Not indexing %r: its value is invalid", declaration.name)
            continue
        value = canonical_string(declaration.value)
        if value:
            index[value] = declaration.name
    logger.info("Found %d unique custom property values", len(index))
    return MappingProxyType(index)

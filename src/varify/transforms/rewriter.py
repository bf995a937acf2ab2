"""Second pass: replace literal values with custom property references."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tinycss2.ast import Declaration

from varify.events.bus import EventBus
from varify.events.types import ValueReplaced
from varify.model.result import Replacement
from varify.model.value import ELIGIBLE_KINDS, ValueKind, is_eligible
from varify.stylesheet.model import Stylesheet, is_custom_property
from varify.transforms.canonical import canonical_string
from varify.transforms.index import ValueIndex
from varify.transforms.references import build_reference

logger = logging.getLogger(__name__)


def _rewrite_declaration(
    stylesheet: Stylesheet,
    declaration: Declaration,
    index: ValueIndex,
    kinds: frozenset[ValueKind],
    event_bus: EventBus | None,
) -> list[Replacement]:
    """Rewrite the direct children of one declaration's value list."""
    replacements: list[Replacement] = []
    value = declaration.value
    for position in range(len(value)):
        node = value[position]
        if not is_eligible(node, kinds):
            continue
        text = canonical_string(node)
        variable = index.get(text)
        if variable is None:
            continue

        line, column = node.source_line, node.source_column
        stylesheet.substitute(declaration, position, build_reference(variable, line, column))
        logger.debug("Replacing %r with var(%s) in %r", text, variable, declaration.name)

        replacement = Replacement(
            property=declaration.name,
            value=text,
            variable=variable,
            line=line,
            column=column,
        )
        replacements.append(replacement)
        if event_bus is not None:
            event_bus.emit(ValueReplaced(replacement=replacement))
    return replacements


def rewrite_values(
    stylesheet: Stylesheet,
    index: ValueIndex,
    kinds: Iterable[ValueKind] = ELIGIBLE_KINDS,
    event_bus: EventBus | None = None,
) -> list[Replacement]:
    """Replace eligible literals in ordinary declarations, in place.

    Only direct children of a declaration's value are candidates; functions
    and blocks are left as they are, including their arguments. Custom
    property declarations are never rewritten. Returns the replacements in
    document order.
    """
    replacements: list[Replacement] = []
    if not index:
        return replacements

    allowed = frozenset(kinds) & ELIGIBLE_KINDS
    for declaration in stylesheet.declarations():
        if is_custom_property(declaration):
            continue
        replacements.extend(
            _rewrite_declaration(stylesheet, declaration, index, allowed, event_bus)
        )

    logger.info("Made %d replacements", len(replacements))
    return replacements

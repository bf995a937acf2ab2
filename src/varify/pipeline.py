"""Index-then-rewrite pipeline over stylesheet text and files."""

from __future__ import annotations

import logging
from pathlib import Path

from varify.config import VarifyConfig
from varify.errors import InputMissingError, WriteError
from varify.events.bus import EventBus
from varify.events.types import IndexBuilt, ProcessCompleted
from varify.model.result import ProcessResult
from varify.stylesheet import parse_stylesheet, serialize_stylesheet
from varify.transforms import build_value_index, rewrite_values

logger = logging.getLogger(__name__)


def process(
    source: str,
    config: VarifyConfig | None = None,
    event_bus: EventBus | None = None,
) -> ProcessResult:
    """Rewrite literal values in *source* into custom property references.

    The whole stylesheet is indexed before anything is rewritten. When the
    stylesheet defines no custom properties, or nothing matched, the source
    text is returned unchanged; otherwise only the replaced literals differ
    from it.

    Raises:
        ParseError: no rule could be recovered from *source*.
    """
    config = config or VarifyConfig()
    stylesheet = parse_stylesheet(source)

    # Pass 1: snapshot every custom property value.
    index = build_value_index(stylesheet)
    if event_bus is not None:
        event_bus.emit(IndexBuilt(size=len(index)))

    if not index:
        logger.info("No custom properties found; leaving stylesheet unchanged")
        result = ProcessResult(output_text=source)
    else:
        # Pass 2: rewrite against the frozen index.
        replacements = rewrite_values(
            stylesheet, index, kinds=config.kinds, event_bus=event_bus
        )
        result = ProcessResult(
            output_text=serialize_stylesheet(stylesheet),
            replacements=replacements,
            index_size=len(index),
        )

    if event_bus is not None:
        event_bus.emit(ProcessCompleted(replacement_count=result.replacement_count))
    return result


def read_source(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a stylesheet, raising :class:`InputMissingError` on failure."""
    source_path = Path(path)
    logger.info("Reading %s", source_path)
    if not source_path.is_file():
        reason = "not a file" if source_path.exists() else "file not found"
        raise InputMissingError(source_path, reason)
    try:
        return source_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputMissingError(source_path, str(exc)) from exc


def write_output(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    """Write *text* to *path*, raising :class:`WriteError` on failure."""
    target = Path(path)
    try:
        target.write_text(text, encoding=encoding)
    except OSError as exc:
        raise WriteError(target, str(exc)) from exc
    logger.info("Wrote %s", target)


def process_file(
    input_path: str | Path,
    output_path: str | Path,
    config: VarifyConfig | None = None,
    event_bus: EventBus | None = None,
) -> ProcessResult:
    """Read *input_path*, process it, and write the result to *output_path*.

    The output file is written even when nothing was replaced.
    """
    config = config or VarifyConfig()
    source = read_source(input_path, encoding=config.encoding)
    result = process(source, config=config, event_bus=event_bus)
    write_output(output_path, result.output_text, encoding=config.encoding)
    return result

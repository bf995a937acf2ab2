"""Tests for the index-then-rewrite pipeline and its file surface."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from varify import (
    InputMissingError,
    ParseError,
    ProcessResult,
    VarifyConfig,
    WriteError,
    process,
    process_file,
)
from varify.events import EventBus, IndexBuilt, ProcessCompleted, ValueReplaced
from varify.stylesheet import parse_stylesheet, serialize_stylesheet

FIXTURES = Path(__file__).parent.parent / "fixtures"

EXAMPLE = ":root { --brand: #336699; }\n.box { color: #336699; border: 1px solid #336699; }\n"


# ---------------------------------------------------------------------------
# process()
# ---------------------------------------------------------------------------


class TestProcess:
    def test_end_to_end_example(self):
        result = process(EXAMPLE)
        assert isinstance(result, ProcessResult)
        assert result.replacement_count == 2
        assert result.output_text == (
            ":root { --brand: #336699; }\n"
            ".box { color: var(--brand); border: 1px solid var(--brand); }\n"
        )
        assert result.index_size == 1

    def test_fixture(self):
        source = (FIXTURES / "tokens.css").read_text()
        expected = (FIXTURES / "tokens.expected.css").read_text()
        result = process(source)
        assert result.output_text == expected
        assert result.replacement_count == 7
        assert result.index_size == 6

    def test_replacements_in_document_order(self):
        source = (FIXTURES / "tokens.css").read_text()
        result = process(source)
        assert [r.property for r in result.replacements] == [
            "color",
            "padding",
            "border",
            "border-radius",
            "font-weight",
            "width",
            "margin",
        ]

    def test_parse_error_propagates(self):
        with pytest.raises(ParseError):
            process(".box color: red;")

    def test_config_restricts_kinds(self):
        result = process(EXAMPLE, config=VarifyConfig.without_kinds(["hex-color"]))
        assert result.replacement_count == 0
        assert result.output_text == EXAMPLE


class TestEmptyIndexShortCircuit:
    def test_no_custom_properties_returns_source(self):
        source = (FIXTURES / "plain.css").read_text()
        result = process(source)
        assert result.output_text == source
        assert result.replacement_count == 0
        assert result.index_size == 0

    def test_matches_parsed_then_regenerated_form(self):
        source = ".a { color: red; }\n"
        regenerated = serialize_stylesheet(parse_stylesheet(source))
        assert process(source).output_text == regenerated

    def test_empty_source(self):
        result = process("")
        assert result.output_text == ""
        assert result.replacement_count == 0

    def test_logs_short_circuit(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="varify"):
            process(".a { color: red; }")
        assert any("No custom properties found" in r.message for r in caplog.records)


class TestNoMatches:
    def test_source_returned_unchanged(self):
        source = ":root { --c: red; }\n.a { color: blue }\n"
        result = process(source)
        assert result.replacement_count == 0
        assert result.index_size == 1
        assert result.output_text == source


class TestIdempotence:
    def test_second_run_makes_no_replacements(self):
        first = process(EXAMPLE)
        second = process(first.output_text)
        assert second.replacement_count == 0
        assert second.output_text == first.output_text

    def test_fixture_second_run(self):
        first = process((FIXTURES / "tokens.css").read_text())
        assert process(first.output_text).replacement_count == 0


class TestSubstitutionProperties:
    def test_last_definition_wins(self):
        result = process(":root { --a: 10px; }\n:root { --b: 10px; }\n.x { margin: 10px; }")
        assert result.replacements[0].variable == "--b"
        assert "margin: var(--b);" in result.output_text

    def test_function_arguments_untouched(self):
        source = ":root { --c: red; }\n.g { background: linear-gradient(red, blue); }\n"
        result = process(source)
        assert result.replacement_count == 0
        assert result.output_text == source

    def test_exact_match_only(self):
        result = process(":root { --d: 0.5; }\n.o { opacity: .5; }")
        assert result.replacement_count == 0

    def test_later_custom_property_still_applies_to_earlier_rule(self):
        result = process(".a { color: red; }\n:root { --c: red; }")
        assert result.replacement_count == 1
        assert result.output_text.startswith(".a { color: var(--c); }")


class TestVerbatimOutput:
    def test_icon_fixture_keeps_escapes(self):
        source = (FIXTURES / "icons.css").read_text()
        expected = (FIXTURES / "icons.expected.css").read_text()
        result = process(source)
        assert result.output_text == expected
        assert result.replacement_count == 5

    def test_untouched_escaped_string_kept(self):
        source = ':root { --c: red; }\n.a { color: red; }\n.icon:before { content: "\\f101"; }'
        result = process(source)
        assert 'content: "\\f101";' in result.output_text
        assert ".a { color: var(--c); }" in result.output_text

    def test_untouched_escaped_custom_property_kept(self):
        result = process(":root { --c: r\\65 d; }\n.a { color: red; }")
        assert result.output_text == ":root { --c: r\\65 d; }\n.a { color: var(--c); }"

    def test_everything_outside_replaced_literals_is_byte_identical(self):
        source = ":root{--c:red}\r\n.a{ color/*c*/ :red ;margin:0 }\r\n"
        result = process(source)
        assert result.output_text == source.replace(":red ;", ":var(--c) ;")


class TestInvalidContent:
    def test_star_hack_does_not_stop_rewriting(self):
        result = process(":root { --c: red; } .a { *zoom: 1; color: red; }")
        assert result.replacement_count == 1
        assert result.output_text == ":root { --c: red; } .a { *zoom: 1; color: var(--c); }"

    def test_malformed_declaration_skipped(self):
        source = ":root { --c: red; }\n.a { color red; margin: 0; color: red; }"
        result = process(source)
        assert [r.property for r in result.replacements] == ["color"]
        assert result.output_text.endswith(".a { color red; margin: 0; color: var(--c); }")

    def test_bad_url_left_alone(self):
        result = process(":root { --c: red; }\n.a { background: url(a b) red; }")
        assert result.output_text.endswith(".a { background: url(a b) var(--c); }")

    def test_invalid_content_logged_as_warning(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="varify"):
            process(":root { --c: red; } .a { *zoom: 1; color: red; }")
        assert any(
            r.levelno == logging.WARNING and "Ignoring invalid rule" in r.getMessage()
            for r in caplog.records
        )


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class TestPipelineEvents:
    def test_event_sequence(self):
        bus = EventBus()
        events: list[object] = []
        bus.on_all(events.append)
        process(EXAMPLE, event_bus=bus)
        assert [type(e) for e in events] == [
            IndexBuilt,
            ValueReplaced,
            ValueReplaced,
            ProcessCompleted,
        ]
        assert events[0] == IndexBuilt(size=1)
        assert events[-1] == ProcessCompleted(replacement_count=2)

    def test_empty_index_events(self):
        bus = EventBus()
        events: list[object] = []
        bus.on_all(events.append)
        process(".a { color: red; }", event_bus=bus)
        assert events == [IndexBuilt(size=0), ProcessCompleted(replacement_count=0)]


# ---------------------------------------------------------------------------
# process_file()
# ---------------------------------------------------------------------------


class TestProcessFile:
    def test_writes_output(self, tmp_path: Path):
        src = tmp_path / "in.css"
        out = tmp_path / "out.css"
        src.write_text(EXAMPLE, encoding="utf-8")
        result = process_file(src, out)
        assert result.replacement_count == 2
        assert out.read_text(encoding="utf-8") == result.output_text

    def test_writes_original_when_no_custom_properties(self, tmp_path: Path):
        src = tmp_path / "in.css"
        out = tmp_path / "out.css"
        src.write_text("a { color: #0645ad }", encoding="utf-8")
        process_file(src, out)
        assert out.read_text(encoding="utf-8") == "a { color: #0645ad }"

    def test_missing_input(self, tmp_path: Path):
        out = tmp_path / "out.css"
        with pytest.raises(InputMissingError) as exc_info:
            process_file(tmp_path / "nope.css", out)
        assert exc_info.value.path == tmp_path / "nope.css"
        assert not out.exists()

    def test_directory_as_input(self, tmp_path: Path):
        with pytest.raises(InputMissingError):
            process_file(tmp_path, tmp_path / "out.css")

    def test_undecodable_input(self, tmp_path: Path):
        src = tmp_path / "in.css"
        src.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(InputMissingError) as exc_info:
            process_file(src, tmp_path / "out.css")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_parse_error_writes_nothing(self, tmp_path: Path):
        src = tmp_path / "in.css"
        out = tmp_path / "out.css"
        src.write_text(".box color: red;", encoding="utf-8")
        with pytest.raises(ParseError):
            process_file(src, out)
        assert not out.exists()

    def test_write_error(self, tmp_path: Path):
        src = tmp_path / "in.css"
        src.write_text(EXAMPLE, encoding="utf-8")
        target = tmp_path / "missing-dir" / "out.css"
        with pytest.raises(WriteError) as exc_info:
            process_file(src, target)
        assert exc_info.value.path == target
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_logs_read_and_write(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        src = tmp_path / "in.css"
        src.write_text(EXAMPLE, encoding="utf-8")
        with caplog.at_level(logging.INFO, logger="varify"):
            process_file(src, tmp_path / "out.css")
        messages = [r.message for r in caplog.records]
        assert any(m.startswith("Reading ") for m in messages)
        assert any(m.startswith("Wrote ") for m in messages)
        assert any("Made 2 replacements" in m for m in messages)

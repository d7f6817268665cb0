"""
Tests for textparser.core.matching: normalizer, compiler and extractor.
"""
import logging
import re
import time

import pytest
import regex

from textparser.core.exceptions import TemplateSyntaxError
from textparser.core.matching import clean_value, compile_template, extract, normalize
from textparser.core.models.extraction import ExtractionResult
from textparser.core.models.template import MatchMode


def run(template: str, text: str, mode: MatchMode = MatchMode.WHOLE_TEXT):
    return extract(normalize(text, mode), compile_template(template, mode))


# ─── Normalizer ───────────────────────────────────────────────────────────────

class TestNormalize:
    def test_whole_text_collapses_whitespace(self):
        assert normalize("  a \t b\n\n c  ") == "a b c"

    def test_line_mode_keeps_line_breaks(self):
        assert normalize("  a  b\n c \n", MatchMode.LINE) == "a  b\n c"

    def test_empty_input(self):
        assert normalize("") == ""
        assert normalize("", MatchMode.LINE) == ""
        assert normalize(" \n\t ") == ""


# ─── Compiler ─────────────────────────────────────────────────────────────────

class TestCompileTemplate:
    def test_whole_text_single_pattern(self):
        compiled = compile_template("Name: {%Name%}\nAge: {%Age%}")
        assert len(compiled.patterns) == 1
        assert compiled.group_names == (("Name", "Age"),)
        assert compiled.flags == regex.DOTALL

    def test_whole_text_collapses_literal_whitespace(self):
        compiled = compile_template("a \t\n  b {%X%}")
        assert re.search(compiled.patterns[0], "a b 1") is not None

    def test_literal_text_is_escaped(self):
        compiled = compile_template("Total ($): {%Total%} [net] *")
        match = re.search(compiled.patterns[0], "Total ($): 12.50 [net] *")
        assert match.group("_p0") == "12.50"

    def test_line_mode_one_pattern_per_line(self):
        compiled = compile_template(
            "Name: {%Name%}\n\n   \nAge: {%Age%}\n", MatchMode.LINE
        )
        assert len(compiled.patterns) == 2
        assert compiled.group_names == (("Name",), ("Age",))
        assert compiled.flags == 0

    def test_line_mode_keeps_inner_whitespace(self):
        compiled = compile_template("a  b {%X%}", MatchMode.LINE)
        assert re.search(compiled.patterns[0], "a b 1") is None
        assert re.search(compiled.patterns[0], "a  b 1") is not None

    def test_patterns_are_trimmed(self):
        compiled = compile_template("   Code: {%Code%}   \n")
        assert compiled.patterns == compile_template("Code: {%Code%}").patterns

    def test_deterministic(self):
        template = "Ref {%Ref%} / {%Date%}"
        assert compile_template(template) == compile_template(template)

    def test_no_placeholders_is_pure_literal(self):
        compiled = compile_template("Hello world")
        assert compiled.group_names == ((),)
        assert compiled.placeholders == []

    def test_placeholder_name_is_trimmed(self):
        compiled = compile_template("Name: {% Full Name %}")
        assert compiled.placeholders == ["Full Name"]

    def test_duplicate_names_get_separate_groups(self):
        compiled = compile_template("{%A%} and {%A%}")
        assert compiled.group_names == (("A", "A"),)
        assert compiled.placeholders == ["A"]


class TestMalformedPlaceholders:
    def test_unbalanced_open_is_literal(self, caplog):
        with caplog.at_level(logging.WARNING):
            compiled = compile_template("Name: {%Name")
        assert compiled.placeholders == []
        assert "Malformed placeholder" in caplog.text

    def test_unbalanced_open_never_matches(self):
        assert run("Name: {%Name", "Name: Alice") is None
        assert run("Name: {%Name", "Name: {%Name") is None

    def test_empty_name_is_malformed(self, caplog):
        with caplog.at_level(logging.WARNING):
            compiled = compile_template("Value: {%%}")
        assert compiled.placeholders == []
        assert "Malformed placeholder" in caplog.text

    def test_valid_placeholders_still_compile_next_to_malformed(self):
        result = run("A: {%A%} B: {%B", "A: 1 B: {%B")
        assert result.to_dict() == {"A": "1"}

    def test_strict_raises(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            compile_template("Name: {%Name", strict=True, source="person.txt")
        assert exc.value.source == "person.txt"
        assert exc.value.fragment.startswith("{%Name")

    def test_strict_stray_close(self):
        with pytest.raises(TemplateSyntaxError):
            compile_template("Name: Name%} {%Age%}", strict=True)

    def test_strict_accepts_valid_template(self):
        compiled = compile_template("Name: {%Name%}", strict=True)
        assert compiled.placeholders == ["Name"]


# ─── Extractor ────────────────────────────────────────────────────────────────

class TestCleanValue:
    def test_strips_tags(self):
        assert clean_value("<b>42</b>") == "42"

    def test_strips_whitespace(self):
        assert clean_value("  <span class='x'> Jane Doe </span>\n") == "Jane Doe"

    def test_keeps_comparison_signs(self):
        assert clean_value("a < b") == "a < b"

    def test_drops_unclosed_trailing_tag(self):
        assert clean_value("42 <b") == "42"

    def test_drops_empty_tag(self):
        assert clean_value("a<>b") == "ab"

    def test_multiline_tag(self):
        assert clean_value("<a\nhref=\"x\">link</a>") == "link"


class TestExtract:
    def test_placeholder_round_trip(self):
        result = run("L1 {%A%} L2 {%B%} L3", "L1 x L2 y L3")
        assert result.to_dict() == {"A": "x", "B": "y"}

    def test_whole_text_whitespace_insensitive(self):
        template = "Order #{%Order%}\nCustomer: {%Customer%}\nTotal: {%Total%} USD"
        text = "Order #1001\n\n  Customer:\t Jane   Doe\nTotal:   99.50  USD\n"
        result = run(template, text)
        assert result.to_dict() == {
            "Order": "1001",
            "Customer": "Jane Doe",
            "Total": "99.50",
        }

    def test_whole_text_captures_html(self):
        result = run("Total: {%Total%}", "Total: <b>42</b>")
        assert result["Total"] == "42"

    def test_no_placeholder_template_never_matches(self):
        assert run("Hello world", "Hello world") is None
        assert run("Hello", "Hello world", MatchMode.LINE) is None

    def test_no_match(self):
        assert run("Invoice {%Number%}", "Receipt 123") is None

    def test_empty_value_still_counts(self):
        result = run("Note: {%Note%}", "Note: <br>")
        assert result.to_dict() == {"Note": ""}

    def test_duplicate_name_last_wins(self):
        result = run("{%A%} - {%A%}", "x - y")
        assert result.to_dict() == {"A": "y"}

    def test_line_mode_end_to_end(self):
        result = run("Name: {%Name%}\nAge: {%Age%}", "Name: Alice\nAge: 30", MatchMode.LINE)
        assert result.to_dict() == {"Name": "Alice", "Age": "30"}

    def test_line_mode_independent_of_line_order(self):
        result = run("Age: {%Age%}\nName: {%Name%}", "Name: Alice\nAge: 30", MatchMode.LINE)
        assert result["Name"] == "Alice"
        assert result["Age"] == "30"

    def test_line_mode_partial_lines(self):
        result = run(
            "Name: {%Name%}\nPhone: {%Phone%}", "Name: Alice\nAge: 30", MatchMode.LINE
        )
        assert result.to_dict() == {"Name": "Alice"}

    def test_line_mode_duplicate_name_later_line_wins(self):
        result = run(
            "First: {%V%}\nSecond: {%V%}", "First: a\nSecond: b", MatchMode.LINE
        )
        assert result.to_dict() == {"V": "b"}

    def test_result_keeps_source(self):
        compiled = compile_template("Id: {%Id%}")
        result = extract("Id: 7", compiled, source="ids.txt")
        assert result.source == "ids.txt"
        assert "Id" in result
        assert list(result) == ["Id"]
        assert len(result) == 1
        assert result.get("Missing") is None

    def test_runaway_backtracking_gives_no_match(self):
        compiled = compile_template("{%A%} x {%B%} x {%C%} x {%D%} END")
        started = time.monotonic()
        assert extract(normalize(" x" * 400), compiled, timeout=0.2) is None
        assert time.monotonic() - started < 10


class TestExtractionResult:
    def test_is_mapping(self):
        result = ExtractionResult(values={"ab": "1", "Name": "Alice"}, source="t.txt")
        assert dict(result) == result.to_dict()
        assert result == {"ab": "1", "Name": "Alice"}
        assert list(result.items()) == [("ab", "1"), ("Name", "Alice")]
        assert list(result.keys()) == ["ab", "Name"]

    def test_equality_ignores_source(self):
        assert ExtractionResult({"A": "1"}, "a.txt") == ExtractionResult({"A": "1"}, "b.txt")
        assert ExtractionResult({"A": "1"}) != {"A": "2"}

    def test_to_dict_is_a_copy(self):
        result = ExtractionResult(values={"A": "1"})
        result.to_dict()["A"] = "2"
        assert result["A"] == "1"

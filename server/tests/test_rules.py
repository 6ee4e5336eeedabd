"""
Tests for the per-language rules.

Rule logic is checked against fake nodes; end-to-end behaviour is checked
through ``lint()`` with the real Tree-sitter grammars.
"""

import os
import sys

import pytest

# Add the server directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from lint_engine.linter import lint
from lint_engine.profiles import JAVA_RESERVED_WORDS, build_profile
from lint_engine.types import LanguageProfile
from lint_engine.walker import walk
from lint_rules import (
    RuleJavaConstructorName, RuleJavaKeywordIdentifier, RulePythonPrintCall, RuleRArrowAssignment
)

from fake_nodes import FakeNode, span


def _messages(diagnostics):
    return [d.message for d in diagnostics]


class TestRuleJavaKeywordIdentifier:
    """Test cases for java.keyword_identifier."""

    def setup_method(self):
        self.profile = build_profile("java", enabled_patterns=["java.keyword_identifier"])

    def test_meta_properties(self):
        rule = RuleJavaKeywordIdentifier()
        assert rule.meta.id == "java.keyword_identifier"
        assert rule.meta.langs == ("java",)

    def test_reserved_word_set(self):
        assert len(JAVA_RESERVED_WORDS) == 53
        assert {"public", "goto", "const", "true", "false", "null"} <= JAVA_RESERVED_WORDS
        assert "var" not in JAVA_RESERVED_WORDS
        assert "record" not in JAVA_RESERVED_WORDS

    def test_keyword_identifier_reported(self):
        source = "int public = 1;"
        ident = span(source, "public", "identifier")
        root = FakeNode("program", end_byte=len(source), children=[ident])

        diagnostics = walk(root, source, self.profile)

        assert _messages(diagnostics) == ["'public' is a keyword and cannot be used as an identifier"]
        assert (diagnostics[0].line, diagnostics[0].column) == (1, 5)

    def test_ordinary_identifier_clean(self):
        source = "int count = 1;"
        root = FakeNode("program", children=[span(source, "count", "identifier")])

        assert walk(root, source, self.profile) == []

    def test_keyword_as_other_kind_clean(self):
        source = "public class Foo {}"
        root = FakeNode("program", children=[span(source, "public", "modifiers")])

        assert walk(root, source, self.profile) == []


class TestRuleJavaConstructorName:
    """Test cases for java.constructor_name."""

    def test_matching_constructor_clean(self):
        assert lint("java", "class Foo { Foo() {} }") == []

    def test_mismatched_constructor_reported(self):
        diagnostics = lint("java", "class Foo { Bar() {} }")

        assert len(diagnostics) == 1
        assert diagnostics[0].message == (
            "Invalid constructor name 'Bar'. Constructor name must match the class name 'Foo'"
        )
        assert (diagnostics[0].line, diagnostics[0].column) == (1, 13)

    def test_nearest_class_is_used(self):
        code = (
            "class Outer {\n"
            "    static class Inner {\n"
            "        Inner() {}\n"
            "    }\n"
            "    Outer() {}\n"
            "}\n"
        )

        assert lint("java", code) == []

    def test_constructor_inside_enum_is_skipped(self):
        code = (
            "class Outer {\n"
            "    enum Color {\n"
            "        RED;\n"
            "        Color() {}\n"
            "    }\n"
            "}\n"
        )

        assert lint("java", code) == []

    def test_constructor_without_class_skipped_with_fakes(self):
        source = "Bar() {}"
        ctor = span(source, source, "constructor_declaration",
                    children=[span(source, "Bar", "identifier")])
        profile = LanguageProfile(language_id="java", rules=(RuleJavaConstructorName(),))

        assert walk(FakeNode("program", children=[ctor]), source, profile) == []


class TestJavaLinting:
    """End-to-end Java cases."""

    def test_keyword_used_as_variable_is_reported(self):
        code = "class Foo {\n    void run() {\n        int public = 1;\n    }\n}\n"

        diagnostics = lint("java", code)

        assert [(d.line, d.column, d.message) for d in diagnostics] == [
            (3, 13, "'public' is a keyword and cannot be used as an identifier"),
        ]

    def test_syntax_error_reported(self):
        diagnostics = lint("java", "class Foo { void run( { }")

        assert diagnostics
        assert any(
            m.startswith("Syntax error near") or m.startswith("Missing")
            for m in _messages(diagnostics)
        )


class TestRulePythonPrintCall:
    """Test cases for python.print_call."""

    def test_meta_properties(self):
        assert RulePythonPrintCall().meta.id == "python.print_call"

    def test_print_call_reported(self):
        diagnostics = lint("python", 'print("hi")')

        assert _messages(diagnostics) == ["Use of print statements is discouraged"]
        assert (diagnostics[0].line, diagnostics[0].column) == (1, 1)

    def test_nested_print_reported_at_call(self):
        diagnostics = lint("python", "def f():\n    print(1)\n")

        assert _messages(diagnostics) == ["Use of print statements is discouraged"]
        assert (diagnostics[0].line, diagnostics[0].column) == (2, 5)

    def test_other_calls_clean(self):
        code = "import logging\nlogger = logging.getLogger(__name__)\nlogger.info('hi')\nsys.print('x')\n"

        assert lint("python", code) == []

    def test_print_reference_without_call_clean(self):
        assert lint("python", "handler = print\n") == []

    def test_missing_colon_is_syntax_error(self):
        diagnostics = lint("python", "def my_func\n    pass")

        assert [(d.line, d.column, d.message) for d in diagnostics] == [
            (1, 1, "Syntax error near 'def my_func\n    pass'"),
        ]


class TestRuleRArrowAssignment:
    """Test cases for r.arrow_assignment."""

    def test_meta_properties(self):
        assert RuleRArrowAssignment().meta.id == "r.arrow_assignment"

    def test_arrow_assignment_reported(self):
        diagnostics = lint("r", "x <- 1")

        assert _messages(diagnostics) == ["Use '=' for assignment instead of '<-'"]
        assert (diagnostics[0].line, diagnostics[0].column) == (1, 3)

    def test_equals_assignment_clean(self):
        assert lint("r", "x = 1") == []

    def test_each_arrow_reported_in_order(self):
        diagnostics = lint("r", "x <- 1\ny <- 2\n")

        assert [(d.line, d.column) for d in diagnostics] == [(1, 3), (2, 3)]

    def test_unterminated_call_reported(self):
        diagnostics = lint("r", "print(1")

        # The parser inserts a zero-width ")" at the end of input
        assert [(d.line, d.column, d.message) for d in diagnostics] == [(1, 8, "Missing )")]


FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
LANG_EXTENSIONS = {".java": "java", ".py": "python", ".R": "r"}


def _fixture_files(kind):
    directory = os.path.join(FIXTURES_DIR, kind)
    return sorted(
        os.path.join(directory, name) for name in os.listdir(directory)
        if os.path.splitext(name)[1] in LANG_EXTENSIONS
    )


@pytest.mark.parametrize("path", _fixture_files("working"), ids=os.path.basename)
def test_working_files_are_clean(path):
    with open(path, encoding="utf-8") as f:
        code = f.read()

    assert lint(LANG_EXTENSIONS[os.path.splitext(path)[1]], code) == []


@pytest.mark.parametrize("path", _fixture_files("failing"), ids=os.path.basename)
def test_failing_files_report_diagnostics(path):
    with open(path, encoding="utf-8") as f:
        code = f.read()

    diagnostics = lint(LANG_EXTENSIONS[os.path.splitext(path)[1]], code)

    assert diagnostics
    assert all(d.line >= 1 and d.column >= 1 for d in diagnostics)

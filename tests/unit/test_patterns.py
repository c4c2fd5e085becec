"""Tests for the anti-pattern rule set and matcher."""

from __future__ import annotations

from mergegate.scanner.models import Scope
from mergegate.scanner.patterns import (
    PATTERNS,
    iter_violations,
    match_pattern,
    physical_lines,
)

_BY_NAME = {p.name: p for p in PATTERNS}


def _names(content: str) -> list[str]:
    return [v.pattern_name for v in iter_violations(content, "a.ts")]


class TestRuleSet:
    def test_exactly_one_whole_file_pattern(self):
        whole = [p for p in PATTERNS if p.scope is Scope.WHOLE_FILE]
        assert len(whole) == 1
        assert whole[0].name == "Empty catch block"

    def test_rule_order(self):
        assert [p.name for p in PATTERNS] == [
            "'as any'",
            "'@ts-ignore' or '@ts-expect-error'",
            "'console.log'",
            "Native dialog (window.alert/confirm)",
            "Empty catch block",
        ]


class TestLinePatterns:
    def test_as_any_on_line_ten(self):
        content = "\n" * 9 + "const x = value as any;\n"
        violations = list(iter_violations(content, "apps/web/x.ts"))
        assert len(violations) == 1
        v = violations[0]
        assert v.pattern_name == "'as any'"
        assert v.line == 10
        assert v.snippet == "const x = value as any;"
        assert v.file_path == "apps/web/x.ts"

    def test_as_anything_is_not_flagged(self):
        assert _names("const y = x as anything;") == []
        assert _names("const has_any = true;") == []

    def test_ts_comment_markers(self):
        assert _names("// @ts-ignore") == ["'@ts-ignore' or '@ts-expect-error'"]
        assert _names("// @ts-expect-error") == ["'@ts-ignore' or '@ts-expect-error'"]

    def test_console_log_line(self):
        content = "import x from 'y';\n  console.log(x);\nexport default x;\n"
        violations = match_pattern(_BY_NAME["'console.log'"], content, "a.ts")
        assert len(violations) == 1
        assert violations[0].line == 2
        assert violations[0].snippet == "  console.log(x);"

    def test_console_error_not_flagged(self):
        assert _names("console.error('boom');") == []

    def test_native_dialogs(self):
        assert _names("window.alert('hi');") == ["Native dialog (window.alert/confirm)"]
        assert _names("if (window.confirm('ok?')) {}") == [
            "Native dialog (window.alert/confirm)"
        ]
        assert _names("window.prompt('name');") == []

    def test_one_violation_per_line_even_with_repeats(self):
        assert _names("console.log(1); console.log(2);") == ["'console.log'"]

    def test_crlf_line_text_has_no_carriage_return(self):
        content = "const a = 1;\r\nconsole.log(a);\r\n"
        violations = list(iter_violations(content, "a.ts"))
        assert violations[0].line == 2
        assert violations[0].snippet == "console.log(a);"


class TestEmptyCatch:
    def test_multiline_empty_catch(self):
        content = "try {\n  run();\n} catch (e) {\n}\n"
        violations = list(iter_violations(content, "a.ts"))
        assert len(violations) == 1
        assert violations[0].pattern_name == "Empty catch block"
        assert violations[0].line is None

    def test_whitespace_only_body(self):
        content = "try { run(); } catch (err) {\n\n   \t\n}"
        assert _names(content) == ["Empty catch block"]

    def test_handled_catch_not_flagged(self):
        content = "try { run(); } catch (e) {\n  report(e);\n}\n"
        assert _names(content) == []

    def test_each_empty_block_reported(self):
        content = "catch (a) {}\nfoo();\ncatch (b) {\n}\n"
        assert _names(content) == ["Empty catch block", "Empty catch block"]


class TestMatcher:
    def test_deterministic(self):
        content = (
            "const a = b as any;\n"
            "console.log(a);\n"
            "try { x(); } catch (e) {}\n"
            "// @ts-ignore\n"
        )
        first = list(iter_violations(content, "a.ts"))
        second = list(iter_violations(content, "a.ts"))
        assert first == second
        assert len(first) == 4

    def test_violations_grouped_by_pattern(self):
        content = "console.log(1);\nconst a = b as any;\n"
        violations = list(iter_violations(content, "a.ts"))
        assert [(v.pattern_name, v.line) for v in violations] == [
            ("'as any'", 2),
            ("'console.log'", 1),
        ]

    def test_clean_file(self):
        assert _names("export const add = (a: number, b: number) => a + b;\n") == []


class TestPhysicalLines:
    def test_trailing_newline_dropped(self):
        assert physical_lines("a\nb\n") == ["a", "b"]

    def test_form_feed_does_not_split(self):
        assert physical_lines("a\x0cb\nc") == ["a\x0cb", "c"]

    def test_empty(self):
        assert physical_lines("") == []

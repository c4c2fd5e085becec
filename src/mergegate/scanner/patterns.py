"""Forbidden-construct patterns and the matcher that applies them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mergegate.scanner.models import Scope, Violation


@dataclass(frozen=True)
class Pattern:
    """A named detection rule with a compiled regex and a match scope."""

    name: str
    regex: re.Pattern[str]
    scope: Scope = Scope.LINE


PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="'as any'",
        regex=re.compile(r"\bas\s+any\b"),
    ),
    Pattern(
        name="'@ts-ignore' or '@ts-expect-error'",
        regex=re.compile(r"@ts-ignore|@ts-expect-error"),
    ),
    Pattern(
        name="'console.log'",
        regex=re.compile(r"\bconsole\.log\b"),
    ),
    Pattern(
        name="Native dialog (window.alert/confirm)",
        regex=re.compile(r"\bwindow\.(alert|confirm)\b"),
    ),
    # Braces may sit on different lines, so this one sees the whole file.
    Pattern(
        name="Empty catch block",
        regex=re.compile(r"catch\s*\([^)]*\)\s*\{\s*\}", re.DOTALL),
        scope=Scope.WHOLE_FILE,
    ),
)


def physical_lines(content: str) -> list[str]:
    """Split content on newlines, dropping a trailing CR from each line."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def match_pattern(pattern: Pattern, content: str, file_path: str) -> list[Violation]:
    """Return every match of one pattern against file content."""
    if pattern.scope is Scope.WHOLE_FILE:
        return [
            Violation(
                file_path=file_path,
                pattern_name=pattern.name,
                snippet=m.group(0),
            )
            for m in pattern.regex.finditer(content)
        ]

    return [
        Violation(
            file_path=file_path,
            pattern_name=pattern.name,
            snippet=line,
            line=line_num,
        )
        for line_num, line in enumerate(physical_lines(content), start=1)
        if pattern.regex.search(line)
    ]


def iter_violations(
    content: str,
    file_path: str,
    patterns: Iterable[Pattern] = PATTERNS,
) -> Iterator[Violation]:
    """Yield violations pattern by pattern, in rule-set order."""
    for pattern in patterns:
        yield from match_pattern(pattern, content, file_path)

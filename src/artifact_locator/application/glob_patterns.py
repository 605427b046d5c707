"""Glob pattern helpers — brace alternation and log rendering."""

from __future__ import annotations

from pathlib import Path

from artifact_locator.domain.errors import InvalidPatternError


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternation groups into plain glob patterns.

    Groups may be nested. Expansion order follows the alternatives left to
    right, so ``"{a,b}/{x,y}"`` yields ``a/x, a/y, b/x, b/y``.

    Raises:
        InvalidPatternError: On an unbalanced ``{`` or ``}``.
    """
    start = _find_group_start(pattern)
    if start is None:
        if "}" in pattern:
            raise InvalidPatternError(f"Unbalanced '}}' in glob pattern: {pattern!r}")
        return [pattern]

    end, alternatives = _split_group(pattern, start)
    prefix = pattern[:start]
    expanded: list[str] = []
    suffixes = expand_braces(pattern[end + 1 :])
    for alternative in alternatives:
        for head in expand_braces(alternative):
            expanded.extend(prefix + head + suffix for suffix in suffixes)
    return expanded


def _find_group_start(pattern: str) -> int | None:
    index = pattern.find("{")
    return None if index == -1 else index


def _split_group(pattern: str, start: int) -> tuple[int, list[str]]:
    """Split the group opening at ``start`` into its top-level alternatives.

    Returns the index of the matching ``}`` and the alternatives.
    """
    if "}" in pattern[:start]:
        raise InvalidPatternError(f"Unbalanced '}}' in glob pattern: {pattern!r}")

    depth = 0
    alternatives: list[str] = []
    current: list[str] = []
    for index in range(start + 1, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                alternatives.append("".join(current))
                return index, alternatives
            depth -= 1
        elif char == "," and depth == 0:
            alternatives.append("".join(current))
            current = []
            continue
        current.append(char)
    raise InvalidPatternError(f"Unbalanced '{{' in glob pattern: {pattern!r}")


def describe_pattern(root: Path, pattern: str) -> str:
    """Render a root-relative pattern for log lines."""
    return f"{root.as_posix().rstrip('/')}/{pattern}"

"""Glob-based path exclusion.

Patterns use shell glob syntax and are matched against the whole path
relative to the scan root:

    *       any run of characters except "/"
    ?       any single character except "/"
    [a-z]   character class; [^a-z] negates it
    \\c      the literal character c

Unlike ``fnmatch``, ``*`` never crosses a directory separator, so ``build/*``
matches ``build/out.o`` and ``build/sub`` but not ``src/build/x``. A
directory that matches prunes its whole subtree in the walker.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from .exceptions import FilterError
from .models import clean_pattern


class _BadPattern(ValueError):
    pass


def _read_class_char(pattern: str, i: int) -> tuple[str, int]:
    """Read one (possibly escaped) character inside a class."""
    if i >= len(pattern):
        raise _BadPattern("unterminated character class")
    c = pattern[i]
    if c in "-]":
        raise _BadPattern(f"unexpected {c!r} in character class")
    if c == "\\":
        i += 1
        if i >= len(pattern):
            raise _BadPattern("trailing escape in character class")
        c = pattern[i]
    return c, i + 1


def _translate_class(pattern: str, i: int) -> tuple[str, int]:
    """Translate a class starting just after "["; return regex and next index."""
    negated = i < len(pattern) and pattern[i] == "^"
    if negated:
        i += 1

    ranges: list[str] = []
    while True:
        if i >= len(pattern):
            raise _BadPattern("unterminated character class")
        if pattern[i] == "]" and ranges:
            i += 1
            break
        lo, i = _read_class_char(pattern, i)
        hi = lo
        if i < len(pattern) and pattern[i] == "-":
            hi, i = _read_class_char(pattern, i + 1)
            if hi < lo:
                raise _BadPattern(f"bad range {lo}-{hi}")
        if lo == hi:
            ranges.append(re.escape(lo))
        else:
            ranges.append(f"{re.escape(lo)}-{re.escape(hi)}")

    return ("[^" if negated else "[") + "".join(ranges) + "]", i


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile a glob pattern to an anchored regex.

    Raises:
        ValueError: If the pattern is malformed
    """
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "*":
            while i < len(pattern) and pattern[i] == "*":
                i += 1
            parts.append("[^/]*")
            continue
        if c == "?":
            parts.append("[^/]")
        elif c == "[":
            regex, i = _translate_class(pattern, i + 1)
            parts.append(regex)
            continue
        elif c == "\\":
            i += 1
            if i >= len(pattern):
                raise _BadPattern("trailing escape")
            parts.append(re.escape(pattern[i]))
        else:
            parts.append(re.escape(c))
        i += 1
    return re.compile("".join(parts), re.DOTALL)


def match_pattern(pattern: str, path: str) -> bool:
    """Match one cleaned pattern against a whole relative path."""
    return compile_pattern(pattern).fullmatch(path) is not None


def should_exclude(path: str, patterns: Iterable[str]) -> bool:
    """Return True if ``path`` matches any exclusion pattern.

    Patterns are cleaned and tried in order; the first match wins.

    Raises:
        FilterError: If a pattern reached during matching is malformed
    """
    for pattern in patterns:
        cleaned = clean_pattern(pattern)
        try:
            if match_pattern(cleaned, path):
                return True
        except ValueError as e:
            raise FilterError(cleaned, path, str(e)) from e
    return False

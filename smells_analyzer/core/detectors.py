"""Line-based test smell detectors.

Every detector takes the lines of one test file plus the file's base name
and returns True when the smell is present. Detectors are plain functions
over text: they match substrings and whole-line shapes, never a syntax
tree, so they share the imprecision of the heuristics they encode
(``if`` matches ``different``, ``for`` matches ``forEach``, and so on).

Shape detectors mirror whole-line patterns such as ``.*public.*\\(.*\\).*\\{.*``:
the fixed pieces must appear in order, and every other character of the line
must be one a regex ``.`` accepts. They are checked with ``str.find`` so a
very long line costs linear time.
"""

from typing import Sequence

DEFAULT_TEST_NAMES = frozenset({"ExampleUnitTest.java", "ExampleInstrumentedTest.java"})

# Characters removed by Java's String.trim(): space and ASCII control characters.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))

# Line terminators a regex ``.`` never matches besides \n and \r.
_UNMATCHED_BY_DOT = ("\u0085", "\u2028", "\u2029")

_ASCII_DIGITS = frozenset("0123456789")


def _dot_matches_all(line: str) -> bool:
    return not any(char in line for char in _UNMATCHED_BY_DOT)


def _find_in_order(text: str, *parts: str) -> int:
    """Index just past the last part, or -1 if the parts do not occur in order."""
    position = 0
    for part in parts:
        index = text.find(part, position)
        if index == -1:
            return -1
        position = index + len(part)
    return position


def _is_constructor_line(line: str) -> bool:
    # .*public.*\(.*\).*\{.*
    return _dot_matches_all(line) and _find_in_order(line, "public", "(", ")", "{") != -1


def _is_method_call_line(line: str) -> bool:
    # .*\..*\(.*\);
    return (
        line.endswith(");")
        and _dot_matches_all(line)
        and _find_in_order(line[:-2], ".", "(") != -1
    )


def _is_private_field_line(line: str) -> bool:
    # private .*;
    return (
        len(line) >= len("private ;")
        and line.startswith("private ")
        and line.endswith(";")
        and _dot_matches_all(line)
    )


def _is_magic_number_line(line: str) -> bool:
    # .*assert.*\(.*\d+.*\);  with ASCII digits
    if not line.endswith(");") or not _dot_matches_all(line):
        return False
    head = line[:-2]
    position = _find_in_order(head, "assert", "(")
    return position != -1 and any(char in _ASCII_DIGITS for char in head[position:])


def _is_redundant_assertion_line(line: str) -> bool:
    # .*assertEquals\(.*true, true.*\);
    return (
        line.endswith(");")
        and _dot_matches_all(line)
        and _find_in_order(line[:-2], "assertEquals(", "true, true") != -1
    )


def _assert_lines(lines: Sequence[str]) -> list:
    return [line for line in lines if "assert" in line]


def _has_eager_shape(lines: Sequence[str]) -> bool:
    """More than one assertion line plus a ``receiver.method(...);`` call."""
    return len(_assert_lines(lines)) > 1 and any(
        _is_method_call_line(line) for line in lines
    )


def detect_assertion_roulette(lines: Sequence[str], file_name: str) -> bool:
    """Several assertions without an explanation message.

    An assertion carrying a message has a comma-separated argument list,
    so only assertion lines without any comma are counted.
    """
    count = sum(1 for line in lines if "assert" in line and "," not in line)
    return count > 1


def detect_conditional_test_logic(lines: Sequence[str], file_name: str) -> bool:
    return any(
        "if" in line or "switch" in line or "for" in line or "while" in line
        for line in lines
    )


def detect_constructor_initialization(lines: Sequence[str], file_name: str) -> bool:
    return any(_is_constructor_line(line) for line in lines)


def detect_default_test(lines: Sequence[str], file_name: str) -> bool:
    """Scaffold-generated test classes left in the project."""
    return file_name in DEFAULT_TEST_NAMES


def detect_duplicate_assert(lines: Sequence[str], file_name: str) -> bool:
    assert_lines = _assert_lines(lines)
    return len(set(assert_lines)) < len(assert_lines)


def detect_eager_test(lines: Sequence[str], file_name: str) -> bool:
    return _has_eager_shape(lines)


def detect_empty_test(lines: Sequence[str], file_name: str) -> bool:
    """Only blank lines and ``//`` comments (true for a file with no lines)."""
    for line in lines:
        trimmed = line.strip(_TRIM_CHARS)
        if trimmed and not trimmed.startswith("//"):
            return False
    return True


def detect_exception_handling(lines: Sequence[str], file_name: str) -> bool:
    return any("throw" in line or "catch" in line for line in lines)


def detect_general_fixture(lines: Sequence[str], file_name: str) -> bool:
    has_setup = any("void setUp" in line for line in lines)
    has_fields = any(
        _is_private_field_line(line) and "assert" not in line
        for line in lines
    )
    return has_setup and has_fields


def detect_ignored_test(lines: Sequence[str], file_name: str) -> bool:
    return any("@Ignore" in line for line in lines)


def detect_lazy_test(lines: Sequence[str], file_name: str) -> bool:
    # Same heuristic as Eager Test, reported under its own name.
    return _has_eager_shape(lines)


def detect_magic_number_test(lines: Sequence[str], file_name: str) -> bool:
    return any(_is_magic_number_line(line) for line in lines)


def detect_mystery_guest(lines: Sequence[str], file_name: str) -> bool:
    """References to files or databases hidden from the test reader."""
    return any("File" in line or "Database" in line for line in lines)


def detect_redundant_print(lines: Sequence[str], file_name: str) -> bool:
    return any("System.out.print" in line for line in lines)


def detect_redundant_assertion(lines: Sequence[str], file_name: str) -> bool:
    return any(_is_redundant_assertion_line(line) for line in lines)


def detect_resource_optimism(lines: Sequence[str], file_name: str) -> bool:
    """File usage on a line that never checks the file exists."""
    return any(
        "File" in line and not ("exists()" in line or "isFile()" in line)
        for line in lines
    )


def detect_sensitive_equality(lines: Sequence[str], file_name: str) -> bool:
    return any(".toString()" in line and "assert" in line for line in lines)


def detect_sleepy_test(lines: Sequence[str], file_name: str) -> bool:
    return any("Thread.sleep" in line for line in lines)


def detect_unknown_test(lines: Sequence[str], file_name: str) -> bool:
    return not any("assert" in line for line in lines)

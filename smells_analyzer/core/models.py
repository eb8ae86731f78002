"""Core data models for the test smell scanner."""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional, Tuple


@dataclass(frozen=True)
class TestFile:
    """A test source file viewed as an ordered sequence of text lines."""
    __test__ = False  # not a pytest test class

    path: str
    lines: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Base name of the file (e.g. ``ExampleUnitTest.java``)."""
        return PurePath(self.path).name


@dataclass(frozen=True)
class Finding:
    """A single smell detected in a single file."""
    file_path: str
    smell_name: str

    @property
    def message(self) -> str:
        return f"{self.smell_name} detected in: {self.file_path}"


class ScanError(Exception):
    """Raised when test files cannot be discovered or read.

    The underlying I/O error is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

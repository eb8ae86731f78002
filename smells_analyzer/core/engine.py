"""Scan engine: runs the detector catalog over a set of test files."""

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from smells_analyzer.core.config import ScanConfig, get_default_config
from smells_analyzer.core.models import Finding, ScanError, TestFile
from smells_analyzer.core.reporting import LogReporter
from smells_analyzer.core.rules import DetectorRegistry

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
LineReader = Callable[[PathLike], Sequence[str]]
FindingSink = Callable[[Finding], None]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> Tuple[str, ...]:
    """Split text on ``\\n``, ``\\r`` or ``\\r\\n``.

    A final line terminator does not start an extra empty line, so empty
    text has no lines at all.
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


def read_lines(path: PathLike) -> Tuple[str, ...]:
    """Read a UTF-8 file as a sequence of lines.

    Raises:
        ScanError: If the file cannot be read or is not valid UTF-8
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
        text = data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(f"Failed to read {path}: {e}", path=str(path)) from e
    return split_lines(text)


def discover_test_files(root: PathLike, extension: str = ".java") -> List[Path]:
    """Find test files under a directory.

    Args:
        root: Directory to search recursively (or a single file)
        extension: Suffix the path must end with (case-sensitive)

    Returns:
        Matching regular files, sorted by path

    Raises:
        ScanError: If the root does not exist or cannot be walked
    """
    root = Path(root)

    if root.is_file():
        return [root] if str(root).endswith(extension) else []
    if not root.is_dir():
        raise ScanError(f"Test directory not found: {root}", path=str(root))

    def on_error(error: OSError) -> None:
        raise ScanError(
            f"Failed to walk test directory {root}: {error}",
            path=error.filename or str(root),
        ) from error

    test_files = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
        for filename in filenames:
            file_path = Path(dirpath) / filename
            if file_path.is_file() and str(file_path).endswith(extension):
                test_files.append(file_path)

    return sorted(test_files)


class ScanEngine:
    """Runs every enabled detector over test files and reports findings.

    Files are handled in the order given and detectors in catalog order,
    so findings always come out grouped by file, then by catalog position.
    """

    def __init__(
        self,
        registry: DetectorRegistry,
        config: Optional[ScanConfig] = None,
    ):
        self.registry = registry
        self.config = config or get_default_config()

    def analyze(self, test_file: TestFile) -> List[Finding]:
        """Run the catalog on one file.

        Args:
            test_file: File to inspect

        Returns:
            Findings in catalog order
        """
        logger.debug("Analyzing %s (%d lines)", test_file.path, len(test_file.lines))
        return self.registry.run_detectors(test_file)

    def iter_findings(
        self,
        paths: Iterable[PathLike],
        read: LineReader = read_lines,
    ) -> Iterator[Finding]:
        """Yield findings for each file in order.

        Args:
            paths: Files to scan, in reporting order
            read: Function returning the lines of a file

        Yields:
            Findings, grouped by file in input order

        Raises:
            ScanError: If a file cannot be read; the scan stops there
        """
        def load_and_analyze(path: PathLike) -> List[Finding]:
            return self.analyze(self._load(path, read))

        if self.config.parallel_processing:
            # map() hands results back in submission order
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                for findings in executor.map(load_and_analyze, paths):
                    yield from findings
        else:
            for path in paths:
                yield from load_and_analyze(path)

    def scan(
        self,
        paths: Iterable[PathLike],
        emit: FindingSink,
        read: LineReader = read_lines,
    ) -> int:
        """Scan files and stream each finding to a sink.

        Args:
            paths: Files to scan, in reporting order
            emit: Callback receiving each finding as soon as it is known
            read: Function returning the lines of a file

        Returns:
            Number of findings emitted
        """
        count = 0
        for finding in self.iter_findings(paths, read):
            emit(finding)
            count += 1
        return count

    def scan_directory(self, root: Optional[PathLike] = None, emit: Optional[FindingSink] = None) -> int:
        """Discover test files under a directory and scan them.

        Args:
            root: Directory to scan (defaults to the configured test directory)
            emit: Callback receiving each finding

        Returns:
            Number of findings emitted
        """
        if root is None:
            root = self.config.test_directory
        if emit is None:
            emit = LogReporter()

        logger.info("Starting test smell analysis...")
        test_files = discover_test_files(root, self.config.file_extension)
        logger.debug("Found %d test file(s) under %s", len(test_files), root)

        count = self.scan(test_files, emit)

        logger.info("Test smell analysis completed.")
        return count

    @staticmethod
    def _load(path: PathLike, read: LineReader) -> TestFile:
        try:
            lines = read(path)
        except ScanError:
            raise
        except (OSError, UnicodeError) as e:
            raise ScanError(f"Failed to read {path}: {e}", path=str(path)) from e
        return TestFile(str(path), tuple(lines))


def create_default_engine(config: Optional[ScanConfig] = None) -> ScanEngine:
    """Create a scan engine with the default detector catalog.

    Args:
        config: Optional configuration (uses default if None)

    Returns:
        Configured ScanEngine
    """
    from smells_analyzer.core.smells import create_default_registry

    if config is None:
        config = get_default_config()

    registry = create_default_registry(config.disabled_smells)

    return ScanEngine(config=config, registry=registry)

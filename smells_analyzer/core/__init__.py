"""Core detection engine for the test smell scanner."""

from smells_analyzer.core.models import (
    TestFile,
    Finding,
    ScanError,
)
from smells_analyzer.core.rules import (
    SmellDetector,
    DetectorRegistry,
)
from smells_analyzer.core.smells import (
    get_default_detectors,
    create_default_registry,
)
from smells_analyzer.core.engine import (
    ScanEngine,
    create_default_engine,
    discover_test_files,
    read_lines,
)
from smells_analyzer.core.reporting import (
    LogReporter,
    JSONReporter,
)

__all__ = [
    "TestFile",
    "Finding",
    "ScanError",
    "SmellDetector",
    "DetectorRegistry",
    "get_default_detectors",
    "create_default_registry",
    "ScanEngine",
    "create_default_engine",
    "discover_test_files",
    "read_lines",
    "LogReporter",
    "JSONReporter",
]

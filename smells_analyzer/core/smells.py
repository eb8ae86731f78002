"""The default test smell catalog.

The order of this list is the order in which smells are reported for
each file.
"""

from typing import Iterable, List, Optional

from smells_analyzer.core import detectors
from smells_analyzer.core.rules import DetectorRegistry, SmellDetector


def get_default_detectors() -> List[SmellDetector]:
    """Get all built-in test smell detectors in catalog order."""
    return [
        SmellDetector(
            "Assertion Roulette",
            detectors.detect_assertion_roulette,
            "Several assertions without an explanation message.",
        ),
        SmellDetector(
            "Conditional Test Logic",
            detectors.detect_conditional_test_logic,
            "Control flow (if/switch/for/while) inside the test.",
        ),
        SmellDetector(
            "Constructor Initialization",
            detectors.detect_constructor_initialization,
            "Fixture set up in a constructor instead of a setup method.",
        ),
        SmellDetector(
            "Default Test",
            detectors.detect_default_test,
            "Scaffold-generated example test class left in place.",
        ),
        SmellDetector(
            "Duplicate Assert",
            detectors.detect_duplicate_assert,
            "The same assertion appears more than once.",
        ),
        SmellDetector(
            "Eager Test",
            detectors.detect_eager_test,
            "Several assertions together with production method calls.",
        ),
        SmellDetector(
            "Empty Test",
            detectors.detect_empty_test,
            "Only blank lines and comments.",
        ),
        SmellDetector(
            "Exception Handling",
            detectors.detect_exception_handling,
            "The test throws or catches exceptions itself.",
        ),
        SmellDetector(
            "General Fixture",
            detectors.detect_general_fixture,
            "A setUp method next to private fields that not every test needs.",
        ),
        SmellDetector(
            "Ignored Test",
            detectors.detect_ignored_test,
            "Test disabled with @Ignore.",
        ),
        SmellDetector(
            "Lazy Test",
            detectors.detect_lazy_test,
            "Several tests exercising the same production method.",
        ),
        SmellDetector(
            "Magic Number Test",
            detectors.detect_magic_number_test,
            "Numeric literals inside assertions.",
        ),
        SmellDetector(
            "Mystery Guest",
            detectors.detect_mystery_guest,
            "Hidden dependency on files or databases.",
        ),
        SmellDetector(
            "Redundant Print",
            detectors.detect_redundant_print,
            "Printing to standard output from a test.",
        ),
        SmellDetector(
            "Redundant Assertion",
            detectors.detect_redundant_assertion,
            "An assertion that always passes (true equals true).",
        ),
        SmellDetector(
            "Resource Optimism",
            detectors.detect_resource_optimism,
            "File usage without checking that the file exists.",
        ),
        SmellDetector(
            "Sensitive Equality",
            detectors.detect_sensitive_equality,
            "Assertions comparing toString() output.",
        ),
        SmellDetector(
            "Sleepy Test",
            detectors.detect_sleepy_test,
            "Thread.sleep() used to wait inside a test.",
        ),
        SmellDetector(
            "Unknown Test",
            detectors.detect_unknown_test,
            "No assertion anywhere in the file.",
        ),
    ]


def create_default_registry(disabled_smells: Optional[Iterable[str]] = None) -> DetectorRegistry:
    """Create a registry holding the default catalog.

    Args:
        disabled_smells: Names or slugs of smells to switch off

    Returns:
        Configured DetectorRegistry

    Raises:
        KeyError: If a disabled smell is not in the catalog
    """
    registry = DetectorRegistry()
    registry.register_many(get_default_detectors())

    for key in disabled_smells or ():
        registry.disable(key)

    return registry

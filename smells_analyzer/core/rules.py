"""Ordered registry of test smell detectors."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Set

from smells_analyzer.core.models import Finding, TestFile

logger = logging.getLogger(__name__)

DetectorFunc = Callable[[Sequence[str], str], bool]


@dataclass(frozen=True)
class SmellDetector:
    """A named smell heuristic.

    The name is the label used in reports; the detect function receives the
    file's lines and base name and returns whether the smell is present.
    """
    name: str
    detect: DetectorFunc
    description: str = ""

    @property
    def slug(self) -> str:
        """Kebab-case identifier used in configuration (``assertion-roulette``)."""
        return "-".join(self.name.lower().split())


class DetectorRegistry:
    """Registry for managing and executing smell detectors.

    Detectors run in registration order, which is also the order in which
    findings for a single file are reported.
    """

    def __init__(self):
        self._detectors: Dict[str, SmellDetector] = {}
        self._disabled: Set[str] = set()

    def register(self, detector: SmellDetector) -> None:
        """Register a detector.

        Re-registering a name replaces the detector but keeps its position.

        Args:
            detector: The detector to register
        """
        self._detectors[detector.name] = detector

    def register_many(self, detectors: Sequence[SmellDetector]) -> None:
        """Register multiple detectors at once, preserving their order."""
        for detector in detectors:
            self.register(detector)

    def get(self, key: str) -> Optional[SmellDetector]:
        """Get a detector by display name or slug.

        Args:
            key: Display name (``Sleepy Test``) or slug (``sleepy-test``)

        Returns:
            The detector or None if not found
        """
        if key in self._detectors:
            return self._detectors[key]
        for detector in self._detectors.values():
            if detector.slug == key:
                return detector
        return None

    def disable(self, key: str) -> None:
        """Disable a detector.

        Raises:
            KeyError: If no detector is registered under that name or slug
        """
        detector = self.get(key)
        if detector is None:
            raise KeyError(f"Unknown test smell: {key}")
        self._disabled.add(detector.name)

    def enable(self, key: str) -> None:
        """Enable a previously disabled detector."""
        detector = self.get(key)
        if detector is not None:
            self._disabled.discard(detector.name)

    def get_enabled(self) -> List[SmellDetector]:
        """All enabled detectors in registration order."""
        return [
            detector
            for detector in self._detectors.values()
            if detector.name not in self._disabled
        ]

    def evaluate(self, detector: SmellDetector, test_file: TestFile) -> bool:
        """Run one detector, treating a detector crash as "no match".

        Args:
            detector: The detector to run
            test_file: The file to inspect

        Returns:
            The detector's verdict, or False if it raised
        """
        try:
            return bool(detector.detect(test_file.lines, test_file.name))
        except Exception as e:
            logger.error(
                "Error running detector %s on %s: %s", detector.name, test_file.path, e
            )
            return False

    def run_detectors(self, test_file: TestFile) -> List[Finding]:
        """Run all enabled detectors on a file.

        Args:
            test_file: The file to check

        Returns:
            One finding per matching detector, in registration order
        """
        return [
            Finding(test_file.path, detector.name)
            for detector in self.get_enabled()
            if self.evaluate(detector, test_file)
        ]

"""Report sinks for findings."""

import json
import logging
from typing import List, Optional

from smells_analyzer.core.models import Finding


class LogReporter:
    """Reports each finding as a warning record.

    Output looks like ``Sleepy Test detected in: src/test/java/FooTest.java``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("smells_analyzer")
        self.count = 0

    def __call__(self, finding: Finding) -> None:
        self.logger.warning(finding.message)
        self.count += 1


class JSONReporter:
    """Collects findings and renders them as JSON."""

    def __init__(self):
        self.findings: List[Finding] = []

    def __call__(self, finding: Finding) -> None:
        self.findings.append(finding)

    def render(self) -> str:
        """Render collected findings in emission order."""
        findings_data = [
            {"file": f.file_path, "smell": f.smell_name}
            for f in self.findings
        ]

        return json.dumps(
            {"findings": findings_data, "total": len(self.findings)}, indent=2
        )

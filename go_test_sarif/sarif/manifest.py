"""SARIF version manifest definition."""

from collections.abc import Callable
from dataclasses import dataclass

from go_test_sarif.models.report import Report
from go_test_sarif.sarif.wire import SarifLog


@dataclass(frozen=True, kw_only=True)
class SarifVersion:
    """Manifest describing one supported SARIF version.

    The manifest holds the version string written into the document, the
    schema URI, and the function mapping a report onto the document layout.
    """

    version: str
    schema_uri: str
    build_log: Callable[..., SarifLog]

    def to_log(self, report: Report) -> SarifLog:
        """Build the SARIF document for a report."""
        return self.build_log(report, schema_uri=self.schema_uri, version=self.version)

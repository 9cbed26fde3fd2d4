"""Conversion of `go test -json` output into SARIF reports."""

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import Field

from go_test_sarif.models.base import Model
from go_test_sarif.models.event import TestEvent
from go_test_sarif.models.report import LogicalLocation, Report, Result, Rule
from go_test_sarif.parser import parse_file
from go_test_sarif.sarif import DEFAULT_VERSION, get_sarif_version, serialize

log = logging.getLogger(__name__)

TOOL_NAME = "go-test-sarif"
TOOL_INFO_URI = "https://golang.org/cmd/go/"

TEST_FAILURE_RULE = Rule(id="test-failure", description="go test failure")


class ConvertOptions(Model):
    """Options controlling the SARIF output."""

    sarif_version: str = Field(
        default=DEFAULT_VERSION, description="SARIF version to emit"
    )
    pretty: bool = Field(default=False, description="Indent the JSON output")


def build_report(events: Iterable[TestEvent]) -> Report:
    """Build a report with one error result per failed test or package.

    Events keep their input order and are never merged, so a test failing
    several times yields several results. Failures carrying neither a
    package nor a test name are dropped.
    """
    results = [
        Result(
            rule_id=TEST_FAILURE_RULE.id,
            level="error",
            message=event.output,
            location=LogicalLocation(module=event.package, function=event.test),
        )
        for event in events
        if event.action == "fail" and (event.test or event.package)
    ]
    return Report(
        tool_name=TOOL_NAME,
        tool_info_uri=TOOL_INFO_URI,
        rules=(TEST_FAILURE_RULE,),
        results=results,
    )


def convert_to_sarif(
    input_path: Path,
    output_path: Path,
    options: ConvertOptions | None = None,
) -> None:
    """Convert a `go test -json` log file into a SARIF file.

    The document is rendered in memory before anything is written, so a
    failure never leaves a partial output file behind.

    Raises:
        OSError: If the input cannot be read or the output cannot be written
        ParseError: If a line of the input is not valid JSON
        UnsupportedVersionError: If the requested SARIF version is unknown
        SerializationError: If the report cannot be encoded

    """
    options = options or ConvertOptions()
    # Reject unknown versions before touching the filesystem.
    get_sarif_version(options.sarif_version)

    events = parse_file(Path(input_path))
    report = build_report(events)
    log.info(
        "Read %d event(s), %d test failure(s) found",
        len(events),
        len(report.results),
    )

    data = serialize(report, options.sarif_version, options.pretty)
    Path(output_path).write_bytes(data)
    log.info("Wrote SARIF %s report to %s", options.sarif_version, output_path)

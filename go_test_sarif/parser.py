"""Parse `go test -json` output into test events."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import ValidationError

from go_test_sarif.errors import GoTestSarifError
from go_test_sarif.models.event import TestEvent

log = logging.getLogger(__name__)


class ParseError(GoTestSarifError):
    """Raised when a line of the event stream is not a valid JSON event."""

    def __init__(self, line_number: int, error: ValidationError) -> None:
        super().__init__(f"line {line_number}: invalid JSON: {_describe(error)}")
        self.line_number = line_number
        self.error = error


def parse_file(path: Path) -> Sequence[TestEvent]:
    """Parse a file of newline-delimited JSON test events.

    Raises:
        OSError: If the file cannot be opened or read
        ParseError: If a line cannot be decoded

    """
    with Path(path).open("rb") as stream:
        events = parse_stream(stream)

    log.debug("Parsed %d event(s) from %s", len(events), path)
    return events


def parse_stream(stream: Iterable[bytes]) -> Sequence[TestEvent]:
    """Parse newline-delimited JSON test events from a binary stream.

    Blank lines are skipped but still counted, so line numbers in errors
    match the input. Parsing stops at the first malformed line.
    """
    events: list[TestEvent] = []
    for line_number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            events.append(TestEvent.model_validate_json(line))
        except ValidationError as e:
            raise ParseError(line_number, e) from e
    return events


def _describe(error: ValidationError) -> str:
    """Summarize the first validation error without echoing the input line."""
    first = error.errors(include_url=False, include_input=False)[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]

"""Model for a single record of `go test -json` output."""

from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_pascal

from go_test_sarif.models.base import Model


class TestEvent(Model):
    """One decoded line of a `go test -json` stream.

    Field names on the wire are PascalCase (``Action``, ``Package``...).
    Unknown fields are ignored and missing fields fall back to empty values.
    """

    __test__ = False

    model_config = ConfigDict(alias_generator=to_pascal, extra="ignore")

    time: datetime | None = Field(default=None, description="Event timestamp")
    action: str = Field(default="", description="Action tag (run, pass, fail...)")
    package: str = Field(default="", description="Package import path")
    test: str = Field(default="", description="Test name, empty for package events")
    elapsed: float | None = Field(default=None, description="Elapsed seconds")
    output: str = Field(default="", description="Output text")
    failed_build: str = Field(
        default="", description="Import path of the package that failed to build"
    )

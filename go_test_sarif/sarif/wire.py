"""SARIF wire models shared by all supported versions."""

from collections.abc import Sequence

from pydantic import Field

from go_test_sarif.models.base import Model
from go_test_sarif.models.report import LogicalLocation, Report, Result


class Message(Model):
    """SARIF message object."""

    text: str


class ReportingDescriptor(Model):
    """Rule metadata in the driver's rule catalog."""

    id: str
    short_description: Message = Field(..., alias="shortDescription")


class Driver(Model):
    """The analysis tool that produced the run."""

    name: str
    information_uri: str | None = Field(default=None, alias="informationUri")
    rules: Sequence[ReportingDescriptor] | None = None


class Tool(Model):
    """SARIF tool object."""

    driver: Driver


class SarifLogicalLocation(Model):
    """Named location of a result."""

    fully_qualified_name: str = Field(..., alias="fullyQualifiedName")
    kind: str


class SarifResult(Model):
    """A single SARIF result."""

    rule_id: str = Field(..., alias="ruleId")
    level: str
    message: Message
    logical_locations: Sequence[SarifLogicalLocation] | None = Field(
        default=None, alias="logicalLocations"
    )


class Run(Model):
    """A single invocation of the tool."""

    tool: Tool
    results: Sequence[SarifResult]


class SarifLog(Model):
    """Top-level SARIF document."""

    schema_uri: str = Field(..., alias="$schema")
    version: str
    runs: Sequence[Run]


def build_sarif_log(report: Report, *, schema_uri: str, version: str) -> SarifLog:
    """Map a report onto the SARIF document layout of the given version."""
    return SarifLog(
        schema_uri=schema_uri,
        version=version,
        runs=[build_run(report)],
    )


def build_run(report: Report) -> Run:
    """Build the single run holding the report's rules and results."""
    rules = [
        ReportingDescriptor(
            id=rule.id, short_description=Message(text=rule.description)
        )
        for rule in report.rules
    ]
    driver = Driver(
        name=report.tool_name,
        information_uri=report.tool_info_uri or None,
        rules=rules or None,
    )
    return Run(
        tool=Tool(driver=driver),
        results=[build_result(result) for result in report.results],
    )


def build_result(result: Result) -> SarifResult:
    """Convert a report result, attaching its logical location if it has one."""
    location = (
        to_logical_location(result.location) if result.location is not None else None
    )
    return SarifResult(
        rule_id=result.rule_id,
        level=result.level,
        message=Message(text=result.message),
        logical_locations=[location] if location is not None else None,
    )


def to_logical_location(location: LogicalLocation) -> SarifLogicalLocation | None:
    """Derive the fully qualified name and kind of a logical location.

    Module and function join as ``module.function`` of kind ``function``; a
    lone function keeps kind ``function``; a lone module has kind ``module``.
    Returns None when both are empty.
    """
    if location.module and location.function:
        return SarifLogicalLocation(
            fully_qualified_name=f"{location.module}.{location.function}",
            kind="function",
        )
    if location.function:
        return SarifLogicalLocation(
            fully_qualified_name=location.function, kind="function"
        )
    if location.module:
        return SarifLogicalLocation(
            fully_qualified_name=location.module, kind="module"
        )
    return None

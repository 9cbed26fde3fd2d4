"""Version-agnostic SARIF report model."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

Level = Literal["error", "warning", "note"]


@dataclass(frozen=True, kw_only=True)
class Rule:
    """Catalog entry describing a category of finding."""

    id: str
    description: str


@dataclass(frozen=True, kw_only=True)
class LogicalLocation:
    """Location of a finding identified by name rather than file coordinates."""

    module: str = ""
    function: str = ""


@dataclass(frozen=True, kw_only=True)
class Result:
    """A single finding referencing a rule of the report."""

    rule_id: str
    level: Level
    message: str
    location: LogicalLocation | None = None


@dataclass(frozen=True, kw_only=True)
class Report:
    """Tool identity, rule catalog and findings of one conversion."""

    tool_name: str
    tool_info_uri: str = ""
    rules: Sequence[Rule] = field(default_factory=tuple)
    results: Sequence[Result] = field(default_factory=tuple)

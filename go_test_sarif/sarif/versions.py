"""Registry of supported SARIF versions and serialization entry point."""

import json
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from go_test_sarif.errors import GoTestSarifError
from go_test_sarif.models.report import Report
from go_test_sarif.sarif.manifest import SarifVersion
from go_test_sarif.sarif.v21 import sarif_v21
from go_test_sarif.sarif.v22 import sarif_v22

SARIF_VERSIONS: Mapping[str, SarifVersion] = MappingProxyType(
    {manifest.version: manifest for manifest in (sarif_v21, sarif_v22)}
)

DEFAULT_VERSION = sarif_v21.version


class UnsupportedVersionError(GoTestSarifError):
    """Raised when a SARIF version is not in the registry."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"unsupported SARIF version: {version} "
            f"(supported: {', '.join(supported_versions())})"
        )
        self.version = version


class SerializationError(GoTestSarifError):
    """Raised when a report cannot be encoded as SARIF."""


def supported_versions() -> Sequence[str]:
    """Return the registered SARIF versions, sorted."""
    return sorted(SARIF_VERSIONS)


def get_sarif_version(version: str) -> SarifVersion:
    """Look up the manifest of a SARIF version.

    Raises:
        UnsupportedVersionError: If the version is not registered

    """
    try:
        return SARIF_VERSIONS[version]
    except KeyError:
        raise UnsupportedVersionError(version) from None


def serialize(report: Report, version: str, pretty: bool = False) -> bytes:
    """Render a report as a SARIF document of the requested version.

    Compact output has no insignificant whitespace. Pretty output is the
    compact document re-indented with two spaces.

    Raises:
        UnsupportedVersionError: If the version is not registered
        SerializationError: If the report cannot be encoded

    """
    manifest = get_sarif_version(version)

    try:
        data = manifest.to_log(report).model_dump_json(
            by_alias=True, exclude_none=True
        )
    except (ValidationError, PydanticSerializationError) as e:
        raise SerializationError(f"failed to encode SARIF {version}: {e}") from e

    if pretty:
        data = json.dumps(json.loads(data), indent=2, ensure_ascii=False)

    return data.encode()

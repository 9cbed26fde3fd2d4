"""SARIF serialization for the supported schema versions."""

from go_test_sarif.sarif.manifest import SarifVersion
from go_test_sarif.sarif.versions import (
    DEFAULT_VERSION,
    SARIF_VERSIONS,
    SerializationError,
    UnsupportedVersionError,
    get_sarif_version,
    serialize,
    supported_versions,
)

__all__ = [
    "DEFAULT_VERSION",
    "SARIF_VERSIONS",
    "SarifVersion",
    "SerializationError",
    "UnsupportedVersionError",
    "get_sarif_version",
    "serialize",
    "supported_versions",
]

"""SARIF 2.1.0 manifest."""

from go_test_sarif.sarif.manifest import SarifVersion
from go_test_sarif.sarif.wire import build_sarif_log

VERSION = "2.1.0"
SCHEMA_URI = "https://json.schemastore.org/sarif-2.1.0.json"

sarif_v21 = SarifVersion(
    version=VERSION,
    schema_uri=SCHEMA_URI,
    build_log=build_sarif_log,
)

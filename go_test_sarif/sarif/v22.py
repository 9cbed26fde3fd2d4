"""SARIF 2.2 manifest.

2.2 is still a prerelease; the schema URI pins the published draft.
"""

from go_test_sarif.sarif.manifest import SarifVersion
from go_test_sarif.sarif.wire import build_sarif_log

VERSION = "2.2"
SCHEMA_URI = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/"
    "2.2-prerelease-2024-08-08/sarif-2.2/schema/sarif-2-2.schema.json"
)

sarif_v22 = SarifVersion(
    version=VERSION,
    schema_uri=SCHEMA_URI,
    build_log=build_sarif_log,
)

"""Convert `go test -json` event logs into SARIF reports."""

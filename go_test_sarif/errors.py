"""Base exception for conversion failures."""


class GoTestSarifError(Exception):
    """Base class for errors raised while converting test events to SARIF."""

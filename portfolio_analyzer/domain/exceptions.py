"""
Custom exception hierarchy for the portfolio analyzer.

Lookups that find nothing return None; these exceptions are for operations
that cannot proceed.
"""


class PortfolioAnalyzerError(Exception):
    """Base exception for all portfolio analyzer errors."""

    pass


class ValidationError(PortfolioAnalyzerError, ValueError):
    """Raised when input to a core operation is invalid."""

    pass


class NotFoundError(PortfolioAnalyzerError, LookupError):
    """Raised when an operation needs a record that does not exist."""

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class PersistenceError(PortfolioAnalyzerError):
    """Raised when the storage layer fails."""

    pass


class ValuationError(PortfolioAnalyzerError, ArithmeticError):
    """Raised when a valuation ratio is undefined (zero denominator)."""

    pass

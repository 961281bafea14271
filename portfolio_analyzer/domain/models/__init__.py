"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    Portfolio,
    Position,
    Stock,
    normalize_symbol,
)
from .report import (
    PortfolioReport,
    PositionLine,
)

__all__ = [
    # Entities
    "Portfolio",
    "Position",
    "Stock",
    "normalize_symbol",

    # Reports
    "PortfolioReport",
    "PositionLine",
]

"""
DOMAIN MODELS — VALUATION REPORTS

Immutable result records produced by the valuation engine.
Values are unrounded; rounding happens at display time.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class PositionLine:
    """
    Per-position display tuple.
    """
    symbol: str
    company_name: str
    quantity: Decimal
    purchase_price: Decimal
    current_price: Decimal
    current_value: Decimal
    unrealized_pnl: Decimal
    return_percentage: Optional[Decimal]


@dataclass(frozen=True)
class PortfolioReport:
    """
    Aggregate statistics for one portfolio snapshot.

    return_percentage is None when the total cost is zero.
    """
    total_value: Decimal
    total_cost: Decimal
    total_pnl: Decimal
    return_percentage: Optional[Decimal]
    sector_allocation: Dict[str, Decimal]
    positions: List[PositionLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.positions

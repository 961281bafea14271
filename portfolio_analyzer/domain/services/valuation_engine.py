"""
VALUATION ENGINE
Turn (price, quantity, purchase price) holdings into portfolio statistics

RESPONSIBILITIES:
- Per-position value, unrealized P&L and return
- Portfolio totals and return
- Sector allocation by current value
- Aggregate PortfolioReport for display

RULES:
✅ Stateless - every call re-reads the live stock price
✅ Decimal throughout, no rounding while accumulating
✅ Undefined ratios never leak as NaN/Infinity
"""

from decimal import Decimal
from typing import Dict, List, Optional

from portfolio_analyzer.domain.exceptions import ValuationError
from portfolio_analyzer.domain.models import (
    Portfolio,
    PortfolioReport,
    Position,
    PositionLine,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class ValuationEngine:
    """
    Valuation Engine
    Pure functions over a portfolio snapshot
    """

    # ------------------------------------------------------------
    # Position level
    # ------------------------------------------------------------
    @staticmethod
    def current_value(position: Position, current_price: Optional[Decimal] = None) -> Decimal:
        """
        Market value of a position

        Args:
            position: Position to value
            current_price: Price to value at (default: the stock's live price)

        Returns:
            quantity * price
        """
        price = position.stock.current_price if current_price is None else current_price
        return position.quantity * price

    @staticmethod
    def cost_basis(position: Position) -> Decimal:
        """Amount paid for the position"""
        return position.quantity * position.purchase_price

    @classmethod
    def unrealized_pnl(cls, position: Position, current_price: Optional[Decimal] = None) -> Decimal:
        """Current value minus cost basis; negative for a loss"""
        return cls.current_value(position, current_price) - cls.cost_basis(position)

    @staticmethod
    def return_percentage(position: Position, current_price: Optional[Decimal] = None) -> Decimal:
        """
        Percentage move from purchase price to current price

        Raises:
            ValuationError: purchase price is zero
        """
        price = position.stock.current_price if current_price is None else current_price
        if position.purchase_price == ZERO:
            raise ValuationError(
                f"Return undefined for {position.stock.symbol}: purchase price is zero"
            )
        return (price - position.purchase_price) / position.purchase_price * HUNDRED

    # ------------------------------------------------------------
    # Portfolio level
    # ------------------------------------------------------------
    @classmethod
    def total_value(cls, portfolio: Portfolio) -> Decimal:
        return sum((cls.current_value(p) for p in portfolio.positions), ZERO)

    @classmethod
    def total_cost(cls, portfolio: Portfolio) -> Decimal:
        return sum((cls.cost_basis(p) for p in portfolio.positions), ZERO)

    @classmethod
    def total_pnl(cls, portfolio: Portfolio) -> Decimal:
        return sum((cls.unrealized_pnl(p) for p in portfolio.positions), ZERO)

    @classmethod
    def portfolio_return_percentage(cls, portfolio: Portfolio) -> Optional[Decimal]:
        """
        (value - cost) / cost * 100

        Returns:
            None when total cost is zero (empty or all-free portfolio)
        """
        total_cost = cls.total_cost(portfolio)
        if total_cost == ZERO:
            return None
        return (cls.total_value(portfolio) - total_cost) / total_cost * HUNDRED

    @classmethod
    def sector_allocation(cls, portfolio: Portfolio) -> Dict[str, Decimal]:
        """
        Share of current value per sector, in percent

        Sectors appear in order of first occurrence. Empty when the
        portfolio has no value to allocate.
        """
        positions = portfolio.positions
        total_value = sum((cls.current_value(p) for p in positions), ZERO)
        if total_value <= ZERO:
            return {}

        allocation: Dict[str, Decimal] = {}
        for position in positions:
            sector = position.stock.sector
            share = cls.current_value(position) / total_value * HUNDRED
            allocation[sector] = allocation.get(sector, ZERO) + share
        return allocation

    # ------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------
    @classmethod
    def position_line(cls, position: Position) -> PositionLine:
        """Display tuple for one position; undefined return becomes None"""
        price = position.stock.current_price
        try:
            return_pct = cls.return_percentage(position, price)
        except ValuationError:
            return_pct = None

        return PositionLine(
            symbol=position.stock.symbol,
            company_name=position.stock.company_name,
            quantity=position.quantity,
            purchase_price=position.purchase_price,
            current_price=price,
            current_value=cls.current_value(position, price),
            unrealized_pnl=cls.unrealized_pnl(position, price),
            return_percentage=return_pct,
        )

    @classmethod
    def build_report(cls, portfolio: Portfolio) -> PortfolioReport:
        """
        Aggregate statistics for a portfolio

        Args:
            portfolio: Portfolio with resolved positions

        Returns:
            PortfolioReport with totals, return and sector allocation
        """
        lines: List[PositionLine] = [cls.position_line(p) for p in portfolio.positions]

        return PortfolioReport(
            total_value=cls.total_value(portfolio),
            total_cost=cls.total_cost(portfolio),
            total_pnl=cls.total_pnl(portfolio),
            return_percentage=cls.portfolio_return_percentage(portfolio),
            sector_allocation=cls.sector_allocation(portfolio),
            positions=lines,
        )

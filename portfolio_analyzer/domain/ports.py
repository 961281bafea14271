"""
Persistence store protocol for type hints.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Protocol

from portfolio_analyzer.domain.models import Portfolio, Position, Stock


class PortfolioStore(Protocol):
    def save_stock(self, stock: Stock) -> Stock:
        ...

    def find_stock_by_symbol(self, symbol: str) -> Optional[Stock]:
        ...

    def list_stocks(self) -> List[Stock]:
        ...

    def update_stock_price(self, symbol: str, price: Decimal, updated_at: datetime) -> bool:
        ...

    def save_portfolio(self, portfolio: Portfolio) -> Portfolio:
        ...

    def save_position(self, portfolio_id: int, position: Position) -> Position:
        ...

    def find_portfolio_with_positions(self, portfolio_id: int) -> Optional[Portfolio]:
        ...

    def list_portfolios(self) -> List[Portfolio]:
        ...

    def delete_portfolio(self, portfolio_id: int) -> bool:
        ...

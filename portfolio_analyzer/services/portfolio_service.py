"""
Portfolio Service
Orchestrates entity creation and lookup; persistence goes to the store,
statistics to the valuation engine.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from portfolio_analyzer.domain.exceptions import NotFoundError, ValidationError
from portfolio_analyzer.domain.models import (
    Portfolio,
    PortfolioReport,
    Position,
    Stock,
    normalize_symbol,
)
from portfolio_analyzer.domain.ports import PortfolioStore
from portfolio_analyzer.domain.services.valuation_engine import ValuationEngine
from portfolio_analyzer.utils.numbers import Number, quantize_price, quantize_quantity
from portfolio_analyzer.utils.time import now_utc_naive

logger = logging.getLogger(__name__)


class PortfolioService:
    def __init__(self, store: PortfolioStore, engine: Optional[ValuationEngine] = None):
        self.store = store
        self.engine = engine or ValuationEngine()

    # ------------------------------------------------------------
    # Portfolios
    # ------------------------------------------------------------
    def create_portfolio(self, name: str, description: str = "") -> Portfolio:
        portfolio = Portfolio(name=name, description=description or "")
        portfolio = self.store.save_portfolio(portfolio)

        logger.info("Portfolio created | id=%s name=%s", portfolio.id, portfolio.name)
        return portfolio

    def get_portfolio(self, portfolio_id: int) -> Optional[Portfolio]:
        """Full portfolio with positions and stocks, or None"""
        portfolio = self.store.find_portfolio_with_positions(portfolio_id)
        if portfolio is None:
            logger.info("Portfolio not found | id=%s", portfolio_id)
        return portfolio

    def get_all_portfolios(self) -> List[Portfolio]:
        """Summary listing; positions are not loaded"""
        return self.store.list_portfolios()

    def delete_portfolio(self, portfolio_id: int) -> bool:
        deleted = self.store.delete_portfolio(portfolio_id)
        if deleted:
            logger.info("Portfolio deleted | id=%s", portfolio_id)
        else:
            logger.warning("Delete skipped, portfolio not found | id=%s", portfolio_id)
        return deleted

    def get_portfolio_report(self, portfolio: Portfolio) -> PortfolioReport:
        return self.engine.build_report(portfolio)

    # ------------------------------------------------------------
    # Stocks
    # ------------------------------------------------------------
    def add_stock(
        self,
        symbol: str,
        company_name: str,
        sector: str,
        current_price: Number,
    ) -> Stock:
        """
        Insert a stock, or refresh the price of an existing one

        An existing stock keeps its id, name and sector; only a changed
        price is written back (with a new last_updated). Prices are compared
        at the 4 decimal places the store keeps.
        """
        symbol = normalize_symbol(symbol)
        price = quantize_price(current_price, "current_price")
        if price < Decimal("0"):
            logger.warning("Rejected stock price | symbol=%s price=%s", symbol, price)
            raise ValidationError("Stock price cannot be negative")

        existing = self.store.find_stock_by_symbol(symbol)
        if existing is not None:
            if existing.current_price != price:
                updated_at = now_utc_naive()
                self.store.update_stock_price(symbol, price, updated_at)
                existing.update_price(price, at=updated_at)
                logger.info("Stock price refreshed | symbol=%s price=%s", symbol, price)
            return existing

        stock = Stock(
            symbol=symbol,
            company_name=company_name,
            sector=sector,
            current_price=price,
        )
        stock = self.store.save_stock(stock)

        logger.info("Stock added | id=%s symbol=%s price=%s", stock.id, stock.symbol, price)
        return stock

    def get_stock(self, symbol: str) -> Optional[Stock]:
        return self.store.find_stock_by_symbol(normalize_symbol(symbol))

    def list_stocks(self) -> List[Stock]:
        return self.store.list_stocks()

    def update_stock_price(self, symbol: str, new_price: Number) -> Stock:
        """
        Set a new price for a registered stock

        Raises:
            ValidationError: negative price
            NotFoundError: unknown symbol
        """
        symbol = normalize_symbol(symbol)
        price = quantize_price(new_price, "new_price")
        if price < Decimal("0"):
            logger.warning("Rejected stock price | symbol=%s price=%s", symbol, price)
            raise ValidationError("Stock price cannot be negative")

        stock = self.store.find_stock_by_symbol(symbol)
        if stock is None:
            raise NotFoundError("Stock", symbol)

        updated_at = now_utc_naive()
        self.store.update_stock_price(symbol, price, updated_at)
        stock.update_price(price, at=updated_at)

        logger.info("Stock price updated | symbol=%s price=%s", symbol, price)
        return stock

    # ------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------
    def add_position(
        self,
        portfolio_id: int,
        stock: Stock,
        quantity: Number,
        purchase_price: Number,
    ) -> Position:
        """
        Record a holding of `stock` in a portfolio

        Args:
            portfolio_id: Target portfolio ID
            stock: Registered stock (looked up by symbol if it has no id)
            quantity: Units held, must be > 0 at 6 decimal places
            purchase_price: Price per unit at acquisition, must be > 0 at 4 decimal places

        Returns:
            Saved Position with its id

        Raises:
            ValidationError: non-positive quantity or purchase price
            NotFoundError: unknown portfolio or unregistered stock
        """
        # Checked at the scale the store keeps
        qty = quantize_quantity(quantity, "quantity")
        price = quantize_price(purchase_price, "purchase_price")

        if qty <= Decimal("0"):
            logger.warning("Rejected position | portfolio=%s quantity=%s", portfolio_id, qty)
            raise ValidationError("Quantity must be positive")
        if price <= Decimal("0"):
            logger.warning("Rejected position | portfolio=%s purchase_price=%s", portfolio_id, price)
            raise ValidationError("Purchase price must be positive")

        if stock.id is None:
            registered = self.store.find_stock_by_symbol(stock.symbol)
            if registered is None:
                raise NotFoundError("Stock", stock.symbol)
            stock = registered

        position = Position(stock=stock, quantity=qty, purchase_price=price)
        position = self.store.save_position(portfolio_id, position)

        logger.info(
            "Position added | portfolio=%s symbol=%s quantity=%s price=%s",
            portfolio_id,
            stock.symbol,
            qty,
            price,
        )
        return position

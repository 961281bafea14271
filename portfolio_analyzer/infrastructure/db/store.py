"""
SQLAlchemy Portfolio Store
Session-per-operation persistence for stocks, portfolios and positions
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from portfolio_analyzer.domain.exceptions import NotFoundError, PersistenceError
from portfolio_analyzer.domain.models import Portfolio, Position, Stock
from portfolio_analyzer.infrastructure.db.repositories import (
    PortfolioRepository,
    PositionRepository,
    StockRepository,
)

logger = logging.getLogger(__name__)


class SqlAlchemyPortfolioStore:
    """
    PortfolioStore backed by a relational database.

    Each call runs in its own session: commit on success, rollback on
    failure. SQLAlchemy errors surface as PersistenceError.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    @contextmanager
    def _session_scope(self, operation: str) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Store operation failed | op=%s error=%s", operation, exc)
            raise PersistenceError(f"{operation} failed: {exc}") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ------------------------------------------------------------
    # Stocks
    # ------------------------------------------------------------
    def save_stock(self, stock: Stock) -> Stock:
        with self._session_scope("save_stock") as session:
            return StockRepository(session).create(stock)

    def find_stock_by_symbol(self, symbol: str) -> Optional[Stock]:
        with self._session_scope("find_stock_by_symbol") as session:
            return StockRepository(session).get_by_symbol(symbol)

    def list_stocks(self) -> List[Stock]:
        with self._session_scope("list_stocks") as session:
            return StockRepository(session).get_all()

    def update_stock_price(self, symbol: str, price: Decimal, updated_at: datetime) -> bool:
        with self._session_scope("update_stock_price") as session:
            return StockRepository(session).update_price(symbol, price, updated_at)

    # ------------------------------------------------------------
    # Portfolios
    # ------------------------------------------------------------
    def save_portfolio(self, portfolio: Portfolio) -> Portfolio:
        with self._session_scope("save_portfolio") as session:
            return PortfolioRepository(session).create(portfolio)

    def save_position(self, portfolio_id: int, position: Position) -> Position:
        with self._session_scope("save_position") as session:
            if not PortfolioRepository(session).exists(portfolio_id):
                raise NotFoundError("Portfolio", portfolio_id)
            return PositionRepository(session).create(portfolio_id, position)

    def find_portfolio_with_positions(self, portfolio_id: int) -> Optional[Portfolio]:
        with self._session_scope("find_portfolio_with_positions") as session:
            return PortfolioRepository(session).get_with_positions(portfolio_id)

    def list_portfolios(self) -> List[Portfolio]:
        with self._session_scope("list_portfolios") as session:
            return PortfolioRepository(session).get_all()

    def delete_portfolio(self, portfolio_id: int) -> bool:
        with self._session_scope("delete_portfolio") as session:
            return PortfolioRepository(session).delete(portfolio_id)

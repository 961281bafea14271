from decimal import Decimal
from typing import Dict, List, Optional

import pytest

from portfolio_analyzer.config import Settings
from portfolio_analyzer.domain.exceptions import NotFoundError
from portfolio_analyzer.domain.models import Portfolio, Position, Stock
from portfolio_analyzer.infrastructure.db.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from portfolio_analyzer.infrastructure.db.store import SqlAlchemyPortfolioStore
from portfolio_analyzer.services.portfolio_service import PortfolioService


class InMemoryStore:
    """Dict-backed PortfolioStore for service tests"""

    def __init__(self):
        self.stocks: Dict[str, Stock] = {}
        self.portfolios: Dict[int, Portfolio] = {}
        self.saved_positions: List[tuple] = []
        self.price_updates: List[tuple] = []
        self._next_id = 1

    def _new_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def save_stock(self, stock):
        stock.id = self._new_id()
        self.stocks[stock.symbol] = stock
        return stock

    def find_stock_by_symbol(self, symbol) -> Optional[Stock]:
        return self.stocks.get(symbol)

    def list_stocks(self):
        return sorted(self.stocks.values(), key=lambda s: s.symbol)

    def update_stock_price(self, symbol, price, updated_at):
        self.price_updates.append((symbol, price, updated_at))
        return symbol in self.stocks

    def save_portfolio(self, portfolio):
        portfolio.id = self._new_id()
        self.portfolios[portfolio.id] = portfolio
        return portfolio

    def save_position(self, portfolio_id, position):
        if portfolio_id not in self.portfolios:
            raise NotFoundError("Portfolio", portfolio_id)
        saved = Position(
            id=self._new_id(),
            stock=position.stock,
            quantity=position.quantity,
            purchase_price=position.purchase_price,
            purchase_date=position.purchase_date,
        )
        self.portfolios[portfolio_id].add_position(saved)
        self.saved_positions.append((portfolio_id, saved))
        return saved

    def find_portfolio_with_positions(self, portfolio_id):
        return self.portfolios.get(portfolio_id)

    def list_portfolios(self):
        return [self.portfolios[k] for k in sorted(self.portfolios)]

    def delete_portfolio(self, portfolio_id):
        return self.portfolios.pop(portfolio_id, None) is not None


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def memory_service(memory_store) -> PortfolioService:
    return PortfolioService(memory_store)


@pytest.fixture
def aapl() -> Stock:
    return Stock(symbol="AAPL", company_name="Apple", sector="Technology", current_price=Decimal("150.00"))


@pytest.fixture
def xom() -> Stock:
    return Stock(symbol="XOM", company_name="Exxon Mobil", sector="Energy", current_price=Decimal("50.00"))


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def db_engine(settings):
    engine = create_db_engine(settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(db_engine) -> SqlAlchemyPortfolioStore:
    return SqlAlchemyPortfolioStore(create_session_factory(db_engine))


@pytest.fixture
def sql_service(sql_store) -> PortfolioService:
    return PortfolioService(sql_store)

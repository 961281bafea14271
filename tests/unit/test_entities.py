from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from portfolio_analyzer.domain.exceptions import ValidationError
from portfolio_analyzer.domain.models import Portfolio, Position, Stock


class TestStock:
    def test_symbol_is_normalized(self):
        stock = Stock(symbol="  aapl ", company_name="Apple", sector="Technology", current_price=150)
        assert stock.symbol == "AAPL"
        assert stock.id is None

    def test_float_price_converted_via_str(self):
        stock = Stock(symbol="AAPL", company_name="Apple", sector="Technology", current_price=150.1)
        assert stock.current_price == Decimal("150.1")

    def test_empty_symbol_rejected(self):
        with pytest.raises(ValidationError, match="symbol cannot be empty"):
            Stock(symbol="   ", company_name="X", sector="Y", current_price=1)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Stock(symbol="AAPL", company_name="Apple", sector="Technology", current_price=-1)

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="must be numeric"):
            Stock(symbol="AAPL", company_name="Apple", sector="Technology", current_price="abc")

    def test_nan_price_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Stock(symbol="AAPL", company_name="Apple", sector="Technology", current_price=float("nan"))

    def test_update_price_refreshes_timestamp(self, aapl):
        at = datetime(2026, 1, 2, 3, 4, 5)
        aapl.update_price(Decimal("155"), at=at)
        assert aapl.current_price == Decimal("155")
        assert aapl.last_updated == at

    def test_update_price_rejects_negative(self, aapl):
        before = aapl.last_updated
        with pytest.raises(ValidationError):
            aapl.update_price(-5)
        assert aapl.current_price == Decimal("150.00")
        assert aapl.last_updated == before

    def test_price_is_kept_at_four_places(self):
        stock = Stock(symbol="AAPL", company_name="Apple", sector="Technology", current_price="1.23456")
        assert stock.current_price == Decimal("1.2346")
        stock.update_price("2.00004")
        assert stock.current_price == Decimal("2.0000")

    def test_price_cannot_be_assigned_directly(self, aapl):
        before = aapl.last_updated
        with pytest.raises(AttributeError, match="update_price"):
            aapl.current_price = Decimal("1")
        with pytest.raises(AttributeError):
            aapl.last_updated = datetime(2020, 1, 1)
        assert aapl.current_price == Decimal("150.00")
        assert aapl.last_updated == before

    def test_str(self, aapl):
        assert str(aapl) == "Stock[symbol=AAPL, company=Apple, price=150.00]"


class TestPosition:
    def test_purchase_price_is_immutable(self, aapl):
        position = Position(stock=aapl, quantity=10, purchase_price=140)
        with pytest.raises(FrozenInstanceError):
            position.purchase_price = Decimal("1")

    def test_values_are_decimal(self, aapl):
        position = Position(stock=aapl, quantity=2.5, purchase_price="140.25")
        assert position.quantity == Decimal("2.5")
        assert position.purchase_price == Decimal("140.25")
        assert position.symbol == "AAPL"

    def test_values_are_kept_at_storage_scale(self, aapl):
        position = Position(stock=aapl, quantity="1.2345678", purchase_price="140.123456")
        assert position.quantity == Decimal("1.234568")
        assert position.purchase_price == Decimal("140.1235")

    def test_negative_purchase_price_rejected(self, aapl):
        with pytest.raises(ValidationError):
            Position(stock=aapl, quantity=1, purchase_price=-1)

    def test_shares_stock_reference(self, aapl):
        position = Position(stock=aapl, quantity=10, purchase_price=140)
        aapl.update_price(Decimal("160"))
        assert position.stock.current_price == Decimal("160")

    def test_str(self, aapl):
        position = Position(stock=aapl, quantity=10, purchase_price=140)
        assert str(position) == "Position[stock=AAPL, quantity=10.00, value=1500.00, pnl=100.00]"


class TestPortfolio:
    def test_new_portfolio_is_empty(self):
        portfolio = Portfolio(name="Tech", description="desc")
        assert portfolio.positions == []
        assert portfolio.id is None
        assert isinstance(portfolio.creation_date, datetime)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Portfolio(name="  ")

    def test_positions_keep_order_and_duplicates(self, aapl, xom):
        portfolio = Portfolio(name="Mixed")
        first = Position(stock=aapl, quantity=1, purchase_price=100)
        second = Position(stock=xom, quantity=1, purchase_price=40)
        third = Position(stock=aapl, quantity=2, purchase_price=120)
        for p in (first, second, third):
            portfolio.add_position(p)

        assert [p.symbol for p in portfolio.positions] == ["AAPL", "XOM", "AAPL"]

    def test_positions_returns_copy(self, aapl):
        portfolio = Portfolio(name="Tech")
        portfolio.add_position(Position(stock=aapl, quantity=1, purchase_price=100))
        portfolio.positions.clear()
        assert len(portfolio.positions) == 1

    def test_str(self, aapl):
        portfolio = Portfolio(name="Tech")
        portfolio.add_position(Position(stock=aapl, quantity=10, purchase_price=140))
        assert str(portfolio) == "Portfolio[name=Tech, positions=1, value=1500.00]"

    def test_creation_date_is_read_only(self):
        created = datetime(2026, 1, 1)
        portfolio = Portfolio(name="Tech", creation_date=created)
        with pytest.raises(AttributeError):
            portfolio.creation_date = datetime(2027, 1, 1)
        assert portfolio.creation_date == created
        portfolio.name = "Renamed"
        assert portfolio.name == "Renamed"

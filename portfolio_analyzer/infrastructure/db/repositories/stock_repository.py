"""
Stock Repository
CRUD operations for the stock registry
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from portfolio_analyzer.domain.models import Stock
from portfolio_analyzer.infrastructure.db.models import StockModel


class StockRepository:
    """Repository for Stock data access"""

    def __init__(self, session: Session):
        """Initialize with database session"""
        self.session = session

    def create(self, stock: Stock) -> Stock:
        """
        Insert a new stock

        Args:
            stock: Stock domain object (id is ignored)

        Returns:
            Stock with its generated id set
        """
        model = StockModel(
            symbol=stock.symbol,
            company_name=stock.company_name,
            sector=stock.sector,
            current_price=stock.current_price,
            last_updated=stock.last_updated,
        )

        self.session.add(model)
        self.session.flush()

        stock.id = model.id
        return stock

    def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        result = self.session.execute(
            select(StockModel).where(StockModel.symbol == symbol)
        )
        model = result.scalar_one_or_none()

        return self.to_domain(model) if model else None

    def get_all(self) -> List[Stock]:
        result = self.session.execute(
            select(StockModel).order_by(StockModel.symbol)
        )
        return [self.to_domain(m) for m in result.scalars().all()]

    def update_price(self, symbol: str, price: Decimal, updated_at: datetime) -> bool:
        """
        Set current price and last_updated for a symbol

        Returns:
            True if a row was updated
        """
        result = self.session.execute(
            update(StockModel)
            .where(StockModel.symbol == symbol)
            .values(current_price=price, last_updated=updated_at)
        )
        return result.rowcount > 0

    @staticmethod
    def to_domain(model: StockModel) -> Stock:
        """Convert database model to domain entity"""
        return Stock(
            id=model.id,
            symbol=model.symbol,
            company_name=model.company_name,
            sector=model.sector,
            current_price=Decimal(str(model.current_price)),
            last_updated=model.last_updated,
        )

"""
Portfolio Repository
Portfolios with their positions and stocks
"""

from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from portfolio_analyzer.domain.models import Portfolio, Position, Stock
from portfolio_analyzer.infrastructure.db.models import PortfolioModel, PositionModel
from portfolio_analyzer.infrastructure.db.repositories.stock_repository import StockRepository


class PortfolioRepository:
    """Repository for Portfolio data access"""

    def __init__(self, session: Session):
        """Initialize with database session"""
        self.session = session

    def create(self, portfolio: Portfolio) -> Portfolio:
        model = PortfolioModel(
            name=portfolio.name,
            description=portfolio.description,
            creation_date=portfolio.creation_date,
        )

        self.session.add(model)
        self.session.flush()

        portfolio.id = model.id
        return portfolio

    def exists(self, portfolio_id: int) -> bool:
        return self.session.get(PortfolioModel, portfolio_id) is not None

    def get_with_positions(self, portfolio_id: int) -> Optional[Portfolio]:
        """
        Load a portfolio with positions (in insertion order) and stocks

        Positions on the same stock share one Stock instance.
        """
        result = self.session.execute(
            select(PortfolioModel)
            .where(PortfolioModel.id == portfolio_id)
            .options(
                selectinload(PortfolioModel.positions).selectinload(PositionModel.stock)
            )
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        portfolio = self._to_domain(model)
        stocks: Dict[int, Stock] = {}
        for position_model in model.positions:
            stock = stocks.get(position_model.stock_id)
            if stock is None:
                stock = StockRepository.to_domain(position_model.stock)
                stocks[position_model.stock_id] = stock

            portfolio.add_position(
                Position(
                    id=position_model.id,
                    stock=stock,
                    quantity=Decimal(str(position_model.quantity)),
                    purchase_price=Decimal(str(position_model.purchase_price)),
                    purchase_date=position_model.purchase_date,
                )
            )

        return portfolio

    def get_all(self) -> List[Portfolio]:
        """All portfolios without positions, ordered by id"""
        result = self.session.execute(
            select(PortfolioModel).order_by(PortfolioModel.id)
        )
        return [self._to_domain(m) for m in result.scalars().all()]

    def delete(self, portfolio_id: int) -> bool:
        """Delete a portfolio; its positions go with it"""
        self.session.execute(
            delete(PositionModel).where(PositionModel.portfolio_id == portfolio_id)
        )
        result = self.session.execute(
            delete(PortfolioModel).where(PortfolioModel.id == portfolio_id)
        )
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: PortfolioModel) -> Portfolio:
        """Convert database model to domain entity (no positions)"""
        return Portfolio(
            id=model.id,
            name=model.name,
            description=model.description or "",
            creation_date=model.creation_date,
        )

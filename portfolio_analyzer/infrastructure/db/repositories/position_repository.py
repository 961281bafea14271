"""
Position Repository
Insert positions into a portfolio
"""

from dataclasses import replace

from sqlalchemy.orm import Session

from portfolio_analyzer.domain.models import Position
from portfolio_analyzer.infrastructure.db.models import PositionModel


class PositionRepository:
    """Repository for Position data access"""

    def __init__(self, session: Session):
        """Initialize with database session"""
        self.session = session

    def create(self, portfolio_id: int, position: Position) -> Position:
        """
        Insert a position for a portfolio

        Args:
            portfolio_id: Owning portfolio ID
            position: Position whose stock is already persisted

        Returns:
            Copy of the position with its generated id
        """
        model = PositionModel(
            portfolio_id=portfolio_id,
            stock_id=position.stock.id,
            quantity=position.quantity,
            purchase_price=position.purchase_price,
            purchase_date=position.purchase_date,
        )

        self.session.add(model)
        self.session.flush()

        return replace(position, id=model.id)

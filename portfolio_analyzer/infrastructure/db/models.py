"""
Database Models (SQLAlchemy ORM)
Stocks registry, portfolios and their positions
"""

from sqlalchemy import (
    Column, Integer, String, Numeric, DateTime, ForeignKey, Text, Index
)
from sqlalchemy.orm import relationship

from portfolio_analyzer.infrastructure.db.database import Base
from portfolio_analyzer.utils.time import now_utc_naive


class StockModel(Base):
    """Reference stock with current price"""
    __tablename__ = "stocks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String(20), nullable=False, unique=True, index=True)
    company_name = Column(String(255), nullable=False, default="")
    sector = Column(String(100), nullable=False, default="")
    current_price = Column(Numeric(18, 4), nullable=False)
    last_updated = Column(DateTime, nullable=False, default=now_utc_naive)

    # Relationships
    positions = relationship("PositionModel", back_populates="stock")


class PortfolioModel(Base):
    """Named portfolio"""
    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    creation_date = Column(DateTime, nullable=False, default=now_utc_naive)

    # Relationships
    positions = relationship(
        "PositionModel",
        back_populates="portfolio",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PositionModel.id",
    )


class PositionModel(Base):
    """Holding of one stock inside a portfolio"""
    __tablename__ = "positions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    portfolio_id = Column(
        Integer, ForeignKey("portfolios.id", ondelete="CASCADE"), nullable=False
    )
    stock_id = Column(Integer, ForeignKey("stocks.id"), nullable=False)

    quantity = Column(Numeric(18, 6), nullable=False)
    purchase_price = Column(Numeric(18, 4), nullable=False)
    purchase_date = Column(DateTime, nullable=False, default=now_utc_naive)

    # Relationships
    portfolio = relationship("PortfolioModel", back_populates="positions")
    stock = relationship("StockModel", back_populates="positions")

    # Indexes
    __table_args__ = (
        Index("ix_positions_portfolio", "portfolio_id"),
    )

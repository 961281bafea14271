from .portfolio_repository import PortfolioRepository
from .position_repository import PositionRepository
from .stock_repository import StockRepository

__all__ = [
    "PortfolioRepository",
    "PositionRepository",
    "StockRepository",
]

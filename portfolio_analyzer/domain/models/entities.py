"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from portfolio_analyzer.domain.exceptions import ValidationError
from portfolio_analyzer.utils.numbers import Number, quantize_price, quantize_quantity
from portfolio_analyzer.utils.time import now_utc_naive


def normalize_symbol(symbol: str) -> str:
    """Ticker symbols are compared stripped and upper-cased."""
    normalized = (symbol or "").strip().upper()
    if not normalized:
        raise ValidationError("Stock symbol cannot be empty")
    return normalized


@dataclass
class Stock:
    """
    Reference stock with a mutable current price

    current_price and last_updated change only through update_price().
    """
    symbol: str
    company_name: str
    sector: str
    current_price: Decimal
    last_updated: datetime = field(default_factory=now_utc_naive)
    id: Optional[int] = None

    _READ_ONLY = ("current_price", "last_updated")

    def __post_init__(self):
        self.symbol = normalize_symbol(self.symbol)
        self.company_name = (self.company_name or "").strip()
        self.sector = (self.sector or "").strip()
        price = quantize_price(self.current_price, "current_price")
        if price < Decimal("0"):
            raise ValidationError("Stock price cannot be negative")
        object.__setattr__(self, "current_price", price)

    def __setattr__(self, name, value):
        if name in self._READ_ONLY and name in self.__dict__:
            raise AttributeError(f"{name} is read-only; use update_price()")
        super().__setattr__(name, value)

    def update_price(self, new_price: Number, at: Optional[datetime] = None) -> None:
        """Set a new current price and refresh last_updated."""
        price = quantize_price(new_price, "current_price")
        if price < Decimal("0"):
            raise ValidationError("Stock price cannot be negative")
        object.__setattr__(self, "current_price", price)
        object.__setattr__(self, "last_updated", at or now_utc_naive())

    def __str__(self) -> str:
        return (
            f"Stock[symbol={self.symbol}, company={self.company_name}, "
            f"price={self.current_price:.2f}]"
        )


@dataclass(frozen=True)
class Position:
    """
    Holding of one stock - Immutable

    Value and P&L are never stored; they follow stock.current_price.
    """
    stock: Stock
    quantity: Decimal
    purchase_price: Decimal
    purchase_date: datetime = field(default_factory=now_utc_naive)
    id: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "quantity", quantize_quantity(self.quantity, "quantity"))
        object.__setattr__(
            self, "purchase_price", quantize_price(self.purchase_price, "purchase_price")
        )
        if self.purchase_price < Decimal("0"):
            raise ValidationError("Purchase price cannot be negative")

    @property
    def symbol(self) -> str:
        return self.stock.symbol

    def __str__(self) -> str:
        value = self.quantity * self.stock.current_price
        pnl = value - self.quantity * self.purchase_price
        return (
            f"Position[stock={self.stock.symbol}, quantity={self.quantity:.2f}, "
            f"value={value:.2f}, pnl={pnl:.2f}]"
        )


@dataclass
class Portfolio:
    """Named, ordered collection of positions"""
    name: str
    description: str = ""
    creation_date: datetime = field(default_factory=now_utc_naive)
    id: Optional[int] = None
    _positions: List[Position] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Portfolio name cannot be empty")
        self.description = self.description or ""

    def __setattr__(self, name, value):
        if name == "creation_date" and name in self.__dict__:
            raise AttributeError("creation_date is read-only")
        super().__setattr__(name, value)

    @property
    def positions(self) -> List[Position]:
        """Copy of the positions, in insertion order"""
        return list(self._positions)

    def add_position(self, position: Position) -> None:
        self._positions.append(position)

    def __str__(self) -> str:
        value = sum(
            (p.quantity * p.stock.current_price for p in self._positions),
            Decimal("0"),
        )
        return (
            f"Portfolio[name={self.name}, positions={len(self._positions)}, "
            f"value={value:.2f}]"
        )

"""
Interactive console for the portfolio analyzer.
One operation at a time; failures are printed and the menu continues.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from portfolio_analyzer.cli.formatters import format_money, format_report
from portfolio_analyzer.domain.exceptions import PortfolioAnalyzerError
from portfolio_analyzer.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)

MENU = (
    "\n===== MENU =====\n"
    "1. Create new portfolio\n"
    "2. View all portfolios\n"
    "3. Add stock to database\n"
    "4. Add position to portfolio\n"
    "5. View portfolio details\n"
    "6. Update stock price\n"
    "7. View all stocks\n"
    "8. Delete portfolio\n"
    "0. Exit\n"
    "================"
)


class Console:
    def __init__(
        self,
        service: PortfolioService,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self._input = input_func or input
        self._output = output or print
        self._actions = {
            1: self.create_portfolio,
            2: self.view_portfolios,
            3: self.add_stock,
            4: self.add_position,
            5: self.view_portfolio_details,
            6: self.update_stock_price,
            7: self.view_stocks,
            8: self.delete_portfolio,
        }

    def run(self) -> None:
        self._output("Welcome to Investment Portfolio Analyzer")
        try:
            while True:
                self._output(MENU)
                choice = self.read_int("Enter your choice: ")
                if choice == 0:
                    break

                action = self._actions.get(choice)
                if action is None:
                    self._output("Invalid option. Please try again.")
                    continue
                self._dispatch(action)
        except EOFError:
            logger.info("Input closed, leaving menu")

        self._output("Thank you for using Investment Portfolio Analyzer!")

    def _dispatch(self, action: Callable[[], None]) -> None:
        try:
            action()
        except PortfolioAnalyzerError as exc:
            logger.warning("Operation failed | action=%s error=%s", action.__name__, exc)
            self._output(f"Error: {exc}")

    # ------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------
    def read_str(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._output("Please enter a valid number.")

    def read_decimal(self, prompt: str) -> Decimal:
        while True:
            raw = self._input(prompt).strip()
            try:
                value = Decimal(raw)
            except InvalidOperation:
                value = None
            if value is not None and value.is_finite():
                return value
            self._output("Please enter a valid number.")

    # ------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------
    def create_portfolio(self) -> None:
        self._output("\n--- Create New Portfolio ---")
        name = self.read_str("Enter portfolio name: ")
        description = self.read_str("Enter description: ")

        portfolio = self.service.create_portfolio(name, description)
        self._output(f"Portfolio created with ID: {portfolio.id}")

    def view_portfolios(self) -> None:
        self._output("\n--- All Portfolios ---")
        portfolios = self.service.get_all_portfolios()

        if not portfolios:
            self._output("No portfolios found.")
            return

        for p in portfolios:
            self._output(f"{p.id}: {p.name}")

    def add_stock(self) -> None:
        self._output("\n--- Add Stock ---")
        symbol = self.read_str("Enter stock symbol: ")
        name = self.read_str("Enter company name: ")
        sector = self.read_str("Enter sector: ")
        price = self.read_decimal("Enter current price: ")

        stock = self.service.add_stock(symbol, name, sector, price)
        self._output(f"Stock added with ID: {stock.id}")

    def add_position(self) -> None:
        self._output("\n--- Add Position ---")
        portfolio_id = self.read_int("Enter portfolio ID: ")
        symbol = self.read_str("Enter stock symbol: ")

        stock = self.service.get_stock(symbol)
        if stock is None:
            self._output(f"{symbol.upper()} is not registered yet.")
            stock = self.service.add_stock(
                symbol,
                self.read_str("Enter company name: "),
                self.read_str("Enter sector: "),
                self.read_decimal("Enter current price: "),
            )

        quantity = self.read_decimal("Enter quantity: ")
        price = self.read_decimal("Enter purchase price: ")

        self.service.add_position(portfolio_id, stock, quantity, price)
        self._output("Position added successfully.")

    def view_portfolio_details(self) -> None:
        self._output("\n--- Portfolio Details ---")
        portfolio_id = self.read_int("Enter portfolio ID: ")

        portfolio = self.service.get_portfolio(portfolio_id)
        if portfolio is None:
            self._output("Portfolio not found.")
            return

        report = self.service.get_portfolio_report(portfolio)
        for line in format_report(portfolio, report):
            self._output(line)

    def update_stock_price(self) -> None:
        self._output("\n--- Update Stock Price ---")
        symbol = self.read_str("Enter stock symbol: ")
        new_price = self.read_decimal("Enter new price: ")

        self.service.update_stock_price(symbol, new_price)
        self._output("Stock price updated successfully.")

    def view_stocks(self) -> None:
        self._output("\n--- All Stocks ---")
        stocks = self.service.list_stocks()

        if not stocks:
            self._output("No stocks found.")
            return

        for s in stocks:
            self._output(
                f"{s.symbol:<6} {s.company_name:<20} {s.sector:<15} "
                f"{format_money(s.current_price)} (updated {s.last_updated:%Y-%m-%d %H:%M})"
            )

    def delete_portfolio(self) -> None:
        self._output("\n--- Delete Portfolio ---")
        portfolio_id = self.read_int("Enter portfolio ID: ")

        if self.service.delete_portfolio(portfolio_id):
            self._output("Portfolio deleted.")
        else:
            self._output("Portfolio not found.")

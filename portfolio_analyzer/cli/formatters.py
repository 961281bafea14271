"""Display formatting: two decimals, percentages with a trailing %."""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from portfolio_analyzer.domain.models import Portfolio, PortfolioReport, PositionLine

CENT = Decimal("0.01")
NOT_APPLICABLE = "n/a"


def round2(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_number(value: Optional[Decimal]) -> str:
    if value is None:
        return NOT_APPLICABLE
    return f"{round2(value):.2f}"


def format_money(value: Optional[Decimal]) -> str:
    if value is None:
        return NOT_APPLICABLE
    rounded = round2(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):.2f}"


def format_percent(value: Optional[Decimal]) -> str:
    if value is None:
        return NOT_APPLICABLE
    return f"{round2(value):.2f}%"


def format_position_line(line: PositionLine) -> str:
    return (
        f"{line.symbol:<6} {line.company_name:<20} {format_number(line.quantity):>8} shares "
        f"@ {format_money(line.purchase_price):<10} Current: {format_money(line.current_price):<10} "
        f"P/L: {format_money(line.unrealized_pnl)} ({format_percent(line.return_percentage)})"
    )


def format_report(portfolio: Portfolio, report: PortfolioReport) -> List[str]:
    """Lines for the portfolio details screen"""
    lines = [
        f"Portfolio: {portfolio.name}",
        f"Description: {portfolio.description}",
    ]

    if report.is_empty:
        lines.append("No positions in this portfolio.")
        return lines

    lines.append("")
    lines.append("Positions:")
    lines.extend(format_position_line(line) for line in report.positions)

    lines.append("")
    lines.append("Portfolio Statistics:")
    lines.append(f"Total Value: {format_money(report.total_value)}")
    lines.append(f"Total Cost: {format_money(report.total_cost)}")
    lines.append(f"Total P/L: {format_money(report.total_pnl)}")
    lines.append(f"Return: {format_percent(report.return_percentage)}")

    lines.append("")
    lines.append("Sector Allocation:")
    if not report.sector_allocation:
        lines.append(NOT_APPLICABLE)
    for sector, pct in report.sector_allocation.items():
        lines.append(f"{sector or 'Unclassified'}: {format_percent(pct)}")

    return lines

"""
Investment Portfolio Analyzer
Stocks, portfolios and positions with live valuation reporting
"""

__version__ = "1.0.0"

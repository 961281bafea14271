"""
Console entry point
Builds settings, database and service, then runs the menu
"""

import argparse
import sys
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from portfolio_analyzer.cli.console import Console
from portfolio_analyzer.config import Settings
from portfolio_analyzer.core.logging import get_logger, setup_logging
from portfolio_analyzer.infrastructure.db.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from portfolio_analyzer.infrastructure.db.store import SqlAlchemyPortfolioStore
from portfolio_analyzer.services.portfolio_service import PortfolioService

logger = get_logger(__name__)


def build_service(settings: Settings) -> PortfolioService:
    """Wire store and service for the configured database"""
    engine = create_db_engine(settings)
    if settings.AUTO_CREATE_TABLES:
        init_db(engine)

    store = SqlAlchemyPortfolioStore(create_session_factory(engine))
    return PortfolioService(store)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Investment Portfolio Analyzer")
    parser.add_argument("--database-url", type=str, default=None, help="SQLAlchemy database URL")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (e.g. INFO, DEBUG)")
    args = parser.parse_args(argv)

    overrides = {}
    if args.database_url:
        overrides["DATABASE_URL"] = args.database_url
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    settings = Settings(**overrides)

    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting portfolio analyzer | env=%s", settings.APP_ENV)

    try:
        service = build_service(settings)
    except SQLAlchemyError as exc:
        logger.error("Database initialization failed: %s", exc)
        return 1
    except ImportError as exc:
        # create_engine imports the DBAPI driver lazily
        logger.error(
            "Database driver missing (%s); for PostgreSQL install the 'postgres' extra: "
            "pip install 'portfolio-analyzer[postgres]'",
            exc,
        )
        return 1

    Console(service).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Database initialization script.

Run this script to create database tables without Alembic
(local development only).

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from app.core.config import settings
from app.core.logger import setup_logger
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logger(level=settings.LOG_LEVEL)
    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)
    sys.exit(0)

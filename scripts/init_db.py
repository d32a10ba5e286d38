"""
Database initialization script.

Creates the booster tables in the configured database.  Use Alembic
(``alembic upgrade head``) for managed environments.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.logging import configure_logging
from app.db.init_db import init_db

logger = logging.getLogger("init_db")

if __name__ == "__main__":
    configure_logging()
    try:
        init_db()
    except Exception as e:
        logger.error("Database initialization failed: %s", e)
        sys.exit(1)
    sys.exit(0)

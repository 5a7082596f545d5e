"""Cache managers for poker evaluation data."""
import logging
import threading
from typing import Optional

from poker_hands.evaluation.tables import LookupTables, build_tables

logger = logging.getLogger(__name__)


class LookupTablesCache:
    """Singleton cache manager for the high hand scoring tables."""
    _instance = None
    _tables: Optional[LookupTables] = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LookupTablesCache, cls).__new__(cls)
        return cls._instance

    def get_tables(self) -> LookupTables:
        """Get the scoring tables, building them on first use."""
        if self._tables is None:
            with self._lock:
                if self._tables is None:
                    logger.info("Building high hand scoring tables")
                    LookupTablesCache._tables = build_tables()
        else:
            logger.debug("Using cached scoring tables")
        return self._tables


def get_lookup_tables() -> LookupTables:
    """Convenience accessor for the shared scoring tables."""
    return LookupTablesCache().get_tables()

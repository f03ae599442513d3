import logging
from typing import Dict, Optional

from garden_timeline.core.config import TOPIC_KEYWORDS_PATH
from garden_timeline.services.topic_classifier import (
    TopicTable,
    get_table,
    load_topic_tables,
)

logger = logging.getLogger(__name__)

# Global resources (initialized in load_resources)
TOPIC_TABLES: Dict[str, TopicTable] = {}
LOADING_ERROR: Optional[str] = None


def load_resources(path: Optional[str] = None) -> Dict[str, TopicTable]:
    """
    Load the per-language topic dictionaries.

    Failures are recorded in LOADING_ERROR rather than raised so the
    service can still answer health checks and report the problem.
    """
    global TOPIC_TABLES, LOADING_ERROR

    path = path or TOPIC_KEYWORDS_PATH
    try:
        TOPIC_TABLES = load_topic_tables(path)
        LOADING_ERROR = None
    except (OSError, ValueError) as e:
        LOADING_ERROR = f"{type(e).__name__}: {e}"
        logger.error("[STARTUP] Failed to load topic dictionaries from %s: %s", path, e)
    return TOPIC_TABLES


def is_ready() -> bool:
    return bool(TOPIC_TABLES) and LOADING_ERROR is None


def get_topic_table(language: str) -> TopicTable:
    """Topic table for ``language``, loading resources on first use."""
    if not TOPIC_TABLES and LOADING_ERROR is None:
        load_resources()
    if LOADING_ERROR is not None:
        raise RuntimeError(f"Topic dictionaries unavailable: {LOADING_ERROR}")
    return get_table(TOPIC_TABLES, language)


def supported_languages():
    return sorted(TOPIC_TABLES)

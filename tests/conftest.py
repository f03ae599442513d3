"""
conftest.py - Pytest configuration for timeline service tests

Sets up Python path and shared document fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add timeline-service to path for imports
SERVICE_DIR = Path(__file__).parent.parent / "timeline-service"

if str(SERVICE_DIR) not in sys.path:
    sys.path.insert(0, str(SERVICE_DIR))

from garden_timeline.services.topic_classifier import TopicTable  # noqa: E402


@pytest.fixture
def garden_docs():
    """Two documents: a Shamsi year with design/history cues, a century with botany cues."""
    return [
        {
            "id": 1,
            "title": "Bagh-e Fin",
            "content": "... built in 1350 ه.ش during the Safavid era, with its famous courtyard ...",
            "url": "https://example.org/fin",
        },
        {
            "id": 2,
            "title": "Qanats",
            "content": "... constructed in the 10th century with an elaborate irrigation qanat ...",
            "url": "https://example.org/qanat",
        },
    ]


@pytest.fixture
def synthetic_table():
    """Small injected dictionary, independent of the shipped asset."""
    return TopicTable.from_mapping(
        "en",
        {
            "Water": ["qanat", "pool", "fountain"],
            "Trees": ["cypress", "plane tree"],
            "Rulers": ["shah", "sultan"],
        },
    )

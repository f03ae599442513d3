import os

# ===============================
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# ===============================
# TOPIC DICTIONARY CONFIG
# ===============================
TOPIC_KEYWORDS_PATH = os.getenv(
    "TOPIC_KEYWORDS_PATH",
    os.path.join(BASE_DIR, "data", "topic_keywords.json"),
)
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

# ===============================
# TEMPORAL EXTRACTION CONFIG
# ===============================
# Characters of original text inspected on each side of a year token
CONTEXT_WINDOW_CHARS = int(os.getenv("CONTEXT_WINDOW_CHARS", 30))

# Plausible Gregorian window, both bounds exclusive
MIN_YEAR = int(os.getenv("GARDEN_MIN_YEAR", 500))
MAX_YEAR = int(os.getenv("GARDEN_MAX_YEAR", 2100))

# ===============================
# TIMELINE CONFIG
# ===============================
# A line chart needs at least this many distinct years
MIN_CHART_POINTS = int(os.getenv("MIN_CHART_POINTS", 2))

# ===============================
# SERVICE CONFIG
# ===============================
SERVICE_NAME = "Persian Garden Timeline"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:9002",
    ).split(",")
    if origin.strip()
]

import logging
import os
import sys

import uvicorn

logger = logging.getLogger("start_server")


def _port_from_env(default: int = 8080) -> int:
    port_env = os.environ.get("PORT")
    if not port_env or not port_env.strip():
        logger.warning("⚠️ [STARTUP] PORT env var is empty or missing. Defaulting to %d.", default)
        return default
    try:
        return int(port_env)
    except ValueError:
        logger.error("❌ [STARTUP] PORT env var is not a number: '%s'. Defaulting to %d.", port_env, default)
        return default


def start():
    logging.basicConfig(level=logging.INFO)
    port = _port_from_env()
    host = os.environ.get("HOST", "0.0.0.0")

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from garden_timeline.main import app

    logger.info("🚀 [STARTUP] Launching Uvicorn on %s:%d...", host, port)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info",
        proxy_headers=True,
        forwarded_allow_ips="*",
        timeout_keep_alive=30,
    )


if __name__ == "__main__":
    start()

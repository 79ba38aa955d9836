import logging
import sys
from typing import Optional

from condo_portal.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the portal.

    Runs once per process; later calls (e.g. when tests re-import the app)
    leave existing handlers alone.

    Args:
        level: Logging level name; defaults to ``settings.LOG_LEVEL``
    """
    root = logging.getLogger()
    if root.handlers:
        return

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

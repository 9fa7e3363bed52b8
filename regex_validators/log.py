import logging
from typing import Optional

from regex_validators.settings import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings. Not called on import."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )

import logging

from core.settings import get_settings


def setup_logging(level: str | None = None) -> None:
    """Console logging for the service and CLI helpers."""
    level = (level or get_settings().log_level).upper()

    logger = logging.getLogger()
    logger.setLevel(level)

    # avoid duplicate handlers when called twice (reload, tests)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logging.getLogger(__name__).debug("logging configured at %s", level)

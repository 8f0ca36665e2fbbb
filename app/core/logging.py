import logging

from app.core.config import settings


def configure_logging(level: str) -> None:
    # children are left NOTSET and inherit this
    logging.getLogger("app").setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"app.{name}")
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(ch)
    return logger


configure_logging(settings.LOG_LEVEL)

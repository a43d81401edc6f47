import logging
import sys

ROOT_LOGGER = "catalog"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger (once) and set its level."""
    log = logging.getLogger(ROOT_LOGGER)
    log.setLevel(level.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(
            logging.Formatter("[CATALOG] %(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        log.addHandler(h)
    return log


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")

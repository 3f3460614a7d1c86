import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from ..utils.paths import logs_dir


_logger = None


def get_logger(name: str = "capcalc") -> logging.Logger:
    """Shared app logger: DEBUG to a rotating file, INFO (or CAPCALC_LOG_LEVEL) to the console."""
    global _logger
    if _logger is not None:
        return _logger

    log_path: Path = logs_dir() / "app.log"
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    fh = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(os.environ.get("CAPCALC_LOG_LEVEL", "INFO").upper())

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    fh.setFormatter(fmt)
    ch.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(ch)

    _logger = logger
    logger.debug("Logger initialized at %s", log_path)
    return logger

import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger('lang_basics')
logger.setLevel(logging.INFO)
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')


def configure_logging(level: str = 'INFO', log_file: Optional[str] = None) -> logging.Logger:
    logger.setLevel(level)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def log_message(message: str):
    logger.info(message)

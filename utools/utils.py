import logging
import sys
import time
from datetime import timedelta
from functools import wraps

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, level=logging.INFO):
    """out to stderr"""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    return logger


def add_log(func):
    """
    logging start and done.
    """
    logger = get_logger(f"{func.__module__}.{func.__qualname__}")

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger.info("start...")
        start = time.time()
        result = func(*args, **kwargs)
        end = time.time()
        used = timedelta(seconds=end - start)
        logger.info("done. time used: %s", used)
        return result

    wrapper.logger = logger
    return wrapper


def seq_len_str(seq: str) -> str:
    """
    >>> seq_len_str("ATCG")
    '4 bp'
    """
    return f"{len(seq)} bp"

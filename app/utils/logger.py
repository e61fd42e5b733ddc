"""
Logging setup shared by the API, the Streamlit UI and the command line tool.
"""

import os
import sys
import logging as std_logging

LOGGER_NAME = "transcriptsummarizer"
LOG_FORMAT = "[%(asctime)s] {%(module)s:%(lineno)d} %(levelname)s - %(message)s"
# LOG_DIR="" turns the log file off (read-only containers)
DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "logs")


def get_logger(name: str = LOGGER_NAME, level: str = None, log_dir: str = None) -> std_logging.Logger:
    """
    Return the project logger, attaching stdout and file handlers on first use.

    Args:
        name: Logger name
        level: Level name, defaults to the LOG_LEVEL environment variable
        log_dir: Directory for the log file, defaults to LOG_DIR or ./logs
    """
    logger = std_logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    formatter = std_logging.Formatter(LOG_FORMAT)

    handlers = [std_logging.StreamHandler(sys.stdout)]
    log_dir = os.getenv("LOG_DIR", DEFAULT_LOG_DIR) if log_dir is None else log_dir
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(std_logging.FileHandler(os.path.join(log_dir, f"{name}.log")))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


logging = get_logger()

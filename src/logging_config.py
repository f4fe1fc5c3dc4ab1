"""Logging setup for the calculator app."""
import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Point the root logger at stdout at the configured level.

    Streamlit re-executes app/main.py on every widget change, so this runs
    once per rerun; dropping the previous handler keeps each recipe log line
    from being printed once per earlier rerun.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    return root_logger

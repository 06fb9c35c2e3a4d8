"""
Logging setup for command line use. The library itself only creates loggers
under the ``enigma_machine`` namespace and never adds handlers.
"""
import logging
import sys


def setup_logging(level=logging.WARNING, log_file=None):
    logger = logging.getLogger("enigma_machine")
    logger.setLevel(level)

    # repeated calls (tests, interactive use) must not stack handlers
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("logging initialized")

import logging


def get_logger() -> logging.Logger:
    """
    Returns the "setcookie" logger.
    """
    return logging.getLogger("setcookie")

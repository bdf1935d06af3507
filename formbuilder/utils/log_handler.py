import logging
import os


def get_logger(logger_name: str, log_level: str = None) -> logging.Logger:
    """Default logger to set up in code logging

    Args:
        logger_name (str): Name for logger
        log_level (str, optional): Log level for printing to terminal. Defaults to the LOG_LEVEL environment variable, then 'DEBUG'.

    Returns:
        logging.Logger: Returns logging object to initialize logger with
    """
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(log_level or os.getenv("LOG_LEVEL", "DEBUG"))
    return logger

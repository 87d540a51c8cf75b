import os
import logging

LOG_LEVEL_ENV = "TESSERACT_LOG_LEVEL"


def setup_logger():
    logger = logging.getLogger('tesseract')

    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)

    # Streamlit re-executes the page on every interaction
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger

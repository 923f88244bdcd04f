# app_utils/logging_utils.py
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGES = ("masking_utils", "app_utils")


def setup_logging(level="INFO", handler=None):
    """Attach one stream handler to the project loggers."""
    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in PACKAGES:
        log = logging.getLogger(name)
        log.setLevel(level)
        for h in list(log.handlers):
            log.removeHandler(h)
        log.addHandler(handler)
    return handler

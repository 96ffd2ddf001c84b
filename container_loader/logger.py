import logging

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger; safe to call repeatedly."""
    logger = logging.getLogger("container_loader")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)
    return logger

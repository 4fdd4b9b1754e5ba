import logging
from pathlib import Path


def setup_logging(log_path: Path) -> logging.Logger:
    """Configures and returns the application logger (file only, the terminal belongs to the UI)."""
    logger = logging.getLogger("fault_note")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Remove existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    # File handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Failed to setup log file handler: {e}")
        logger.addHandler(logging.NullHandler())

    return logger

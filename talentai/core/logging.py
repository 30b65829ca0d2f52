# talentai/core/logging.py
import logging
import os

from talentai.core.config import settings

LOG_FORMAT = "[%(asctime)s] %(lineno)d %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured
    level = (level or settings.LOG_LEVEL).upper()
    log_file = log_file if log_file is not None else settings.LOG_FILE

    root = logging.getLogger()
    if _configured:
        root.setLevel(level)
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(format=LOG_FORMAT, level=level, handlers=handlers)
    _configured = True

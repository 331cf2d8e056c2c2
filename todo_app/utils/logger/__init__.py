import logging

from todo_app.utils.config import Settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def configure_logging(settings: Settings) -> None:
    """Install a single stream handler on the root logger."""
    global _handler
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)

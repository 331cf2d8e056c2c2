import logging

from todo_app.utils.config import Settings
from todo_app.utils.logger import configure_logging


def test_configure_logging_installs_one_handler_at_configured_level() -> None:
    root = logging.getLogger()
    before = len(root.handlers)

    configure_logging(Settings(log_level="warning"))
    configure_logging(Settings(log_level="warning"))

    assert root.level == logging.WARNING
    assert len(root.handlers) <= before + 1

    configure_logging(Settings(log_level="info"))
    assert root.level == logging.INFO

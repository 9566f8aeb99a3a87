from __future__ import annotations
import logging

from email_classifier.config import LOG_LEVEL

HANDLER_NAME = "email_classifier"

def setup_logging(level: str = LOG_LEVEL) -> None:
    """Attach a console handler to the root logger once per process.

    Streamlit re-executes the page script on every interaction, so repeated
    calls must not stack handlers.
    """
    root = logging.getLogger()
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root.addHandler(handler)
    root.setLevel(level.upper())

"""
Logging setup - Console handler and level for application loggers.

Called once from the FastAPI lifespan on startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Send application logs to stderr at the given level.

    A root StreamHandler is only added when the root logger has no handlers,
    so repeated startups (and hosts that already configure logging, such as
    pytest) do not get duplicate lines.
    """
    if not logging.root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.root.addHandler(handler)
    logging.getLogger("src").setLevel(getattr(logging, level.upper(), logging.INFO))

# arlab/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura el logger raíz una sola vez (handler a stderr)."""
    root = logging.getLogger()
    if not any(getattr(h, "_arlab", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._arlab = True
        root.addHandler(handler)
    root.setLevel(level.upper())

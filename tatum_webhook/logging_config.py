import logging
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Send JSON log lines to ``stream`` (stdout by default).

    An unknown level raises ValueError before any handler is touched.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    )
    root.handlers.clear()
    root.addHandler(handler)

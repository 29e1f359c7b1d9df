import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None,
                      stream: Optional[TextIO] = None) -> None:
    """Attach one stderr handler to the root logger unless one is already there."""
    if fmt is None:
        fmt = DEFAULT_FORMAT
    root = logging.getLogger()
    if not root.handlers:
        # stdout may be carrying converted XML
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
    root.setLevel(level)

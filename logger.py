import logging
import sys
from typing import List, Optional, TextIO

LOG_FORMAT = "[%(asctime)s - %(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# marks handlers installed here so repeated calls replace instead of duplicate
_MANAGED = "_heap_managed_handler"


def remove_managed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    name: str,
    verbose: bool = False,
    stream: Optional[TextIO] = None,
    log_file: Optional[str] = None,
) -> List[logging.Handler]:
    """Attach console (and optionally file) handlers to the named logger."""
    log = logging.getLogger(name)
    remove_managed_handlers(log)

    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    log.propagate = False
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(fmt)
        setattr(handler, _MANAGED, True)
        log.addHandler(handler)
    return handlers

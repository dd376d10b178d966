"""Per-run action log: one line per planned or executed action."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

ACTION_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
ACTION_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@contextmanager
def open_action_log(log_file: Path) -> Iterator[logging.Logger]:
    """Yield a logger that appends to ``log_file`` for the duration of a run.

    The logger is built directly rather than through ``logging.getLogger``, so
    it has no parent, never reaches the console handlers configured by the CLI
    and is not kept in the logging registry after the run.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.Logger(f"{__name__}:{log_file.resolve()}", logging.INFO)
    logger.propagate = False

    handler = logging.FileHandler(log_file, mode='a', encoding="utf-8")
    handler.setFormatter(logging.Formatter(ACTION_LOG_FORMAT, ACTION_LOG_DATEFMT))
    logger.addHandler(handler)

    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        handler.close()

"""Command-line interface."""

from __future__ import annotations

import logging

from .calculator import run_session
from .config import LOG_FILE, LOG_LEVEL
from .errors import InputExhaustedError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(LOG_LEVEL, LOG_FILE)
    try:
        run_session()
    except InputExhaustedError as exc:
        logger.error("Input ended before the session finished: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

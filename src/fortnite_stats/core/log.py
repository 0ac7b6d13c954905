from __future__ import annotations

import logging
import sys

QUIET_FORMAT = "%(message)s"
VERBOSE_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Diagnostics go to stderr so stdout only carries the stats."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else QUIET_FORMAT))

    logger = logging.getLogger("fortnite_stats")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    # httpx logs every request at INFO; only show that with --verbose.
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)

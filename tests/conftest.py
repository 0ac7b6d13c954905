from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    # CLI commands bind a handler to the (runner-captured) stderr of their invocation.
    yield
    logger = logging.getLogger("fortnite_stats")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

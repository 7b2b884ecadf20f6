"""Logging setup for the command-line front-end."""

from __future__ import annotations

import logging
from typing import Optional


def setup_logging(verbose: bool = False, default_level: Optional[int] = None) -> None:
    """Configure root logging.

    Args:
        verbose: If True, log at DEBUG; otherwise use ``default_level``.
        default_level: Level used when not verbose (WARNING if omitted).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING if default_level is None else default_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

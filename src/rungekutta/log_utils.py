# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Logging setup for scripts that drive the integrator."""

import logging
import os


def configure_logging(level=logging.INFO, log_path=None):
    """Set up console (+ optional file) logging on the 'rungekutta' logger.

    Args:
        level: logging level for the logger and its handlers.
        log_path: if given, also log to this file. Its directory is created.

    Returns:
        the configured logger.
    """
    logger = logging.getLogger("rungekutta")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if log_path is not None:
        outdir = os.path.dirname(log_path)
        if outdir:
            os.makedirs(outdir, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger

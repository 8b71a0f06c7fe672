# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Logging helper.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers. Applications that want to see parameter corrections
(clamped counts, clamped positions) without their own setup can call
setup_default_logging() once.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    No-op if the root logger already has handlers.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]

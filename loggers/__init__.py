# -*- coding: utf-8 -*-
"""
TOPSIS Logging Package
======================

Two-channel logging system:
  * **ConsoleLogger** — concise, colour-coded run output
  * **DebugLogger** — structured JSON of every record for later inspection

Library code only uses the stdlib ``topsis`` logger; these two channels
are wired up by entry points such as ``main.py``.

Usage::

    from loggers import setup_logging
    console, debug = setup_logging('outputs/logs')
"""

import logging
from typing import Optional, Tuple

from .context import Colors, LogContext, PhaseMetrics
from .console_logger import ConsoleLogger
from .debug_logger import DebugLogger
from .decorators import log_execution, log_context, timed_operation


def setup_logging(
    output_dir: str = 'outputs/logs',
    use_color: Optional[bool] = None,
    level: str = 'DEBUG',
) -> Tuple[ConsoleLogger, DebugLogger]:
    """Create and return both loggers.

    Parameters
    ----------
    output_dir : str
        Directory for the debug JSON file.
    use_color : bool, optional
        Force colour on / off; auto-detected when ``None``.
    level : str
        Threshold of the stdlib ``topsis`` logger.

    Returns
    -------
    tuple[ConsoleLogger, DebugLogger]
    """
    console = ConsoleLogger(use_color=use_color)
    debug = DebugLogger(output_dir=output_dir,
                        level=getattr(logging, level.upper()))
    return console, debug


__all__ = [
    'setup_logging',
    'ConsoleLogger',
    'DebugLogger',

    'Colors',
    'LogContext',
    'PhaseMetrics',

    'log_execution',
    'log_context',
    'timed_operation',
]

# -*- coding: utf-8 -*-
"""
Structured Debug Logger for TOPSIS Runs
=======================================

Records every detail of a run into a single JSON array file
(``<output_dir>/debug_<timestamp>.json``).  Records emitted by library
code on the stdlib ``topsis`` logger are intercepted into the same file.

Each entry carries: timestamp, level, module, function, line, the
thread-local context (phase, matrix size, ...), message and an optional
structured *data* payload.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

from .context import Colors, LogContext


class DebugLogger:
    """Accumulates structured log entries and flushes to a JSON array file."""

    def __init__(self, output_dir: Union[str, Path] = 'outputs/logs',
                 level: int = logging.DEBUG):
        self._dir = Path(output_dir)
        self._dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime('%Y%m%d_%H%M%S_%f')
        self._path = self._dir / f'debug_{ts}.json'
        self._entries: List[Dict[str, Any]] = []

        # Library modules log to ``logging.getLogger('topsis.<module>')``
        self._stdlib_logger = logging.getLogger('topsis')
        self._previous_level = self._stdlib_logger.level
        self._stdlib_logger.setLevel(level)
        self._handler = _InterceptHandler(self)
        self._stdlib_logger.addHandler(self._handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def log_data(self, label: str, payload: Any) -> None:
        """Store a structured payload (arrays, dicts, dataclass fields)."""
        self._add('DATA', label, data=payload)

    def flush(self) -> str:
        """Write accumulated entries to disk and return the file path."""
        with open(self._path, 'w', encoding='utf-8') as fh:
            json.dump(self._entries, fh, indent=2, default=_json_default,
                      ensure_ascii=False)
        return str(self._path)

    def detach(self) -> None:
        """Stop intercepting stdlib records and restore the logger level."""
        self._stdlib_logger.removeHandler(self._handler)
        self._stdlib_logger.setLevel(self._previous_level)

    def close(self) -> str:
        """Flush and detach the stdlib intercept handler."""
        path = self.flush()
        self.detach()
        return path

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def entries(self) -> List[Dict[str, Any]]:
        return list(self._entries)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add(self, level: str, message: str, *, data: Any = None,
             module: str = '', function: str = '', line: int = 0) -> None:
        entry: Dict[str, Any] = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'module': module,
            'function': function,
            'line': line,
            'context': LogContext.snapshot(),
            'message': Colors.strip(str(message)),
        }
        if data is not None:
            entry['data'] = data
        self._entries.append(entry)


class _InterceptHandler(logging.Handler):
    """Bridges stdlib ``logging`` records into :class:`DebugLogger`."""

    def __init__(self, debug_logger: DebugLogger):
        super().__init__(level=logging.DEBUG)
        self._dl = debug_logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._dl._add(
                level=record.levelname,
                message=record.getMessage(),
                module=record.module,
                function=record.funcName,
                line=record.lineno,
            )
        except Exception:
            self.handleError(record)


def _json_default(obj: Any) -> Any:
    """Fallback serialiser for numpy / pandas objects."""
    import numpy as np
    import pandas as pd
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        return float(obj)
    if isinstance(obj, pd.DataFrame):
        return obj.to_dict(orient='list')
    if isinstance(obj, pd.Series):
        return obj.to_dict()
    return str(obj)


__all__ = ['DebugLogger']

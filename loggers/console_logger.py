# -*- coding: utf-8 -*-
"""
Console Logger for TOPSIS Runs
==============================

Concise, colour-coded output for following a ranking run: phase banners
with timing, key/value metrics, and a fixed-width ranking table.
"""

from __future__ import annotations

import math
import sys
import time
from contextlib import contextmanager
from typing import Any, Generator, List, Optional, Sequence

from .context import Colors, LogContext, PhaseMetrics


# Width of the banner / separator lines
_LINE_W = 60


class ConsoleLogger:
    """Structured console logger for monitoring ranking runs."""

    def __init__(self, use_color: Optional[bool] = None, stream=None):
        self._color = Colors.supports_color() if use_color is None else use_color
        self._stream = stream
        self._phases: List[PhaseMetrics] = []

    @property
    def phases(self) -> List[PhaseMetrics]:
        return list(self._phases)

    # ------------------------------------------------------------------
    # Low-level helpers
    # ------------------------------------------------------------------

    def _c(self, text: str, *codes: str) -> str:
        if not self._color:
            return text
        return ''.join(codes) + text + Colors.RESET

    def _write(self, msg: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(msg + '\n')
        stream.flush()

    # ------------------------------------------------------------------
    # Banners & phases
    # ------------------------------------------------------------------

    def banner(self, title: str, subtitle: str = '') -> None:
        """Print a prominent banner (e.g. at startup)."""
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))
        self._write(self._c(f'  {title}', Colors.BOLD, Colors.BRIGHT_WHITE))
        if subtitle:
            self._write(self._c(f'  {subtitle}', Colors.DIM))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

    @contextmanager
    def phase(self, name: str) -> Generator[PhaseMetrics, None, None]:
        """Print phase start / end with timing; failures are re-raised.

        Example::

            with console.phase('Ranking'):
                ranking = rank(weights, directions, flat)
        """
        metrics = PhaseMetrics(name=name, start_time=time.time())
        self._phases.append(metrics)
        LogContext.set('phase', name)
        self._write(self._c(f'>> {name}', Colors.BOLD, Colors.CYAN))
        try:
            yield metrics
        except Exception as exc:
            metrics.end_time = time.time()
            metrics.status = 'failed'
            self._write(self._c(
                f'   FAIL  {name}  ({metrics.elapsed:.3f}s) {type(exc).__name__}: {exc}',
                Colors.RED, Colors.BOLD,
            ))
            raise
        else:
            metrics.end_time = time.time()
            metrics.status = 'completed'
            self._write(self._c(f'   OK    {name}  ({metrics.elapsed:.3f}s)',
                                Colors.GREEN))
        finally:
            LogContext.remove('phase')

    # ------------------------------------------------------------------
    # Metrics, tables, messages
    # ------------------------------------------------------------------

    def metric(self, label: str, value: Any) -> None:
        """Print a key-value metric."""
        val_str = f'{value:.4f}' if isinstance(value, float) else str(value)
        self._write(self._c(f'     {label}: ', Colors.DIM) + val_str)

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]],
              col_widths: Optional[Sequence[int]] = None, indent: int = 5) -> None:
        """Print a compact fixed-width table, right-aligned."""
        if col_widths is None:
            col_widths = [max(len(h) + 2, 8) for h in headers]
        pad = ' ' * indent
        self._write(self._c(
            pad + '  '.join(f'{h:>{w}}' for h, w in zip(headers, col_widths)),
            Colors.BOLD))
        self._write(pad + '  '.join('-' * w for w in col_widths))
        for row in rows:
            self._write(pad + '  '.join(f'{c:>{w}}' for c, w in zip(row, col_widths)))

    def warning(self, message: str) -> None:
        self._write(self._c(f'  ! {message}', Colors.YELLOW))

    # ------------------------------------------------------------------
    # Ranking output
    # ------------------------------------------------------------------

    def show_ranking(self, ranking: Sequence[Any],
                     labels: Optional[Sequence[str]] = None) -> None:
        """Print a ranking (sequence of ``Alternative``) as a table.

        *labels* maps row ids to display names; ids are shown otherwise.
        """
        rows = []
        for position, alt in enumerate(ranking, 1):
            name = labels[alt.id] if labels is not None else str(alt.id)
            score = 'NaN' if math.isnan(alt.score) else f'{alt.score:.4f}'
            rows.append([str(position), name, score])
        self.table(['Rank', 'Alternative', 'Closeness'], rows, [6, 14, 10])

        n_nan = sum(1 for alt in ranking if math.isnan(alt.score))
        if n_nan:
            self.warning(f'{n_nan} alternative(s) with undefined closeness ranked last')


__all__ = ['ConsoleLogger']

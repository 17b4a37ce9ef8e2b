#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
TOPSIS — Worked Example
=======================

Usage
-----
    python main.py

Ranks four alternatives on three benefit criteria, prints the ranking
through the console logger and writes every intermediate array to
``outputs/logs/debug_<timestamp>.json``.
"""

import logging
import sys
from typing import List

EXAMPLE_WEIGHTS = [0.64339, 0.28284, 0.07377]
EXAMPLE_DIRECTIONS = [True, True, True]
# Column-major: all four alternatives on criterion 1, then 2, then 3.
EXAMPLE_ALTERNATIVES = [
    80.0, 70.0, 91.0, 90.0,
    80.0, 71.0, 90.0, 78.0,
    0.0, 1.0, 0.0, 4.0,
]
EXPECTED_ORDER = [3, 2, 0, 1]


def run_example(config=None) -> List:
    """Rank the worked example, logging to console and debug JSON."""

    # ------------------------------------------------------------------
    # Lazy imports (keeps ``import main`` cheap)
    # ------------------------------------------------------------------
    from config import get_config
    from loggers import setup_logging, timed_operation
    from mcdm import compute_topsis
    from mcdm.topsis import order_by_closeness

    config = config or get_config()
    config.paths.ensure_directories()
    console, debug = setup_logging(str(config.paths.logs_dir),
                                   use_color=config.logging.use_color,
                                   level=config.logging.level)
    logger = logging.getLogger('topsis')

    console.banner('TOPSIS', 'Order Preference by Similarity to Ideal Solution')
    try:
        with console.phase('Ranking'):
            with timed_operation(logger, 'TOPSIS ranking'):
                artifacts = compute_topsis(EXAMPLE_WEIGHTS, EXAMPLE_DIRECTIONS,
                                           EXAMPLE_ALTERNATIVES, config.topsis)
                ranking = order_by_closeness(artifacts.closeness)
            console.metric('Alternatives', len(ranking))
            console.metric('Criteria', len(EXAMPLE_WEIGHTS))

        debug.log_data('artifacts', {
            'weighted_matrix': artifacts.weighted_matrix,
            'ideal': artifacts.ideal,
            'anti_ideal': artifacts.anti_ideal,
            'd_positive': artifacts.d_positive,
            'd_negative': artifacts.d_negative,
            'closeness': artifacts.closeness,
        })
        debug.log_data('ranking', [{'id': a.id, 'score': a.score} for a in ranking])
        console.show_ranking(ranking)
    finally:
        if config.logging.debug_json:
            debug.close()
        else:
            debug.detach()

    return ranking


def main(config=None) -> None:
    """Run the worked example and check the expected order."""
    try:
        ranking = run_example(config)
        order = [a.id for a in ranking]
        if order != EXPECTED_ORDER:
            raise AssertionError(f'expected order {EXPECTED_ORDER}, got {order}')
    except Exception as e:
        print(f"\n  ERROR: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()

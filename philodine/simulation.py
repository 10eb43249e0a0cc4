"""Running a dinner and the command-line entry point."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import TextIO

from philodine.args import ArgumentError, Rules, parse_rules
from philodine.clock import now_ms
from philodine.referee import referee
from philodine.table import Table, build_table


def run_simulation(rules: Rules, out: TextIO | None = None) -> Table:
    """Run one dinner to its end and return the table it was held at.

    Raises RuntimeError if a philosopher's thread cannot be started.
    """
    table = build_table(rules, out)
    table.start_time = now_ms()
    threads: list[threading.Thread] = []
    for philo in table.philosophers:
        philo.last_meal = table.start_time
        thread = threading.Thread(target=philo.run, name=f"philosopher-{philo.id}")
        try:
            thread.start()
        except RuntimeError:
            with table.lock:
                table.someone_died = True
            for started in threads:
                started.join()
            raise
        threads.append(thread)
    referee(table)
    for thread in threads:
        thread.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run a dinner from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rules = parse_rules(args)
    except ArgumentError:
        return 1
    try:
        run_simulation(rules)
    except RuntimeError:
        return 1
    return 0
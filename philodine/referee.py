"""The referee that watches the table and ends the dinner."""

from __future__ import annotations

import time

from philodine.table import Philosopher, Table

_PAUSE = 0.0001


def all_ate(table: Table) -> bool:
    """Tell whether every philosopher has eaten the required number of meals."""
    required = table.rules.must_eat or 0
    return all(philo.meal_count() >= required for philo in table.philosophers)


def check_philo_death(table: Table, philo: Philosopher) -> bool:
    """Report ``philo``'s death if it has starved; return True if it did."""
    if table.is_over():
        return False
    if philo.starving_for() >= table.rules.time_to_die:
        table.announce_death(philo)
        return True
    return False


def check_meal_completion(table: Table) -> bool:
    """End the dinner once everyone has eaten enough; return True if this call ended it."""
    if table.rules.must_eat is None:
        return False
    return all_ate(table) and table.stop()


def _check_philosophers(table: Table) -> bool:
    for philo in table.philosophers:
        if check_philo_death(table, philo):
            return True
        if check_meal_completion(table):
            return True
    return False


def referee(table: Table) -> None:
    """Watch the philosophers until one starves or all have eaten enough."""
    while not _check_philosophers(table):
        time.sleep(_PAUSE)
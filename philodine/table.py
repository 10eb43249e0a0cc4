"""The dinner table: shared state, forks and the philosophers' routine."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philodine.args import Rules
from philodine.clock import now_ms

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
RESET = "\033[0m"

TAKEN_FORK = f"{BLUE}has taken a fork{RESET}"
EATING = f"{GREEN}is eating{RESET}"
SLEEPING = f"{MAGENTA}is sleeping{RESET}"
THINKING = f"{YELLOW}is thinking{RESET}"
DIED = f"{RED}died{RESET}"

_PAUSE = 0.0001


class Table:
    """State shared by every philosopher of one dinner.

    ``someone_died`` is guarded by ``lock``; it is set both when a
    philosopher starves and when everyone has eaten enough.
    """

    def __init__(self, rules: Rules, out: TextIO | None = None) -> None:
        self.rules = rules
        self.out = out
        self.start_time = now_ms()
        self.forks: list[threading.Lock] = []
        self.philosophers: list[Philosopher] = []
        self.lock = threading.Lock()
        self.someone_died = False
        self._write = threading.Lock()

    def is_over(self) -> bool:
        """Tell whether the dinner has ended."""
        with self.lock:
            return self.someone_died

    def stop(self) -> bool:
        """End the dinner; return True if this call is the one that ended it."""
        with self.lock:
            if self.someone_died:
                return False
            self.someone_died = True
            return True

    def elapsed(self) -> int:
        """Milliseconds since the dinner started."""
        return now_ms() - self.start_time

    def _write_line(self, philo: Philosopher, text: str) -> None:
        with self._write:
            print(f"{self.elapsed()} {philo.id} {text}", file=self.out, flush=True)

    def message(self, philo: Philosopher, text: str) -> None:
        """Print a timestamped line for ``philo`` unless the dinner is over."""
        with self.lock:
            if not self.someone_died or text == "died":
                self._write_line(philo, text)

    def announce_death(self, philo: Philosopher) -> None:
        """End the dinner and report that ``philo`` died."""
        with self.lock:
            self.someone_died = True
        self._write_line(philo, DIED)


@dataclass(eq=False)
class Philosopher:
    """One diner, seated between two forks."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    table: Table = field(repr=False)
    last_meal: int = 0
    meals: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def take_forks(self) -> None:
        """Pick up both forks; even seats start on the right to avoid deadlock."""
        if self.id % 2 == 0:
            first, second = self.right_fork, self.left_fork
        else:
            first, second = self.left_fork, self.right_fork
        first.acquire()
        self.table.message(self, TAKEN_FORK)
        second.acquire()
        self.table.message(self, TAKEN_FORK)

    def release_forks(self) -> None:
        """Put both forks down, in the reverse order of taking them."""
        if self.id % 2 == 0:
            self.left_fork.release()
            self.right_fork.release()
        else:
            self.right_fork.release()
            self.left_fork.release()

    def eat(self) -> None:
        """Take the forks, eat for the set time, and put the forks back."""
        self.take_forks()
        try:
            table = self.table
            with table.lock:
                if table.someone_died:
                    return
                with self._lock:
                    self.last_meal = now_ms()
                    self.meals += 1
            table.message(self, EATING)
            self.sleep_for(table.rules.time_to_eat)
        finally:
            self.release_forks()

    def sleep_for(self, duration: int) -> None:
        """Wait ``duration`` milliseconds, waking early if the dinner ends."""
        start = now_ms()
        while now_ms() - start < duration:
            if self.table.is_over():
                break
            time.sleep(_PAUSE)

    def starving_for(self) -> int:
        """Milliseconds since this philosopher last started eating."""
        with self._lock:
            return now_ms() - self.last_meal

    def meal_count(self) -> int:
        """How many meals this philosopher has started."""
        with self._lock:
            return self.meals

    def run(self) -> None:
        """Eat, sleep and think until the dinner ends."""
        table = self.table
        rules = table.rules
        if rules.number_of_philosophers == 1:
            table.message(self, TAKEN_FORK)
            self.sleep_for(rules.time_to_die)
            return
        if self.id % 2 == 0:
            time.sleep(_PAUSE)
        while not table.is_over():
            self.eat()
            table.message(self, SLEEPING)
            self.sleep_for(rules.time_to_sleep)
            table.message(self, THINKING)
            time.sleep(_PAUSE)


def build_table(rules: Rules, out: TextIO | None = None) -> Table:
    """Seat the philosophers around a table with one fork between each pair."""
    table = Table(rules, out)
    forks = [threading.Lock() for _ in range(rules.number_of_philosophers)]
    table.forks = forks
    table.philosophers = [
        Philosopher(
            id=seat,
            left_fork=left,
            right_fork=right,
            table=table,
            last_meal=table.start_time,
        )
        for seat, (left, right) in enumerate(zip(forks, forks[1:] + forks[:1]), start=1)
    ]
    return table
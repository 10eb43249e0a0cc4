# philodine

A threaded simulation of the dining philosophers problem.

Philosophers sit around a round table with one fork between each pair of
neighbours. Each philosopher runs in its own thread. It picks up the two forks
beside it, eats, puts them down, sleeps, thinks, and starts again. A referee
watches the table. The dinner ends when a philosopher goes too long without
starting a meal, or, if a meal count is given, when every philosopher has
started that many meals.

## Installation

```
pip install .
```

## Usage

```
philodine NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

All times are in milliseconds. Every argument must be a non-empty run of
digits, optionally preceded by a single `+`. There must be at least one
philosopher. If the arguments are wrong, or a philosopher's thread cannot be
started, the command prints nothing and exits with status 1; otherwise it exits
with status 0 once the dinner has ended.

Examples:

```
philodine 5 800 200 200        # runs until a philosopher starves or it is stopped
philodine 5 800 200 200 7      # ends once everyone has started 7 meals
philodine 4 310 200 100        # a philosopher starves
philodine 1 800 200 200        # the lone philosopher has one fork and starves
```

Each event is printed on its own line as:

```
<milliseconds since start> <philosopher id> <action>
```

Philosophers are numbered from 1. The actions are `has taken a fork`,
`is eating`, `is sleeping`, `is thinking` and `died`; each is wrapped in ANSI
colour codes, whether or not the output is a terminal. Once the dinner has
ended, whether by a death or because everyone has eaten enough, no further
events are printed apart from the single `died` line.

## Using it from Python

```python
import sys

from philodine.args import parse_rules
from philodine.simulation import run_simulation

rules = parse_rules(["5", "800", "200", "200", "3"])
table = run_simulation(rules, sys.stdout)
print([philo.meal_count() for philo in table.philosophers])
```

- `philodine.args.parse_rules(args)` takes the arguments that follow the
  command name and returns a frozen `Rules` dataclass (`number_of_philosophers`,
  `time_to_die`, `time_to_eat`, `time_to_sleep`, `must_eat`, the last being
  `None` when no meal count is given). It raises
  `philodine.args.ArgumentError`, a `ValueError`, for invalid input.
- `philodine.args.check_arguments`, `is_valid_number` and `parse_leading_int`
  are the validation helpers it uses; `parse_leading_int` reads a leading
  integer the way C's `atoi` does, wrapping values outside the signed 32-bit
  range.
- `philodine.simulation.run_simulation(rules, out=None)` runs a dinner to its
  end, writing events to `out` (standard output when `None`), and returns the
  `philodine.table.Table` it was held at. It raises `RuntimeError` if a thread
  cannot be started.
- `philodine.table.build_table` seats the philosophers without starting them,
  and `philodine.referee` holds the checks the referee makes
  (`all_ate`, `check_philo_death`, `check_meal_completion`, `referee`).

## What it does not do

The simulation only prints events as they happen. It keeps no log or history
beyond the meal counts and last-meal times on the returned table, and it has no
timeout of its own: without a meal count, a dinner in which nobody starves runs
until the process is stopped.

## Running the tests

```
pip install ".[test]"
pytest
```
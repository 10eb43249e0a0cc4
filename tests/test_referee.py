import io

from philodine.args import Rules
from philodine.referee import (
    all_ate,
    check_meal_completion,
    check_philo_death,
    referee,
)
from philodine.table import DIED, build_table


def _table(count=3, die=10_000, must_eat=None):
    out = io.StringIO()
    rules = Rules(count, die, 100, 100, must_eat)
    return build_table(rules, out), out


def test_all_ate_false_when_one_is_short():
    table, _ = _table(must_eat=2)
    for philo in table.philosophers:
        philo.meals = 2
    table.philosophers[1].meals = 1
    assert all_ate(table) is False


def test_all_ate_true_when_everyone_has_eaten():
    table, _ = _table(must_eat=2)
    for philo in table.philosophers:
        philo.meals = 3
    assert all_ate(table) is True


def test_check_philo_death_not_starving():
    table, out = _table()
    assert check_philo_death(table, table.philosophers[0]) is False
    assert table.is_over() is False
    assert out.getvalue() == ""


def test_check_philo_death_reports_starvation():
    table, out = _table(die=0)
    philo = table.philosophers[1]
    assert check_philo_death(table, philo) is True
    assert table.is_over() is True
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    stamp, ident, text = lines[0].split(" ", 2)
    assert int(stamp) >= 0
    assert ident == str(philo.id)
    assert text == DIED


def test_check_philo_death_silent_once_over():
    table, out = _table(die=0)
    table.stop()
    assert check_philo_death(table, table.philosophers[0]) is False
    assert out.getvalue() == ""


def test_meal_completion_without_limit():
    table, _ = _table()
    for philo in table.philosophers:
        philo.meals = 50
    assert check_meal_completion(table) is False
    assert table.is_over() is False


def test_meal_completion_ends_dinner_once():
    table, _ = _table(must_eat=2)
    for philo in table.philosophers:
        philo.meals = 2
    assert check_meal_completion(table) is True
    assert table.is_over() is True
    assert check_meal_completion(table) is False


def test_meal_completion_not_yet():
    table, _ = _table(must_eat=2)
    assert check_meal_completion(table) is False
    assert table.is_over() is False


def test_referee_stops_on_death():
    table, out = _table(die=0)
    referee(table)
    assert table.is_over() is True
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(f" 1 {DIED}")


def test_referee_stops_when_all_have_eaten():
    table, out = _table(must_eat=0)
    referee(table)
    assert table.is_over() is True
    assert out.getvalue() == ""
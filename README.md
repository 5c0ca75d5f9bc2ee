# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. Each one sits between two forks, which are locks. It loops
through taking forks, eating, sleeping and thinking. A monitor watches the
table. It stops the simulation in two cases: when a philosopher has gone
longer than `time_to_die` without eating, or when every philosopher has
eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Every value must be a positive integer. A
value may have a leading `+`. A value with more than ten digits counts as
zero and is rejected. At most 200 philosophers are allowed.

Example:

```
philo 4 800 200 200
```

Each state change is printed as one line. The line holds the milliseconds
since the start, the philosopher's number (counted from 1) and the action:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The actions are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

Once the simulation is over, only `died` lines are printed.

A lone philosopher takes its single fork. It waits `time_to_die`
milliseconds and then dies.

When the arguments are invalid, the command prints an `Error: ...` line and
exits with status 1. There is one exception: a meal count that is given but
is zero. In that case the command exits with status 1 and prints nothing.

## Library use

```python
import sys

from philo.parsing import parse_args
from philo.table import Table

config = parse_args(["5", "800", "200", "200", "3"])
with Table(config, sys.stdout) as table:
    table.run()
```

The modules are:

- `philo.parsing` turns the arguments into a `Config`. `parse_args` raises
  `ArgumentError` on invalid input. The helpers `is_valid_number` and
  `to_size` check and convert single values.
- `philo.table` holds `Table` and `Philosopher`. `Table.run()` starts the
  threads, monitors them and closes the table. `start()`, `monitor()` and
  `close()` can also be called one by one.
- `philo.timeutils` provides `get_time`, `time_diff` and `sleep_ms`. All
  three work in milliseconds.
- `philo.cli.main(argv=None)` is the command-line entry point. It returns
  the exit status.

## Tests

```
pip install .[test]
pytest
```
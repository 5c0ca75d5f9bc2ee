"""The dining table: forks, philosophers, status output and the monitor."""

import sys
import threading
from typing import List, Optional, TextIO

from philo.parsing import Config
from philo.timeutils import get_time, sleep_ms, time_diff

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

_MONITOR_INTERVAL = 0.00005


class Philosopher:
    """One diner, sharing a fork on each side with its neighbours."""

    def __init__(self, table: "Table", id: int, left_fork: threading.Lock,
                 right_fork: threading.Lock) -> None:
        self.table = table
        self.id = id
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals_eaten = 0
        self.last_meal = 0
        self.eating = False
        self.thread: Optional[threading.Thread] = None

    def _fork_order(self):
        if self.id % 2 == 0:
            return self.left_fork, self.right_fork
        return self.right_fork, self.left_fork

    def _put_down_forks(self) -> None:
        self.left_fork.release()
        self.right_fork.release()

    def take_forks(self) -> bool:
        """Pick up both forks; return True only if both are now held."""
        table = self.table
        if table.is_simulation_over():
            return False
        first, second = self._fork_order()
        first.acquire()
        if table.is_simulation_over():
            first.release()
            return False
        table.print_status(self, TAKEN_FORK)
        second.acquire()
        if table.is_simulation_over():
            first.release()
            second.release()
            return False
        table.print_status(self, TAKEN_FORK)
        return True

    def eat(self) -> None:
        """Eat with both forks held, then put them down."""
        table = self.table
        with table.state_lock:
            self.eating = True
            self.last_meal = get_time()
        table.print_status(self, EATING)
        sleep_ms(table.config.time_to_eat)
        with table.state_lock:
            self.meals_eaten += 1
            self.eating = False
        self._put_down_forks()

    def sleep(self) -> None:
        self.table.print_status(self, SLEEPING)
        sleep_ms(self.table.config.time_to_sleep)

    def think(self) -> None:
        self.table.print_status(self, THINKING)
        if self.table.config.philo_count % 2 != 0:
            sleep_ms(1)

    def _dine_alone(self) -> None:
        with self.left_fork:
            self.table.print_status(self, TAKEN_FORK)
            sleep_ms(self.table.config.time_to_die)

    def _cycle(self) -> None:
        table = self.table
        if not self.take_forks():
            return
        if table.is_simulation_over():
            self._put_down_forks()
            return
        self.eat()
        if not table.is_simulation_over():
            self.sleep()
        if not table.is_simulation_over():
            self.think()

    def run(self) -> None:
        """The philosopher's routine, run in its own thread."""
        table = self.table
        if table.config.philo_count == 1:
            self._dine_alone()
            return
        if self.id % 2 == 0:
            sleep_ms(1)
        while not table.is_simulation_over():
            self._cycle()


class Table:
    """Holds the shared state of one simulation run."""

    def __init__(self, config: Config, out: Optional[TextIO] = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.start_time = get_time()
        count = config.philo_count
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.philosophers: List[Philosopher] = [
            Philosopher(self, i + 1, self.forks[i], self.forks[(i + 1) % count])
            for i in range(count)
        ]
        self.state_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._over = False

    def _stop(self) -> None:
        with self.state_lock:
            self._over = True

    def is_simulation_over(self) -> bool:
        with self.state_lock:
            return self._over

    def print_status(self, philo: Philosopher, message: str) -> None:
        """Write a status line; once the run is over only deaths are written."""
        over = self.is_simulation_over()
        with self._print_lock:
            if not over or message.startswith(DIED):
                self.out.write(f"{time_diff(self.start_time)} {philo.id} {message}\n")
                self.out.flush()

    def start(self) -> None:
        """Start one thread per philosopher."""
        for philo in self.philosophers:
            philo.last_meal = get_time()
            thread = threading.Thread(
                target=philo.run, name=f"philosopher-{philo.id}", daemon=True
            )
            try:
                thread.start()
            except RuntimeError:
                self._stop()
                raise
            philo.thread = thread

    def _check_death(self, philo: Philosopher) -> bool:
        with self.state_lock:
            died = (not philo.eating
                    and time_diff(philo.last_meal) > self.config.time_to_die)
            if died:
                self._over = True
        if died:
            self.print_status(philo, DIED)
        return died

    def _all_ate_enough(self) -> bool:
        target = self.config.must_eat_count
        if target == 0:
            return False
        with self.state_lock:
            all_ate = all(p.meals_eaten >= target for p in self.philosophers)
            if all_ate:
                self._over = True
        return all_ate

    def monitor(self) -> None:
        """Watch the table until someone dies or everyone has eaten enough."""
        sleep_ms(1)
        while not self.is_simulation_over():
            for philo in self.philosophers:
                if self.is_simulation_over() or self._check_death(philo):
                    break
            if self.is_simulation_over() or self._all_ate_enough():
                break
            threading.Event().wait(_MONITOR_INTERVAL)
        sleep_ms(1)

    def close(self) -> None:
        """End the run and wait for every started philosopher to finish."""
        self._stop()
        current = threading.current_thread()
        for philo in self.philosophers:
            if philo.thread is not None and philo.thread is not current:
                philo.thread.join()

    def run(self) -> None:
        """Run a whole simulation to its end."""
        try:
            self.start()
            self.monitor()
        finally:
            self.close()

    def __enter__(self) -> "Table":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
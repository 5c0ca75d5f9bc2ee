"""Command-line argument validation for the dining philosophers."""

from dataclasses import dataclass
from typing import Optional, Sequence

MAX_PHILOSOPHERS = 200
_MAX_DIGITS = 10
_DIGITS = frozenset("0123456789")

_MSG_ARG_COUNT = "invalid number of arguments"
_MSG_NOT_POSITIVE = "Invalid arguments - values must be positive integers"
_MSG_TOO_MANY = "Invalid arguments - max of 200 philosophers!"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are rejected.

    An empty message means the rejection is not reported to the user.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Config:
    """Validated simulation settings; times are in milliseconds."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int = 0


def is_valid_number(text: Optional[str]) -> bool:
    """Tell whether ``text`` is an unsigned decimal, optionally prefixed by '+'."""
    if not text or text.startswith("-"):
        return False
    if text.startswith("+"):
        text = text[1:]
    return bool(text) and all(ch in _DIGITS for ch in text)


def to_size(text: Optional[str]) -> int:
    """Convert the leading digits of ``text`` to an int.

    Returns 0 for missing input or a number longer than ten digits.
    """
    if not text:
        return 0
    if text.startswith("+"):
        text = text[1:]
    digits = []
    for ch in text:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits or len(digits) > _MAX_DIGITS:
        return 0
    return int("".join(digits))


def parse_args(args: Sequence[str]) -> Config:
    """Validate the four or five positional arguments and build a Config."""
    if len(args) not in (4, 5):
        raise ArgumentError(_MSG_ARG_COUNT)
    required = list(args[:4])
    must_eat = args[4] if len(args) == 5 else None

    if not all(is_valid_number(arg) for arg in required):
        raise ArgumentError(_MSG_NOT_POSITIVE)
    if to_size(required[0]) > MAX_PHILOSOPHERS:
        raise ArgumentError(_MSG_TOO_MANY)
    if must_eat is not None and not is_valid_number(must_eat):
        raise ArgumentError(_MSG_NOT_POSITIVE)

    count, die, eat, sleep = (to_size(arg) for arg in required)
    if 0 in (count, die, eat, sleep):
        raise ArgumentError(_MSG_NOT_POSITIVE)

    must_eat_count = 0
    if must_eat is not None:
        must_eat_count = to_size(must_eat)
        if must_eat_count == 0:
            raise ArgumentError()

    return Config(
        philo_count=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        must_eat_count=must_eat_count,
    )
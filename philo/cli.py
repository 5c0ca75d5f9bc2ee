"""Command-line entry point for the dining philosophers simulation."""

import sys
from typing import Optional, Sequence

from philo.parsing import ArgumentError, parse_args
from philo.table import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ArgumentError as err:
        if err.message:
            print(f"Error: {err.message}")
        return 1
    with Table(config, sys.stdout) as table:
        try:
            table.start()
        except RuntimeError:
            print("Error: failed to create philosophers")
            return 1
        table.monitor()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Dining philosophers simulation: argument parsing, a threaded table and a command-line entry point."""

__version__ = "1.0.0"
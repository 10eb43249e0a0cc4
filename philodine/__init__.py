"""Dining philosophers simulated with threads, locks as forks and a watching referee."""

__version__ = "0.1.0"
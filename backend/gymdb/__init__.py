"""Database bootstrap and schema migration tooling for the gym manager app."""

__version__ = "0.1.0"

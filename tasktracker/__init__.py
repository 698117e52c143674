"""Track tasks and their statuses from the command line, kept in a JSON file."""

__version__ = "0.1.0"
"""A minimal named application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class App:
    """An application identified by its name."""

    name: str

    def run(self) -> str:
        """Announce the application on standard output and return the announcement."""
        message = f"Running application: {self.name}"
        print(message)
        return message
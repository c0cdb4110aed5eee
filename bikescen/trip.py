"""A single bike trip belonging to a generated scenario."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Trip:
    """A trip from ``origin`` to ``destination`` between two minute marks."""

    origin: int = -1
    destination: int = -1
    start_time: int = -1
    end_time: int = -1
    scenario: int = -1

    def __str__(self) -> str:
        return (
            f"o:{self.origin} d:{self.destination} "
            f"start_time:{self.start_time} end_time:{self.end_time} "
            f"scenario:{self.scenario}"
        )

    def show(self) -> str:
        """Print a one-line description of the trip and return it."""
        line = str(self)
        print(line)
        return line
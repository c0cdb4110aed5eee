"""Writing generated instances, trips and targets to text files."""

from __future__ import annotations

from typing import Iterable, Sequence, TextIO

from .trip import Trip


def _write_trip_lines(handle: TextIO, scenarios: Sequence[Sequence[Trip]]) -> None:
    for e, trips in enumerate(scenarios):
        for trip in trips:
            handle.write(
                f"{trip.origin + 1} {trip.destination + 1} "
                f"{trip.start_time} {trip.end_time} {e}\n"
            )


def write_trips_and_stations(
    scenarios: Sequence[Sequence[Trip]],
    capacities: Iterable[float],
    qtot: int,
    filename: str,
) -> None:
    """Write station count (with depot), total fleet, capacities and all trips."""
    capacities = list(capacities)
    with open(filename, "w") as handle:
        print(f"First ... Printing output stations to file:{filename}")
        handle.write(f"{len(capacities) + 1}\n")
        handle.write(f"{qtot}\n")
        handle.write("0 " + "".join(f"{int(cap)} " for cap in capacities) + "\n")
        print(f"Next ... Printing output trips to file: {filename}")
        _write_trip_lines(handle, scenarios)


def write_trips(scenarios: Sequence[Sequence[Trip]], filename: str) -> None:
    """Write one line per trip: origin, destination, start, end, scenario."""
    with open(filename, "w") as handle:
        print(f"Printing output trips to file: {filename}")
        _write_trip_lines(handle, scenarios)


def write_targets(filename: str, targets: Iterable[float]) -> None:
    """Write one target per line in general numeric format."""
    with open(filename, "w") as handle:
        for target in targets:
            handle.write("%g\n" % float(target))
    print(f"Exact targets have been written to {filename}")
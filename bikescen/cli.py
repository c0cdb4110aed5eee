"""Command line: generate bike-sharing scenario instances from MATLAB data."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from .load import load_matlab_od, load_matlab_stations
from .output import write_targets, write_trips, write_trips_and_stations
from .scenario import ScenarioGenerator

TRIPS_ONLY_SCENARIOS = 400

_CITIES = (
    ("Capital", "washington", 6000),
    ("Divvy", "chicago", 15242),
    ("Hubway", "boston", 4000),
)

_USAGE = "Usage: bikescen <mat-trips-file> <mat-stations-file> <nb_scenarios> <seed>"


def city_for_path(path: str) -> tuple[str, int]:
    """Return the city name and total fleet size named by a stations path."""
    for marker, city, qtot in _CITIES:
        if marker in path:
            return city, qtot
    return "", 0


def instance_number(path: str) -> str:
    """First run of digits in the file name part of ``path``."""
    name = re.split(r"[/\\]", path)[-1]
    match = re.search(r"\d+", name)
    return match.group(0) if match else ""


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Load the data, generate scenarios and write the instance files."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(_USAGE, file=sys.stderr)
        return 0

    trips_path, stations_path = args[0], args[1]
    nb_scenarios = _atoi(args[2])
    seed = _atoi(args[3])

    od = load_matlab_od(trips_path)
    stations = load_matlab_stations(stations_path)
    rates = od.arrival_rates_od
    riding = stations.riding_times
    capacities = stations.stations

    od_pairs = rates.shape[1] * rates.shape[2] if rates.ndim == 3 else 0
    print(
        f"Size stations:{len(capacities)} ODpairs:{od_pairs} "
        f"RidingTimes:{riding.size} ToMakeScenarios:{nb_scenarios}"
    )

    generator = ScenarioGenerator(seed)
    scenarios = generator.generate(nb_scenarios, rates, riding, capacities)

    city, qtot = city_for_path(stations_path)
    number = instance_number(trips_path)

    if nb_scenarios == TRIPS_ONLY_SCENARIOS:
        write_trips(scenarios, f"{city}{number}_e{nb_scenarios}.txt")
        return 0

    instance_filename = f"{city}{number}_n{len(capacities) + 1}_e{nb_scenarios}.txt"
    write_trips_and_stations(scenarios, capacities, qtot, instance_filename)
    write_targets(f"targets_{city}{number}.txt", od.targets)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Sampling bike-trip scenarios from origin-destination arrival rates."""

from __future__ import annotations

import itertools
import math
from typing import Sequence

import numpy as np

from .rng import DEFAULT_SEED, RandomNumbers
from .trip import Trip

# Periods are half hours (48 per day); trips are sampled from 7h up to 16h.
START_PERIOD = 14
END_PERIOD = 32
MINUTES_PER_PERIOD = 30
MIN_RATE = 0.00001
PROGRESS_EVERY = 500


class ScenarioGenerator:
    """Draws Poisson arrivals per station pair and half hour, one list per scenario."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.rng = RandomNumbers(seed)

    def set_seed(self, seed: int) -> None:
        """Reset the underlying random generator."""
        self.rng.seed(seed)

    def _arrival_offsets(self, rate: float):
        """Yield successive arrival minutes within one period, as ``(previous, next)``."""
        rate_per_min = rate / MINUTES_PER_PERIOD
        time = 0
        while True:
            u = self.rng.rand01()
            if u >= 1.0:
                return
            time_next = time + math.ceil(-math.log(1.0 - u) / rate_per_min)
            if time_next > MINUTES_PER_PERIOD:
                return
            accepted = yield time_next
            if accepted:
                time = time_next

    def generate(
        self,
        nb_scenarios: int,
        arrival_rates_od: Sequence,
        riding_times: Sequence,
        capacities: Sequence,
    ) -> list[list[Trip]]:
        """Return ``nb_scenarios`` lists of trips, one per scenario."""
        rates = np.asarray(arrival_rates_od, dtype=float)
        riding = np.asarray(riding_times, dtype=float)
        nb_stations = len(capacities)

        print(f"In Generate scenarios:{nb_scenarios} stations:{nb_stations}")
        print(f"T (first dimension) = {rates.shape[0] if rates.ndim else 0}")
        if rates.ndim >= 2 and rates.shape[0] > 0:
            print(f"N (second dimension) = {rates.shape[1]}")
            if rates.ndim >= 3 and rates.shape[1] > 0:
                print(f"N (third dimension) = {rates.shape[2]}")

        offset = START_PERIOD * MINUTES_PER_PERIOD
        scenarios: list[list[Trip]] = []
        for e in range(max(nb_scenarios, 0)):
            trips: list[Trip] = []
            pairs = itertools.product(range(nb_stations), range(nb_stations))
            for i, j in pairs:
                duration = (
                    MINUTES_PER_PERIOD
                    if i == j
                    else int(MINUTES_PER_PERIOD * float(riding[i][j]))
                )
                for t in range(START_PERIOD, END_PERIOD):
                    rate = float(rates[t][i][j])
                    if rate < MIN_RATE:
                        continue
                    arrivals = self._arrival_offsets(rate)
                    accepted = None
                    while True:
                        try:
                            time_next = arrivals.send(accepted)
                        except StopIteration:
                            break
                        start_time = t * MINUTES_PER_PERIOD + time_next - offset
                        end_time = start_time + duration
                        if start_time == end_time:
                            accepted = False
                            continue
                        trips.append(Trip(i, j, start_time, end_time, e))
                        if len(trips) % PROGRESS_EVERY == 0:
                            print(f"Scenario {e} generated {len(trips)} trips ...")
                        accepted = True
            scenarios.append(trips)

        print("Generated the following scenarios and trips ...")
        for e, trips in enumerate(scenarios):
            print(f"Scenario:{e} trips:{len(trips)}")
        return scenarios
# bikescen

`bikescen` builds stochastic trip scenarios for bike-sharing rebalancing
problems. It reads two MATLAB `.mat` files:

- a **trips file** holding `ArrivalRatesOD`, a 3-D array of doubles indexed
  by half-hour period, origin station and destination station, giving the
  expected number of arrivals in that period. It may also hold
  `InitialState00ofer`, the target level of each station.
- a **stations file** holding `C`, the capacity of each station, and
  `RidingTime`, a square matrix of riding times between stations, in
  half-hour units.

For each scenario it draws Poisson arrivals for every origin–destination
pair over the half-hour periods 14 to 31 (7:00 to 16:00). Each arrival is a
trip; times are minutes counted from 7:00. A trip that starts and ends at
the same station lasts 30 minutes; any other trip lasts the riding time
times 30, truncated to whole minutes.

## Installation

```
pip install .
```

## Command line

```
bikescen <mat-trips-file> <mat-stations-file> <nb_scenarios> <seed>
```

With any other number of arguments it prints a usage line to standard
error and exits with status 0.

The city is taken from the stations file path:

| path contains | city       | total fleet (Qtot) |
|---------------|------------|--------------------|
| `Capital`     | washington | 6000               |
| `Divvy`       | chicago    | 15242              |
| `Hubway`      | boston     | 4000               |

If none of these appears, the city name is empty and Qtot is 0. The first
run of digits in the trips file name is the instance number. The command
writes its files to the current directory:

- `<city><number>_n<stations+1>_e<nb_scenarios>.txt`: the number of nodes
  (stations plus a depot), then Qtot, then the capacities preceded by `0`
  for the depot, then one line per trip:
  `origin destination start end scenario`, with stations numbered from 1.
- `targets_<city><number>.txt`: one target per line.

When `nb_scenarios` is 400, only the trip lines are written, to
`<city><number>_e400.txt`.

## Library use

```python
from bikescen.load import load_matlab_od, load_matlab_stations
from bikescen.scenario import ScenarioGenerator
from bikescen.output import write_trips_and_stations, write_targets

od = load_matlab_od("Divvy_trips_1.mat")
stations = load_matlab_stations("Divvy_stations.mat")

generator = ScenarioGenerator(seed=7)
scenarios = generator.generate(
    10, od.arrival_rates_od, stations.riding_times, stations.stations
)

write_trips_and_stations(scenarios, stations.stations, 15242, "chicago1_n100_e10.txt")
write_targets("targets_chicago1.txt", od.targets)
```

- `bikescen.load`: `load_matlab_od` returns an `ODData` with
  `arrival_rates_od` and `targets`; `load_matlab_stations` returns a
  `StationData` with `riding_times` and `stations` (the capacities). Both
  raise `LoadError` when a file cannot be opened or read.
- `bikescen.scenario.ScenarioGenerator.generate` returns one list of
  `bikescen.trip.Trip` objects per scenario. `set_seed` resets it.
- `bikescen.output`: `write_trips_and_stations`, `write_trips` and
  `write_targets` write the text formats described above.
- `bikescen.cli`: `city_for_path`, `instance_number` and `main`, the
  command itself.
- `bikescen.rng.RandomNumbers` is the seeded Park–Miller minimal-standard
  generator behind the sampling. The same seed gives the same sequence, so
  scenario sets can be reproduced exactly. It also draws uniform integers
  and normal, gamma and beta variates.

## Limits

- `.mat` files are read with `scipy.io.loadmat`, so MATLAB v7.3 (HDF5)
  files are not supported.
- The package only reads `.mat` files; it does not write them, and it does
  not solve the rebalancing problem. It only produces the instance files.
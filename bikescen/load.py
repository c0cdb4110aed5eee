"""Reading origin-destination rates and station data from MATLAB files."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import scipy.io


class LoadError(Exception):
    """Raised when a MATLAB file cannot be opened or read."""


@dataclass(eq=False)
class ODData:
    """Arrival rates indexed ``[period][origin][destination]`` and station targets."""

    arrival_rates_od: np.ndarray = field(
        default_factory=lambda: np.empty((0, 0, 0))
    )
    targets: np.ndarray = field(default_factory=lambda: np.empty(0))


@dataclass(eq=False)
class StationData:
    """Riding times between stations and station capacities."""

    riding_times: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    stations: np.ndarray = field(default_factory=lambda: np.empty(0))


def _read(filename: str, kind: str) -> dict:
    try:
        return scipy.io.loadmat(filename, mat_dtype=True)
    except FileNotFoundError as exc:
        raise LoadError(f"Error opening {kind} file: {filename}") from exc
    except (OSError, ValueError, TypeError, NotImplementedError) as exc:
        raise LoadError(f"Error reading {kind} file: {filename}: {exc}") from exc


def _variables(contents: dict):
    return ((name, value) for name, value in contents.items() if not name.startswith("__"))


def _leading_column(array: np.ndarray) -> np.ndarray:
    """The first ``shape[0]`` elements in column-major order, as doubles."""
    n = array.shape[0] if array.ndim else 0
    return np.asarray(array, dtype=float).ravel(order="F")[:n].copy()


def _is_double(array) -> bool:
    return isinstance(array, np.ndarray) and array.dtype == np.float64


def load_matlab_od(filename: str) -> ODData:
    """Load ``ArrivalRatesOD`` and ``InitialState00ofer`` from a trips file."""
    print(f"Loading .mat trips file:{filename}")
    contents = _read(filename, "trips")
    data = ODData()
    for name, value in _variables(contents):
        array = np.asarray(value)
        print(f"Variable name: {name}")
        print(f"  Class type: {array.dtype}")
        print(f"  Rank: {array.ndim}")
        print("  Dimensions: " + "".join(f"{d} " for d in array.shape))

        if name == "InitialState00ofer":
            data.targets = _leading_column(array)
        if name == "ArrivalRatesOD" and _is_double(array) and array.ndim == 3:
            data.arrival_rates_od = array.copy()
    return data


def load_matlab_stations(filename: str) -> StationData:
    """Load capacities ``C`` and the square ``RidingTime`` matrix from a stations file."""
    print(f"Loading .mat stations file:{filename}")
    contents = _read(filename, "stations")
    data = StationData()
    for name, value in _variables(contents):
        if not _is_double(value):
            continue
        if name == "C":
            data.stations = _leading_column(value)
        if name == "RidingTime":
            n = value.shape[0]
            flat = value.ravel(order="F")
            if flat.size < n * n:
                raise LoadError(
                    f"RidingTime in {filename} holds {flat.size} values, "
                    f"expected at least {n * n}"
                )
            data.riding_times = flat[: n * n].reshape((n, n), order="F").copy()
    return data
import numpy as np

from bikescen.scenario import END_PERIOD, START_PERIOD, ScenarioGenerator


def _rates(value=2.0, periods=48, n=2):
    return np.full((periods, n, n), value)


def _riding(n=2, value=0.5):
    r = np.full((n, n), value)
    np.fill_diagonal(r, 0.0)
    return r


def test_number_of_scenarios_and_scenario_index():
    gen = ScenarioGenerator(7)
    scenarios = gen.generate(3, _rates(), _riding(), [5.0, 6.0])
    assert len(scenarios) == 3
    for e, trips in enumerate(scenarios):
        assert trips
        assert all(trip.scenario == e for trip in trips)


def test_same_seed_gives_same_trips():
    a = ScenarioGenerator(11).generate(2, _rates(), _riding(), [1.0, 1.0])
    b = ScenarioGenerator(11).generate(2, _rates(), _riding(), [1.0, 1.0])
    assert a == b


def test_set_seed_resets_sequence():
    gen = ScenarioGenerator(5)
    first = gen.generate(1, _rates(), _riding(), [1.0, 1.0])
    gen.set_seed(5)
    second = gen.generate(1, _rates(), _riding(), [1.0, 1.0])
    assert first == second


def test_zero_rates_produce_no_trips():
    scenarios = ScenarioGenerator(3).generate(2, _rates(0.0), _riding(), [1.0, 1.0])
    assert scenarios == [[], []]


def test_durations_follow_riding_times():
    scenarios = ScenarioGenerator(9).generate(1, _rates(), _riding(value=0.5), [1.0, 1.0])
    for trip in scenarios[0]:
        duration = trip.end_time - trip.start_time
        if trip.origin == trip.destination:
            assert duration == 30
        else:
            assert duration == 15


def test_start_times_within_window():
    scenarios = ScenarioGenerator(13).generate(1, _rates(3.0), _riding(), [1.0, 1.0])
    upper = (END_PERIOD - START_PERIOD) * 30
    for trip in scenarios[0]:
        assert 1 <= trip.start_time <= upper
        assert 0 <= trip.origin < 2 and 0 <= trip.destination < 2


def test_zero_riding_time_off_diagonal_skipped():
    scenarios = ScenarioGenerator(21).generate(1, _rates(), _riding(value=0.0), [1.0, 1.0])
    assert scenarios[0]
    assert all(trip.origin == trip.destination for trip in scenarios[0])


def test_rates_outside_window_ignored():
    rates = np.zeros((48, 2, 2))
    rates[:START_PERIOD] = 5.0
    rates[END_PERIOD:] = 5.0
    scenarios = ScenarioGenerator(1).generate(1, rates, _riding(), [1.0, 1.0])
    assert scenarios == [[]]


def test_only_stations_covered_by_capacities():
    scenarios = ScenarioGenerator(2).generate(1, _rates(n=3), _riding(n=3), [1.0, 1.0])
    assert all(trip.origin < 2 and trip.destination < 2 for trip in scenarios[0])
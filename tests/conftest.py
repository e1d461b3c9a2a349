"""
Pytest configuration and shared fixtures for wperf analyzer tests.
"""
import json
import pytest


def make_counter(name, note, value=100, idx="0x08", **extra):
    """Helper to create one Performance_counter entry."""
    counter = {
        "counter_value": value,
        "event_idx": idx,
        "event_name": name,
        "event_note": note,
    }
    counter.update(extra)
    return counter


def make_snapshot(cores, time_elapsed=None, telemetry=None):
    """
    Helper to create a count-shape document.

    Args:
        cores: Dict mapping core number -> list of counter dicts
        time_elapsed: Optional elapsed seconds
        telemetry: Optional list of telemetry metric dicts
    """
    core = {
        "kernel_mode": False,
        "multiplexing": False,
        "overall": {},
        "cores": [
            {"core_number": number, "Performance_counter": counters}
            for number, counters in cores.items()
        ],
    }
    if telemetry is not None:
        core["ts_metric"] = {"telemetry_solution_metrics": telemetry}
    snapshot = {
        "core": core,
        "dsu": {"l3metric": {}, "overall": {}},
        "dmc": {"pmu": {}, "ddr": {}},
    }
    if time_elapsed is not None:
        snapshot["time_elapsed"] = time_elapsed
    return snapshot


def make_metric(name, unit, value="1.5", core="0", product="neoverse-n1"):
    """Helper to create one telemetry_solution_metrics entry."""
    return {
        "core": core,
        "metric_name": name,
        "product_name": product,
        "unit": unit,
        "value": value,
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON-serializable object to a file and return its path."""
    counter = {"n": 0}

    def _write(data, name=None):
        counter["n"] += 1
        file_path = tmp_path / (name or f"wperf_{counter['n']}.json")
        with open(file_path, "w") as f:
            json.dump(data, f)
        return str(file_path)

    return _write


@pytest.fixture
def count_file(write_json):
    """Count file with one core and two counters in different groups."""
    return write_json(make_snapshot({
        0: [
            make_counter("INST_RETIRED", "group-A", value=1000, idx="0x08"),
            make_counter("CYCLES", "group-B", value=2500, idx="0x11"),
        ]
    }), "count.json")


@pytest.fixture
def timeline_file(write_json):
    """Timeline file with two snapshots of 1.5 s and 2.5 s."""
    return write_json({"timeline": [
        make_snapshot({0: [make_counter("CYCLES", "group-A", value=10)]}, time_elapsed=1.5),
        make_snapshot({0: [make_counter("CYCLES", "group-A", value=20)]}, time_elapsed=2.5),
    ]}, "timeline.json")


@pytest.fixture
def telemetry_count_file(write_json):
    """Count file carrying telemetry metrics with preset and non-preset units."""
    return write_json(make_snapshot(
        {0: [make_counter("CYCLES", "group-A")]},
        telemetry=[
            make_metric("l1d_cache_mpki", "MPKI", value="12.5", core="0"),
            make_metric("ipc", "per cycle", value="1.25", core="1"),
            make_metric("odd_metric", "widgets", value="3", core="1"),
        ],
    ), "telemetry.json")

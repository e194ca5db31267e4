"""Tests for recording planet observations."""

from __future__ import annotations

import csv

import numpy as np
import pytest

from src.daisyworld import DataRecorder, Planet


def test_poll_records_on_the_interval_only():
    planet = Planet(0.5, 0.5, 1.0)
    recorder = DataRecorder(planet, repeat=10)

    assert recorder.poll()
    assert not recorder.poll()  # same update count
    for _ in range(25):
        planet.update()
        recorder.poll()

    assert len(recorder) == 3
    assert [row["t"] for row in recorder.rows] == pytest.approx([0.0, 0.1, 0.2])


def test_flat_rows_have_the_standard_columns():
    planet = Planet(0.2, 0.3, 0.9)
    recorder = DataRecorder(planet)
    row = recorder.record()

    assert list(row) == ["t", "L", "a_w", "a_b", "a_g", "temp"]
    assert row["L"] == 0.9
    assert row["a_w"] == 0.2
    assert row["a_b"] == 0.3
    assert row["a_g"] == 0.0
    assert row["temp"] == pytest.approx(planet.get_global_temperature())


def test_round_rows_add_latitude_statistics():
    planet = Planet(0.2, 0.0, 1.0, round_world=True)
    row = DataRecorder(planet).record()

    assert row["min_band_w"] == 0.0
    assert row["max_band_w"] == 89.0
    assert row["mean_band_w"] == pytest.approx(44.5)
    assert np.isnan(row["mean_band_b"])
    assert row["max_band_b"] == -1.0


def test_recording_does_not_change_the_planet():
    planet = Planet(0.3, 0.3, 1.0, round_world=True)
    before = planet.latitude.proportions.copy()
    DataRecorder(planet).record()
    assert np.array_equal(planet.latitude.proportions, before)
    assert planet.update_count == 0


def test_dataset_fills_columns_missing_from_flat_rows():
    planet = Planet(0.3, 0.3, 1.0)
    recorder = DataRecorder(planet)
    recorder.record()
    planet.set_round_world(True)
    planet.update()
    recorder.record()

    dataset = recorder.to_dataset()
    assert dataset.sizes["sample"] == 2
    assert np.isnan(dataset["min_band_w"].values[0])
    assert dataset["min_band_w"].values[1] == 0.0
    assert dataset["temp"].attrs["units"] == "degC"
    assert dataset["a_b"].attrs["units"] == "fraction"
    assert dataset["t"].values.tolist() == pytest.approx([0.0, 0.01])


def test_to_csv_writes_a_table(tmp_path, capsys):
    planet = Planet(0.5, 0.5, 1.0)
    recorder = DataRecorder(planet, repeat=5)
    recorder.poll()
    for _ in range(10):
        planet.update()
        recorder.poll()

    path = tmp_path / "run.csv"
    recorder.to_csv(str(path))

    with path.open(newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert list(rows[0]) == ["t", "L", "a_w", "a_b", "a_g", "temp"]
    assert len(rows) == 3
    assert float(rows[-1]["t"]) == pytest.approx(0.1)
    assert "saved to" in capsys.readouterr().out


def test_clear_drops_rows():
    recorder = DataRecorder(Planet())
    recorder.record()
    recorder.clear()
    assert len(recorder) == 0
    assert recorder.poll()


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        DataRecorder(Planet(), repeat=0)

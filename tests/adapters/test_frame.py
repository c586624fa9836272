# tests/adapters/test_frame.py

import math

import pandas as pd

from chartflow.adapters.frame import config_from_frame, server_data_from_frame


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {"revenue": [10.5, 20.0, math.nan], "units": [1, 2, 3]},
        index=["jan", "feb", "mar"],
    )


def test_server_data_from_frame_shape():
    payload = server_data_from_frame(_frame(), name="monthly")
    assert payload["chart"] == {"name": "monthly", "labels": ["jan", "feb", "mar"], "extra": None}
    assert [ds["name"] for ds in payload["datasets"]] == ["revenue", "units"]
    assert [ds["id"] for ds in payload["datasets"]] == [0, 1]


def test_values_are_plain_python_and_nan_is_none():
    payload = server_data_from_frame(_frame())
    revenue, units = payload["datasets"]
    assert revenue["values"] == [10.5, 20.0, None]
    assert units["values"] == [1, 2, 3]
    assert all(type(v) is int for v in units["values"])


def test_datetime_index_becomes_iso_labels():
    frame = pd.DataFrame({"v": [1, 2]}, index=pd.to_datetime(["2024-01-01", "2024-02-01"]))
    labels = server_data_from_frame(frame)["chart"]["labels"]
    assert labels == ["2024-01-01T00:00:00", "2024-02-01T00:00:00"]


def test_config_from_frame():
    out = config_from_frame(_frame(), chart_type="line")
    assert out["type"] == "line"
    assert out["data"]["labels"] == ["jan", "feb", "mar"]
    assert out["data"]["datasets"][1] == {"label": "units", "data": [1, 2, 3]}


def test_frame_is_not_mutated():
    frame = _frame()
    before = frame.copy()
    config_from_frame(frame)
    pd.testing.assert_frame_equal(frame, before)


def test_duplicate_column_labels_become_separate_datasets():
    frame = pd.DataFrame([[1, 2], [3, 4]], columns=["a", "a"])
    out = config_from_frame(frame)
    assert out["data"]["datasets"] == [
        {"label": "a", "data": [1, 3]},
        {"label": "a", "data": [2, 4]},
    ]

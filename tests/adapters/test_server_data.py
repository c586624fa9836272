# tests/adapters/test_server_data.py
"""
Testes do adapter de server data → configuração base.

Invariantes:
    - Cada dataset vira `{"label", "data", **extra}`
    - `chart.extra` é mesclado sobre a configuração (deep-merge)
    - O payload de entrada não é mutado
"""

import copy

import pytest

from chartflow.adapters.server_data import config_from_server_data
from chartflow.core.config.errors import ConfigRootTypeError
from chartflow.core.hooks.chain import HookChain


@pytest.fixture
def server_payload() -> dict:
    return {
        "chart": {
            "name": "sales",
            "labels": ["Q1", "Q2"],
            "extra": {"options": {"title": {"text": "Sales"}}},
        },
        "datasets": [
            {"id": 0, "name": "2023", "values": [1, 2], "extra": {"fill": False}},
            {"id": 1, "name": "2024", "values": [3, 4], "extra": None},
        ],
    }


def test_config_shape(server_payload):
    out = config_from_server_data(server_payload)
    assert out == {
        "type": "bar",
        "data": {
            "labels": ["Q1", "Q2"],
            "datasets": [
                {"label": "2023", "data": [1, 2], "fill": False},
                {"label": "2024", "data": [3, 4]},
            ],
        },
        "options": {"title": {"text": "Sales"}},
    }


def test_chart_type_is_configurable(server_payload):
    assert config_from_server_data(server_payload, chart_type="line")["type"] == "line"


def test_payload_is_not_mutated(server_payload):
    before = copy.deepcopy(server_payload)
    out = config_from_server_data(server_payload)
    out["data"]["datasets"][0]["data"].append(99)
    assert server_payload == before


def test_missing_blocks_produce_empty_config():
    out = config_from_server_data({})
    assert out == {"type": "bar", "data": {"labels": [], "datasets": []}, "options": {}}


def test_non_mapping_payload_raises():
    with pytest.raises(ConfigRootTypeError):
        config_from_server_data([1, 2, 3])


def test_server_data_feeds_a_hook_chain(server_payload):
    out = HookChain().title().datasets(["line"]).colors(["red"]).apply(config_from_server_data(server_payload))
    assert out["options"]["title"] == {"text": "Sales", "display": True}
    assert out["data"]["datasets"][0] == {
        "label": "2023", "data": [1, 2], "fill": False,
        "type": "line", "borderColor": "red", "backgroundColor": "red",
    }

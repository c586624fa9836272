# tests/core/hooks/test_apply_pipeline.py
"""
Testes da aplicação da HookChain (`apply`).

Os testes asseguram que:
- uma cadeia vazia devolve uma configuração igual à base, mas distinta
- hooks executam em ordem de registro e observam a saída dos anteriores
- `apply` não consome a cadeia e pode ser repetido sobre outra base
- a configuração base do chamador nunca é mutada
- hooks que retornam algo que não é mapeamento falham explicitamente
"""

import copy

import pytest

from chartflow.core.config.errors import ConfigRootTypeError
from chartflow.core.hooks.chain import HookChain
from chartflow.core.hooks.errors import HookReturnTypeError


def test_empty_chain_returns_deep_equal_copy(base_config):
    out = HookChain().apply(base_config)
    assert out == base_config
    assert out is not base_config
    assert out["data"]["datasets"][0] is not base_config["data"]["datasets"][0]


def test_hooks_run_in_registration_order():
    seen = []

    def _record(tag):
        def _hook(config):
            seen.append(tag)
            return {**config, "trail": config.get("trail", []) + [tag]}
        return _hook

    out = HookChain().custom(_record("a")).custom(_record("b")).custom(_record("c")).apply({})
    assert seen == ["a", "b", "c"]
    assert out["trail"] == ["a", "b", "c"]


def test_later_hooks_observe_earlier_output():
    def _count_datasets(config):
        return {**config, "count": len(config["data"]["datasets"])}

    def _add_dataset(config):
        data = config["data"]
        return {**config, "data": {**data, "datasets": data["datasets"] + [{}]}}

    out = HookChain().custom(_add_dataset).custom(_count_datasets).apply({"data": {"datasets": []}})
    assert out["count"] == 1


def test_apply_does_not_clear_the_chain(base_config, five_dataset_config):
    chain = HookChain().datasets(["line", "bar"]).colors(["x"])
    first = chain.apply(base_config)
    second = chain.apply(five_dataset_config)
    assert len(chain) == 2
    assert len(first["data"]["datasets"]) == 3
    assert len(second["data"]["datasets"]) == 5
    assert chain.apply(base_config) == first


def test_apply_never_mutates_base(base_config):
    before = copy.deepcopy(base_config)

    def _mutating(config):
        config["options"]["mutated"] = True
        config["data"]["datasets"].append({"label": "extra"})
        return config

    out = (
        HookChain()
        .custom(_mutating)
        .colors()
        .datasets("line")
        .title("Revenue")
        .minimalist()
        .padding()
        .begin_at_zero()
        .responsive()
        .apply(base_config)
    )
    assert base_config == before
    assert out["options"]["mutated"] is True
    assert len(out["data"]["datasets"]) == 4


def test_full_chain_builds_expected_config(base_config):
    out = (
        HookChain()
        .title("Revenue")
        .datasets(["line", {"type": "bar", "fill": False}])
        .colors(["#111", "#222"])
        .legend({"position": "bottom"})
        .padding({"top": 8})
        .begin_at_zero()
        .responsive(False)
        .apply(base_config)
    )
    assert out["type"] == "bar"
    assert [ds["type"] for ds in out["data"]["datasets"]] == ["line", "bar", "line"]
    assert [ds["backgroundColor"] for ds in out["data"]["datasets"]] == ["#111", "#222", "#111"]
    assert out["options"] == {
        "title": {"text": "Revenue", "display": True},
        "legend": {"position": "bottom"},
        "layout": {"padding": {"top": 8}},
        "scales": {"yAxes": [{"ticks": {"beginAtZero": True}}]},
        "maintainAspectRatio": False,
    }


def test_hook_returning_non_mapping_raises():
    chain = HookChain().title("x").custom(lambda config: None, name="broken")
    with pytest.raises(HookReturnTypeError) as excinfo:
        chain.apply({})
    assert "broken" in str(excinfo.value)
    assert "1" in str(excinfo.value)


def test_non_mapping_base_raises():
    with pytest.raises(ConfigRootTypeError):
        HookChain().apply(["not", "a", "config"])

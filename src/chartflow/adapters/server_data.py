# src/chartflow/adapters/server_data.py
"""
Adapter de "server data" para configuração base de gráfico.

Converte o payload produzido por um backend de gráficos (formato
Chartisan) em uma configuração base pronta para receber uma `HookChain`.

Formato de entrada:
    {
        "chart": {"name": str, "labels": [...], "extra": {...} | None},
        "datasets": [
            {"id": int, "name": str, "values": [...], "extra": {...} | None},
        ],
    }

Formato de saída:
    {
        "type": chart_type,
        "data": {
            "labels": [...],
            "datasets": [{"label": name, "data": values, **extra}],
        },
        "options": {},
    }
    com `chart.extra` mesclado (deep_merge) sobre a configuração.

Limites explícitos:
    - Não busca dados via rede
    - Não aplica hooks
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Mapping

from ..core.config.errors import ConfigRootTypeError
from ..core.config.merge import deep_merge
from ..core.hooks.palette import DEFAULT_GENERAL_TYPE
from ..core.hooks.types import Configuration


def _dataset_entry(dataset: Mapping[str, Any]) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "label": dataset.get("name", ""),
        "data": list(dataset.get("values") or []),
    }
    extra = dataset.get("extra")
    if isinstance(extra, Mapping):
        entry.update(deepcopy(dict(extra)))
    return entry


def config_from_server_data(
    payload: Mapping[str, Any],
    chart_type: str = DEFAULT_GENERAL_TYPE,
) -> Configuration:
    """
    Constrói a configuração base a partir de um payload de server data.

    Args:
        payload: Payload com blocos `chart` e `datasets`.
        chart_type: Tipo geral do gráfico (ex.: 'bar', 'line').

    Returns:
        Configuration: Configuração base nova (o payload não é mutado).

    Raises:
        ConfigRootTypeError: Se o payload não for um mapeamento.
    """
    if not isinstance(payload, Mapping):
        raise ConfigRootTypeError(
            f"Server data deve ser um mapeamento, recebido: {type(payload).__name__}"
        )

    chart = payload.get("chart") or {}
    datasets: List[Dict[str, Any]] = [
        _dataset_entry(ds) for ds in (payload.get("datasets") or []) if isinstance(ds, Mapping)
    ]

    config: Configuration = {
        "type": chart_type,
        "data": {
            "labels": list(chart.get("labels") or []),
            "datasets": datasets,
        },
        "options": {},
    }

    extra = chart.get("extra")
    if isinstance(extra, Mapping):
        config = deep_merge(config, extra)

    return config

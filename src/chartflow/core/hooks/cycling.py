# src/chartflow/core/hooks/cycling.py
"""
Helpers de ciclo por índice sobre a sequência de datasets.

Hooks por dataset (colors, datasets) não podem depender do deep-merge,
pois listas são atômicas. Eles reconstroem `data.datasets`
posicionalmente a partir da configuração corrente, preservando o
tamanho e a ordem da sequência.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from .types import Configuration

T = TypeVar("T")


def cycle(items: Sequence[T], index: int) -> T:
    """Retorna `items[index % len(items)]`."""
    return items[index % len(items)]


def get_datasets(config: Mapping[str, Any]) -> Optional[List[Any]]:
    """
    Retorna a sequência `data.datasets` da configuração, ou None.

    None indica ausência da sequência (sem bloco `data`, `data` não é um
    mapeamento, ou `datasets` ausente/não sequencial).
    """
    data = config.get("data")
    if not isinstance(data, Mapping):
        return None
    datasets = data.get("datasets")
    if not isinstance(datasets, (list, tuple)):
        return None
    return list(datasets)


def map_datasets(
    config: Configuration,
    fn: Callable[[Dict[str, Any], int], Dict[str, Any]],
) -> Configuration:
    """
    Reconstrói `data.datasets` aplicando `fn(dataset, index)` a cada entrada.

    Retorna uma nova configuração (cópia rasa nos níveis tocados). Se a
    sequência de datasets não existir, retorna a configuração sem mudança.
    Entradas que não são mapeamentos (None, listas, escalares) são mantidas
    na posição, sem chamar `fn`; o índice das demais não muda.
    """
    datasets = get_datasets(config)
    if datasets is None:
        return config

    rebuilt = [
        fn(dict(dataset), index) if isinstance(dataset, Mapping) else dataset
        for index, dataset in enumerate(datasets)
    ]

    result = dict(config)
    result["data"] = {**config["data"], "datasets": rebuilt}
    return result


def non_mapping_positions(config: Mapping[str, Any]) -> List[int]:
    """Posições de `data.datasets` que não são mapeamentos (ignoradas por `map_datasets`)."""
    datasets = get_datasets(config) or []
    return [index for index, dataset in enumerate(datasets) if not isinstance(dataset, Mapping)]

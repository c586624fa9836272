# src/chartflow/adapters/frame.py
"""
Adapter pandas → configuração base de gráfico.

Mapeamento:
    - índice do DataFrame   → `chart.labels`
    - cada coluna           → um dataset (nome da coluna → `name`)
    - valores               → escalares Python puros (NaN → None)

O DataFrame de entrada nunca é mutado.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from ..core.hooks.palette import DEFAULT_GENERAL_TYPE
from ..core.hooks.types import Configuration
from .server_data import config_from_server_data


def _to_python(value: Any) -> Any:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # valores não escalares (listas, dicts) não passam por isna
        return value
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    if hasattr(value, "item"):
        return value.item()
    return value


def server_data_from_frame(frame: pd.DataFrame, name: Optional[str] = None) -> Dict[str, Any]:
    """
    Converte um DataFrame em payload de server data.

    Raises:
        TypeError: Se `frame` não for um `pd.DataFrame`.
    """
    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"Esperado pd.DataFrame, recebido: {type(frame).__name__}")

    labels: List[Any] = [_to_python(lbl) for lbl in frame.index]

    datasets = []
    # por posição: rótulos de coluna podem se repetir
    for position, (column, series) in enumerate(frame.items()):
        values = [_to_python(v) for v in series.tolist()]
        datasets.append({"id": position, "name": str(column), "values": values, "extra": None})

    return {
        "chart": {"name": name or "", "labels": labels, "extra": None},
        "datasets": datasets,
    }


def config_from_frame(
    frame: pd.DataFrame,
    chart_type: str = DEFAULT_GENERAL_TYPE,
    name: Optional[str] = None,
) -> Configuration:
    """Atalho: `config_from_server_data(server_data_from_frame(frame))`."""
    return config_from_server_data(server_data_from_frame(frame, name=name), chart_type=chart_type)

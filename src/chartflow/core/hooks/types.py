# src/chartflow/core/hooks/types.py
"""
Tipos canônicos da camada de hooks do chartflow.

Componentes principais:
    - Configuration → alias para o mapeamento aninhado do renderizador
    - DatasetHook   → fragmento de estilo/tipo aplicado a um dataset
    - Hook          → transformação pura e imutável registrada na cadeia

Invariantes:
    - Hook é imutável (frozen) e não conhece a cadeia que o contém
    - O schema do renderizador é tratado como opaco
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, TypedDict


Configuration = Dict[str, Any]
HookFn = Callable[[Configuration], Configuration]


class DatasetHook(TypedDict, total=False):
    """Fragmento aplicado a um dataset; `type` é o tipo do gráfico (ex.: 'line')."""

    type: str
    label: str
    fill: bool
    borderColor: str
    backgroundColor: str
    borderWidth: int


@dataclass(frozen=True)
class Hook:
    """
    Transformação pura registrada em uma `HookChain`.

    Campos:
        - name: preocupação que registrou o hook (ex.: 'colors', 'legend')
        - fn: função Configuration → Configuration
        - per_dataset: True quando o hook só atua sobre `data.datasets`
          e é um no-op na ausência da sequência de datasets

    Decisões arquiteturais:
        - O hook fecha sobre uma cópia normalizada do argumento de registro
        - O hook nunca observa nem muta a cadeia
    """

    name: str
    fn: HookFn
    per_dataset: bool = False

    def __call__(self, config: Configuration) -> Configuration:
        return self.fn(config)

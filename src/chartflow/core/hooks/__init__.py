"""
# Hooks Core — chartflow

Este pacote define a `HookChain` e as estruturas que a sustentam.

## Componentes

- **types**: `Hook`, `DatasetHook`, `Configuration`
- **chain**: `HookChain` (registro fluente + `apply`)
- **cycling**: ciclo por índice sobre `data.datasets`
- **palette**: `COLOR_PALETTE` e constantes padrão
- **context**: `BuildContext` (eventos e warnings estruturados)
- **errors**: exceções de registro e aplicação de hooks

## Invariantes

- Hooks executam na ordem de registro
- Hooks são puros e não conhecem a cadeia
- Listas são atômicas no merge
"""

from .chain import HookChain
from .context import BuildContext
from .cycling import cycle, get_datasets, map_datasets
from .errors import (
    EmptyCycleError,
    HookArgumentError,
    HookError,
    HookReturnTypeError,
    InvalidHookError,
)
from .palette import COLOR_PALETTE
from .types import Configuration, DatasetHook, Hook

__all__ = [
    "HookChain",
    "BuildContext",
    "cycle",
    "get_datasets",
    "map_datasets",
    "EmptyCycleError",
    "HookArgumentError",
    "HookError",
    "HookReturnTypeError",
    "InvalidHookError",
    "COLOR_PALETTE",
    "Configuration",
    "DatasetHook",
    "Hook",
]

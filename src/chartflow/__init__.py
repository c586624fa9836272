# src/chartflow/__init__.py
"""
chartflow — builder declarativo de configurações de gráfico.

Um chamador monta uma sequência ordenada de hooks (cores, legenda,
eixos, padding, tipo/estilo por dataset, título, begin-at-zero,
responsividade) e a aplica sobre uma configuração base.

Arquitetura em alto nível:
    - core.config → deep-merge, loader YAML/JSON e hashing
    - core.hooks  → HookChain e BuildContext
    - adapters    → server data / pandas → configuração base
    - notebook_ui → resumo legível de uma configuração

Limites explícitos:
    - Não valida se a configuração é renderizável
    - Não desenha nem persiste gráficos
"""

from .core.config import deep_merge, load_base_config, compute_config_hash
from .core.hooks import BuildContext, COLOR_PALETTE, Hook, HookChain

__all__ = [
    "deep_merge",
    "load_base_config",
    "compute_config_hash",
    "BuildContext",
    "COLOR_PALETTE",
    "Hook",
    "HookChain",
]

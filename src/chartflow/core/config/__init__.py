# src/chartflow/core/config/__init__.py

"""
Camada de configuração do chartflow.

Este pacote contém os utilitários responsáveis por mesclar, carregar e
identificar configurações de gráfico.

Responsabilidades do pacote:
    - Deep-merge determinístico de fragmentos (`deep_merge`)
    - Carregamento e validação de configuração base a partir de YAML/JSON
    - Geração de hash canônico para rastreabilidade

Invariantes:
    - A configuração é sempre um dicionário puro (dict)
    - Listas são atômicas durante o merge
    - Nenhum input é mutado

Limites explícitos:
    - Não valida o schema do renderizador
    - Hooks só são aplicados quando passados a `load_base_config`
"""

from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigRootTypeError,
    InvalidChartConfigError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_base_config, validate_chart_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigRootTypeError",
    "InvalidChartConfigError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_base_config",
    "validate_chart_config",
    "deep_merge",
]

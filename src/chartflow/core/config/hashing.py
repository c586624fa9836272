# src/chartflow/core/config/hashing.py
"""
Hashing canônico de configuração de gráfico.

Este módulo implementa a geração de hash determinístico de uma
configuração construída pelo chartflow. O hash representa a
**identidade estrutural** da configuração e é registrado no
`BuildContext` ao final de cada `apply`.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Chaves são comparadas como texto: `{1: "a"}` e `{"1": "a"}` têm o
      mesmo hash, como teriam após serialização JSON
    - Valores opacos (callbacks, objetos) entram via `str`; se a
      representação incluir endereço de memória, o hash só é estável
      dentro do mesmo processo
    - Não persiste o hash
    - Não valida o schema do renderizador
"""


import json
import hashlib
from typing import Any, Dict, Mapping


def _normalize_keys(value: Any) -> Any:
    # JSON só tem chaves string; sort_keys falha com int e str misturados
    if isinstance(value, Mapping):
        return {str(k): _normalize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_keys(v) for v in value]
    return value


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de uma configuração de gráfico.

    Política de hashing (v1):
        - Chaves de mapeamentos normalizadas via `str`, em todos os níveis
        - Serialização JSON canônica
        - Ordenação estável de chaves
        - Separadores compactos (sem espaços supérfluos)
        - Codificação UTF-8
        - Algoritmo SHA-256
        - Valores não serializáveis em JSON são convertidos via `str`
          (ex.: callbacks ou objetos opacos do renderizador)

    Args:
        config (Dict[str, Any]): Configuração de gráfico.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        _normalize_keys(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()

# src/chartflow/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração de gráfico.

Este módulo implementa a política oficial de merge utilizada pelos hooks
do chartflow para aplicar um fragmento parcial de configuração sobre a
configuração corrente, sem destruir fragmentos contribuídos por hooks
anteriores.

Política de merge (v1):
    - dict + dict       → merge recursivo por chave
    - list              → sobrescrita total (sem merge elemento a elemento)
    - escalar           → sobrescrita direta
    - conflito de tipos → o valor do fragmento substitui o valor base

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Listas são atômicas: hooks que precisam alterar o elemento i
      preservando os demais (colors, datasets) reconstroem a lista
      a partir da configuração corrente

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves ausentes no fragmento são preservadas
    - Em conflito na mesma folha, o fragmento vence (last-write-wins)

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida o schema do renderizador
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict, Mapping

from .errors import ConfigRootTypeError


def deep_merge(base: Mapping[str, Any], fragment: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico de um fragmento sobre uma configuração.

    Esta função combina a configuração corrente com um fragmento parcial,
    produzindo uma nova estrutura resultante sem mutar nenhum dos inputs.

    Política de merge (v1):
        - mapping + mapping → merge recursivo por chave (união de chaves)
        - list              → sobrescrita total pelo fragmento
        - escalar           → sobrescrita direta pelo fragmento
        - tipos distintos   → sobrescrita direta pelo fragmento

    Invariantes:
        - A estrutura retornada é sempre um novo dicionário
        - Chaves não presentes no fragmento são preservadas da base
        - O resultado não compartilha estruturas mutáveis com os inputs

    Args:
        base (Mapping[str, Any]): Configuração corrente.
        fragment (Mapping[str, Any]): Fragmento parcial produzido por um hook.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigRootTypeError: Se base ou fragmento não forem mapeamentos.
    """

    if not isinstance(base, Mapping) or not isinstance(fragment, Mapping):
        raise ConfigRootTypeError(
            f"Deep-merge requer mapeamentos no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(fragment).__name__}"
        )

    result: Dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}

    for key, fragment_value in fragment.items():
        base_value = result.get(key)

        # mapping -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(fragment_value, Mapping):
            result[key] = deep_merge(base_value, fragment_value)
            continue

        # list, escalar ou conflito de tipo -> sobrescrita total
        result[key] = deepcopy(fragment_value)

    return result

# src/chartflow/core/config/loader.py
"""
Loader de configuração base de gráfico.

Este módulo lê a configuração base de um gráfico a partir de arquivos,
verifica que ela tem a forma esperada pelos hooks e, opcionalmente,
aplica uma `HookChain` sobre o resultado.

Fluxo:
    arquivo base  ─┐
                   ├─ deep_merge ─ validate_chart_config ─ [hooks.apply] ─ Configuration
    arquivo local ─┘   (opcional)

Forma validada (blocos ausentes são aceitos):
    - `type`          → string
    - `data`          → mapeamento
    - `data.datasets` → lista de mapeamentos (hooks por dataset dependem disso)
    - `options`       → mapeamento

Limites explícitos:
    - Não valida chaves internas de `options` (schema do renderizador)
    - Não persiste configuração
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigNotFoundError,
    InvalidChartConfigError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

if TYPE_CHECKING:
    from ..hooks.chain import HookChain
    from ..hooks.context import BuildContext


def _parse_json(text: str) -> Any:
    return json.loads(text) if text.strip() else None


_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": _parse_json,
}


def _read_chart_document(path: Path) -> Dict[str, Any]:
    """
    Lê um documento de configuração de gráfico (YAML ou JSON).

    Documentos vazios valem como `{}`; o parser é escolhido pela extensão.

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for .yaml/.yml/.json.
        InvalidConfigRootTypeError: Se a raiz do documento não for um dicionário.
    """
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(
            f"Formato de configuração de gráfico não suportado: '{path.suffix}' ({path})"
        )
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuração de gráfico não encontrada: {path}")

    document = parser(path.read_text(encoding="utf-8"))
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise InvalidConfigRootTypeError(
            f"{path}: a configuração de gráfico deve ser um mapa, recebido: "
            f"{type(document).__name__}"
        )
    return document


def validate_chart_config(config: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Verifica a forma mínima de uma configuração de gráfico.

    Decisões arquiteturais:
        - Blocos ausentes são válidos; hooks por dataset viram no-op
        - Blocos presentes com tipo errado são erro fatal, antes de
          qualquer hook rodar

    Returns:
        Mapping[str, Any]: A própria configuração, sem cópia.

    Raises:
        InvalidChartConfigError: Com `path` apontando a chave inválida.
    """
    chart_type = config.get("type")
    if chart_type is not None and not isinstance(chart_type, str):
        raise InvalidChartConfigError(
            f"'type' deve ser string, recebido: {type(chart_type).__name__}", path="type"
        )

    options = config.get("options")
    if options is not None and not isinstance(options, Mapping):
        raise InvalidChartConfigError(
            f"'options' deve ser um mapa, recebido: {type(options).__name__}", path="options"
        )

    data = config.get("data")
    if data is None:
        return config
    if not isinstance(data, Mapping):
        raise InvalidChartConfigError(
            f"'data' deve ser um mapa, recebido: {type(data).__name__}", path="data"
        )

    datasets = data.get("datasets")
    if datasets is None:
        return config
    if not isinstance(datasets, list):
        raise InvalidChartConfigError(
            f"'data.datasets' deve ser uma lista, recebido: {type(datasets).__name__}",
            path="data.datasets",
        )
    for index, dataset in enumerate(datasets):
        if not isinstance(dataset, Mapping):
            raise InvalidChartConfigError(
                f"'data.datasets[{index}]' deve ser um mapa, recebido: {type(dataset).__name__}",
                path=f"data.datasets[{index}]",
            )
    return config


def load_base_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    hooks: Optional["HookChain"] = None,
    ctx: Optional["BuildContext"] = None,
) -> Dict[str, Any]:
    """
    Carrega a configuração base de um gráfico e, opcionalmente, aplica hooks.

    Política de resolução:
        - O arquivo base é obrigatório
        - O arquivo local é opcional; se o caminho não existir, é ignorado
        - O local é mesclado sobre a base via `deep_merge` (listas, como
          `data.datasets` ou `options.scales.yAxes`, são substituídas)
        - A forma do resultado é validada antes dos hooks
        - Com `hooks`, retorna `hooks.apply(config, ctx=ctx)`

    Args:
        defaults_path (str): Arquivo de configuração base.
        local_path (Optional[str]): Arquivo opcional de overrides locais.
        hooks (Optional[HookChain]): Cadeia aplicada após a resolução.
        ctx (Optional[BuildContext]): Contexto repassado a `hooks.apply`.

    Returns:
        Dict[str, Any]: Configuração resolvida (e construída, com hooks).

    Raises:
        ConfigNotFoundError: Se o arquivo base não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se a raiz de um arquivo não for um mapa.
        InvalidChartConfigError: Se a configuração resolvida tiver forma inválida.
    """
    config = _read_chart_document(Path(defaults_path))

    if local_path is not None and Path(local_path).exists():
        config = deep_merge(config, _read_chart_document(Path(local_path)))

    validate_chart_config(config)

    if hooks is not None:
        return hooks.apply(config, ctx=ctx)
    return config

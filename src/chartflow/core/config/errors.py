# src/chartflow/core/config/errors.py
"""
Exceções canônicas da camada de configuração do chartflow.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de configurações base de gráfico e durante o deep-merge
de fragmentos.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de hook ou de renderização

Limites explícitos:
    - Não valida se a configuração é renderizável
    - Não realiza fallback ou recovery
"""

from ..exceptions import ChartflowError


class ConfigError(ChartflowError):
    """
    Exceção base para erros relacionados à configuração de gráfico.

    Todas as exceções levantadas durante carregamento e merge de
    configuração devem herdar desta classe.
    """


class ConfigNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base não é
    encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo base é obrigatório
        - O arquivo local de override é opcional e nunca gera este erro

    Limites explícitos:
        - Não tenta inferir ou criar uma configuração base automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de
    configuração não é um dicionário (`dict`).

    Listas ou valores escalares no root são inválidos: uma configuração
    de gráfico é sempre um mapa chave-valor.
    """


class ConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o deep-merge recebe uma raiz que não é
    um mapeamento.

    Exemplo:
        - base:     {"options": {}}
        - fragment: ["legend"]

    Invariantes:
        - Nenhum merge parcial é produzido

    Limites explícitos:
        - Conflitos de tipo em níveis internos NÃO geram este erro;
          o valor do fragmento substitui o valor base
    """


class InvalidChartConfigError(ConfigError):
    """
    Exceção levantada quando a configuração carregada não tem a forma
    mínima de uma configuração de gráfico.

    Forma exigida (quando os blocos estão presentes):
        - `type`: string
        - `data`: mapeamento
        - `data.datasets`: lista de mapeamentos
        - `options`: mapeamento

    O atributo `path` indica o caminho da chave inválida
    (ex.: 'data.datasets[2]').
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path

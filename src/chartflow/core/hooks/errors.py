# src/chartflow/core/hooks/errors.py
"""
Exceções canônicas da camada de hooks do chartflow.

Argumentos malformados para os quais existe coerção inequívoca
(string → título, booleano → display) são normalizados e nunca geram
erro. Demais valores são propagados como estão para o fragmento, e a
validação fica a cargo do renderizador externo.

As exceções abaixo cobrem apenas os casos em que a própria `HookChain`
não consegue operar:
    - listas de ciclo vazias (modulo por zero)
    - hooks customizados que não são chamáveis
    - hooks que retornam algo que não é uma configuração
"""

from ..exceptions import ChartflowError


class HookError(ChartflowError):
    """Exceção base para erros de registro ou aplicação de hooks."""


class HookArgumentError(HookError, ValueError):
    """
    Argumento inválido detectado no momento do registro do hook.

    Decisões arquiteturais:
        - A validação é síncrona, no registro
        - Nada é adicionado à cadeia quando o argumento é rejeitado
    """


class EmptyCycleError(HookArgumentError):
    """Paleta de cores ou lista de tipos vazia: ciclo por índice indefinido."""


class InvalidHookError(HookArgumentError):
    """Hook customizado que não é chamável."""


class HookReturnTypeError(HookError, TypeError):
    """
    Hook retornou um valor que não é um mapeamento.

    Levantada durante `apply`, com nome e posição do hook na mensagem.
    """

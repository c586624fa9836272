"""
chartflow — Canonical Exceptions (v1)

Este módulo define a raiz da hierarquia de exceções do chartflow.

Objetivo:
- Permitir captura genérica de qualquer falha levantada pela biblioteca
- Separar falhas de configuração (load/merge) de falhas de hooks

Regras:
- Exceções de configuração vivem em `core.config.errors`
- Exceções de hooks vivem em `core.hooks.errors`
- Ambas herdam de `ChartflowError`
"""


class ChartflowError(Exception):
    """Base class para todas as exceções do chartflow."""

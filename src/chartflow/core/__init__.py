# src/chartflow/core/__init__.py
"""
Core do chartflow.

Componentes principais:
    - config → deep-merge, carregamento e hashing de configuração
    - hooks  → HookChain, hooks por dataset, BuildContext

Princípios fundamentais:
    - Transformações puras sobre dicionários
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Nenhum estado global além da paleta padrão (imutável)

Limites explícitos:
    - Não desenha gráficos
    - Não valida o schema do renderizador
    - Não persiste configurações
"""

# src/chartflow/core/hooks/context.py
"""
Contexto de construção de uma configuração de gráfico.

Este módulo define o `BuildContext`, a estrutura opcional passada a
`HookChain.apply` para registrar, de forma estruturada, o que aconteceu
durante a aplicação da cadeia de hooks.

O BuildContext concentra:
    - identidade da construção (build_id, created_at)
    - eventos de log estruturados (um por hook aplicado)
    - warnings não fatais agrupados por hook

Princípios fundamentais:
    - Isolamento por construção (cada apply pode ter seu próprio contexto)
    - Logs são eventos estruturados, não texto livre
    - Ausência de estado global compartilhado

Invariantes:
    - Todo evento inclui `build_id`, `hook`, `level`, `message` e `timestamp`
    - Warnings são agrupados pela chave do hook (`"<índice>:<nome>"`)

Limites explícitos:
    - Não aplica hooks
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class BuildContext:
    """
    Contexto de uma chamada a `HookChain.apply`.

    Decisões arquiteturais:
        - Hooks não recebem o contexto; é a cadeia quem registra eventos,
          preservando a pureza de cada hook
        - O mesmo contexto pode acumular eventos de várias aplicações
    """

    build_id: str
    created_at: datetime
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------

    def log(self, *, hook: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "build_id": self.build_id,
            "hook": hook,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, hook: str, message: str) -> None:
        if hook not in self.warnings:
            self.warnings[hook] = []
        self.warnings[hook].append(message)

    def events_for(self, hook: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev["hook"] == hook]

# tests/conftest.py
"""
Fixtures compartilhados para testes do chartflow.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações base de gráfico mínimas e determinísticas
- conteúdo YAML de configuração base e local (override)
- contexto de construção controlado (BuildContext)

Decisões arquiteturais:
    - Fixtures retornam objetos novos a cada teste
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture aplica hooks
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


def make_config(n_datasets: int) -> dict:
    """Configuração base com `n_datasets` datasets rotulados ds0..dsN."""
    return {
        "type": "line",
        "data": {
            "labels": ["jan", "feb", "mar"],
            "datasets": [
                {"label": f"ds{i}", "data": [i, i + 1, i + 2]} for i in range(n_datasets)
            ],
        },
        "options": {},
    }


# =====================================================
# Configurações base de gráfico
# =====================================================

@pytest.fixture
def base_config() -> dict:
    """
    Fixture que fornece uma configuração base com três datasets.

    Returns:
        dict: Configuração com `type`, `data.labels`, `data.datasets` e `options`.
    """
    return make_config(3)


@pytest.fixture
def five_dataset_config() -> dict:
    return make_config(5)


@pytest.fixture
def config_without_datasets() -> dict:
    """Configuração sem bloco `data`: hooks por dataset devem ser no-op."""
    return {"type": "bar", "options": {"legend": {"position": "top"}}}


# =====================================================
# Loader fixtures
# =====================================================

@pytest.fixture
def chart_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de configuração base semelhante ao uso real.

    Returns:
        str: Conteúdo YAML representando a configuração base (defaults).
    """

    return """\
type: bar
data:
  labels: [a, b]
  datasets:
    - label: sales
      data: [1, 2]
options:
  legend:
    display: true
    position: top
  scales:
    yAxes:
      - ticks:
          beginAtZero: false
      - ticks:
          beginAtZero: false
"""


@pytest.fixture
def chart_local_yaml() -> str:
    """YAML de override local: altera a legenda e substitui `yAxes` por inteiro."""

    return """\
options:
  legend:
    position: bottom
  scales:
    yAxes:
      - ticks:
          beginAtZero: true
"""


# =====================================================
# BuildContext
# =====================================================

@pytest.fixture
def dummy_build_ctx():
    """
    Fixture que fornece um BuildContext determinístico para testes.

    Returns:
        BuildContext: Contexto de construção isolado e previsível.
    """
    from chartflow.core.hooks.context import BuildContext

    return BuildContext(
        build_id="build-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        meta={"source": "pytest"},
    )

# src/chartflow/notebook_ui/renderers.py
"""
Notebook UI Adapter (v1)

Objetivo:
- Resumir uma configuração de gráfico em saída legível para notebooks.
- NÃO altera a configuração.
- NÃO desenha o gráfico (isso é do renderizador externo).
- NÃO importa a HookChain.

Saídas:
- HTML (string) quando a entrada é uma configuração (dict)
- fallback seguro em string (JSON pretty ou repr)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Optional
import copy
import html
import json


@dataclass(frozen=True)
class RenderResult:
    """Resultado de renderização (apenas apresentação)."""
    html: Optional[str]  # HTML string (quando aplicável)
    text: str            # fallback textual (sempre preenchido)


# colunas exibidas para cada dataset, na ordem
DATASET_COLUMNS = ("label", "type", "borderColor", "backgroundColor", "points")


def _escape(s: Any) -> str:
    return html.escape("" if s is None else str(s))


def _as_pretty_json(payload: Any) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    except TypeError:
        return repr(payload)


def _dataset_rows(config: Mapping[str, Any]) -> list:
    data = config.get("data")
    datasets = data.get("datasets") if isinstance(data, Mapping) else None
    if not isinstance(datasets, (list, tuple)):
        return []

    rows = []
    for ds in datasets:
        if not isinstance(ds, Mapping):
            continue
        values = ds.get("data")
        rows.append({
            "label": ds.get("label"),
            "type": ds.get("type", config.get("type")),
            "borderColor": ds.get("borderColor"),
            "backgroundColor": ds.get("backgroundColor"),
            "points": len(values) if isinstance(values, (list, tuple)) else None,
        })
    return rows


def render_config(config: Any) -> RenderResult:
    """
    Renderizador de configuração v1:
    - dict -> card com tipo/título, tabela de datasets e tabela de opções
    - caso contrário -> JSON pretty (fallback)

    Garantia de pureza:
    - Verificada explicitamente para dict e list.
    """
    before = copy.deepcopy(config) if isinstance(config, (dict, list)) else None

    html_out: Optional[str] = None
    text_out = _as_pretty_json(config)

    if isinstance(config, Mapping):
        options = config.get("options")
        options = options if isinstance(options, Mapping) else {}
        title = options.get("title")
        subtitle = title.get("text") if isinstance(title, Mapping) else None

        html_out = render_card_html(
            {"type": config.get("type"), "datasets": len(_dataset_rows(config))},
            title="chart",
            subtitle=subtitle,
        )
        html_out += render_table_html(_dataset_rows(config), title="datasets")
        if options:
            html_out += render_kv_table_html(options, title="options")

    after = copy.deepcopy(config) if isinstance(config, (dict, list)) else None
    if before is not None and before != after:
        raise AssertionError("Notebook UI renderer mutated the input config")

    return RenderResult(html=html_out, text=text_out)


def render_kv_table_html(payload: Mapping[str, Any], title: Optional[str] = None) -> str:
    """Renderiza dict como tabela key/value (HTML puro)."""
    rows = []
    for k in payload.keys():
        rows.append(
            f"<tr><td><code>{_escape(k)}</code></td><td>{_escape(payload[k])}</td></tr>"
        )

    heading = f"<h4>{_escape(title)}</h4>" if title else ""
    return (
        f"{heading}"
        "<table>"
        "<thead><tr><th>key</th><th>value</th></tr></thead>"
        "<tbody>"
        + "".join(rows) +
        "</tbody></table>"
    )


def render_table_html(payload: Sequence[Mapping[str, Any]], title: Optional[str] = None, max_rows: int = 50) -> str:
    """
    Renderiza linhas de dataset como tabela:
    - colunas fixas em DATASET_COLUMNS
    - lista vazia -> marcador (empty)
    """
    items = list(payload)[:max_rows]

    heading = f"<h4>{_escape(title)}</h4>" if title else ""

    if not items:
        return f"{heading}<div><em>(empty)</em></div>"

    th = "".join(f"<th>{_escape(c)}</th>" for c in DATASET_COLUMNS)
    trs = []
    for row in items:
        tds = "".join(f"<td>{_escape(row.get(c))}</td>" for c in DATASET_COLUMNS)
        trs.append(f"<tr>{tds}</tr>")

    return (
        f"{heading}"
        "<table>"
        f"<thead><tr>{th}</tr></thead>"
        "<tbody>" + "".join(trs) + "</tbody>"
        "</table>"
    )


def render_card_html(payload: Mapping[str, Any], title: str, subtitle: Optional[str] = None) -> str:
    """Renderiza um card simples em HTML (apresentação pura)."""
    st = f"<div style='opacity:0.75'>{_escape(subtitle)}</div>" if subtitle else ""
    body = render_kv_table_html(payload)
    return (
        "<div style='border:1px solid #ddd; border-radius:12px; padding:12px; margin:8px 0;'>"
        f"<h3 style='margin:0 0 6px 0;'>{_escape(title)}</h3>"
        f"{st}"
        f"{body}"
        "</div>"
    )

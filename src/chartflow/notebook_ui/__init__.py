from .renderers import (
    RenderResult,
    render_config,
    render_kv_table_html,
    render_table_html,
    render_card_html,
)

__all__ = [
    "RenderResult",
    "render_config",
    "render_kv_table_html",
    "render_table_html",
    "render_card_html",
]

# src/chartflow/core/hooks/chain.py
"""
Cadeia canônica de hooks de configuração de gráfico.

Este módulo define a `HookChain`, o builder fluente que acumula
transformações puras ("hooks") e as aplica, em ordem de registro,
sobre uma configuração base fornecida pelo chamador.

Cada método de registro:
    - valida e normaliza seu argumento imediatamente (no registro)
    - fecha sobre uma cópia normalizada, nunca sobre o objeto do chamador
    - adiciona exatamente um hook ao final da cadeia
    - retorna a própria cadeia, permitindo encadeamento

Invariantes:
    - Hooks executam estritamente na ordem de registro
    - Hooks posteriores observam a saída dos anteriores
    - A cadeia é append-only; `apply` não a consome nem a limpa
    - A configuração base do chamador nunca é mutada

Limites explícitos:
    - Não valida se a configuração final é renderizável
    - Não chama o renderizador
    - Não é segura para registro concorrente sem sincronização externa
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..config.errors import ConfigRootTypeError
from ..config.hashing import compute_config_hash
from ..config.merge import deep_merge
from .context import BuildContext
from .cycling import cycle, get_datasets, map_datasets, non_mapping_positions
from .errors import EmptyCycleError, HookReturnTypeError, InvalidHookError
from .palette import COLOR_PALETTE, DEFAULT_GENERAL_TYPE, DEFAULT_PADDING
from .types import Configuration, DatasetHook, Hook, HookFn

LegendArg = Union[bool, Mapping[str, Any], None]
TitleArg = Union[str, Mapping[str, Any], None]
PaddingArg = Union[int, float, Mapping[str, Any]]
TypesArg = Union[str, DatasetHook, Mapping[str, Any], Sequence[Union[str, Mapping[str, Any]]]]


def _normalize_types(types: Any) -> List[Dict[str, Any]]:
    """Converte o argumento de `datasets` em uma lista de fragmentos por dataset."""
    if isinstance(types, (list, tuple)):
        entries: Iterable[Any] = types
    else:
        entries = [types]

    fragments: List[Dict[str, Any]] = []
    for entry in entries:
        if isinstance(entry, Mapping):
            fragments.append(deepcopy(dict(entry)))
        else:
            fragments.append({"type": entry})
    return fragments


class HookChain:
    """
    Builder fluente e ordenado de transformações de configuração.

    Exemplo:
        config = (
            HookChain()
            .title("Revenue")
            .datasets(["line", "bar"])
            .colors()
            .begin_at_zero()
            .apply(base)
        )

    Decisões arquiteturais:
        - Um hook é um valor `Hook(name, fn, per_dataset)`; registrar é
          adicioná-lo à lista, aplicar é dobrar a lista sobre a base
        - Fragmentos são mesclados via `deep_merge` (listas atômicas)
        - Hooks por dataset reconstroem `data.datasets` posicionalmente
    """

    def __init__(self) -> None:
        self._hooks: List[Hook] = []

    def __len__(self) -> int:
        return len(self._hooks)

    def __repr__(self) -> str:
        names = ", ".join(hook.name for hook in self._hooks)
        return f"HookChain([{names}])"

    @property
    def hooks(self) -> Tuple[Hook, ...]:
        """Visão somente leitura dos hooks registrados, em ordem."""
        return tuple(self._hooks)

    # -----------------------------
    # Registro interno
    # -----------------------------

    def _push(self, hook: Hook) -> "HookChain":
        self._hooks.append(hook)
        return self

    def _push_fragment(self, name: str, fragment: Mapping[str, Any]) -> "HookChain":
        frozen = deepcopy(dict(fragment))

        def _merge(config: Configuration) -> Configuration:
            return deep_merge(config, frozen)

        return self._push(Hook(name=name, fn=_merge))

    # -----------------------------
    # Hooks genéricos
    # -----------------------------

    def custom(self, fn: Union[Hook, HookFn], name: str = "custom") -> "HookChain":
        """
        Registra um hook arbitrário fornecido pelo chamador.

        Args:
            fn: Função Configuration → Configuration, ou um `Hook` pronto.
            name: Nome usado nos eventos do `BuildContext`.

        Raises:
            InvalidHookError: Se `fn` não for chamável.
        """
        if isinstance(fn, Hook):
            return self._push(fn)
        if not callable(fn):
            raise InvalidHookError(
                f"Hook customizado deve ser chamável, recebido: {type(fn).__name__}"
            )
        return self._push(Hook(name=name, fn=fn))

    def merge(self, other: "HookChain") -> "HookChain":
        """Adiciona, em ordem, todos os hooks de outra cadeia ao final desta."""
        if not isinstance(other, HookChain):
            raise InvalidHookError(
                f"merge requer uma HookChain, recebido: {type(other).__name__}"
            )
        self._hooks.extend(list(other._hooks))
        return self

    # -----------------------------
    # Hooks por dataset
    # -----------------------------

    def colors(self, palette: Optional[Union[str, Sequence[str]]] = None) -> "HookChain":
        """
        Define `borderColor` e `backgroundColor` de cada dataset.

        O dataset de índice i recebe `palette[i % len(palette)]`. Sem
        paleta, usa `COLOR_PALETTE`. Sem `data.datasets`, o hook é um no-op.

        Raises:
            EmptyCycleError: Se a paleta for vazia.
        """
        if palette is None:
            palette = COLOR_PALETTE
        elif isinstance(palette, str):
            palette = [palette]

        colors = tuple(palette)
        if not colors:
            raise EmptyCycleError("A paleta de cores não pode ser vazia")

        def _paint(dataset: Dict[str, Any], index: int) -> Dict[str, Any]:
            color = cycle(colors, index)
            return {**dataset, "borderColor": color, "backgroundColor": color}

        def _colors(config: Configuration) -> Configuration:
            return map_datasets(config, _paint)

        return self._push(Hook(name="colors", fn=_colors, per_dataset=True))

    def datasets(self, types: TypesArg, general_type: str = DEFAULT_GENERAL_TYPE) -> "HookChain":
        """
        Define o tipo geral do gráfico e o tipo/estilo de cada dataset.

        Uma string vira `{"type": tag}`; um único valor não-lista vale para
        todos os datasets; numa lista, strings viram `{"type": tag}` e
        mapeamentos são aplicados como estão. O dataset i recebe
        `types[i % len(types)]` mesclado sobre seus campos atuais.

        Raises:
            EmptyCycleError: Se a lista de tipos for vazia.
        """
        fragments = _normalize_types(types)
        if not fragments:
            raise EmptyCycleError("A lista de tipos de dataset não pode ser vazia")

        def _style(dataset: Dict[str, Any], index: int) -> Dict[str, Any]:
            return {**dataset, **deepcopy(cycle(fragments, index))}

        def _datasets(config: Configuration) -> Configuration:
            result = dict(map_datasets(config, _style))
            result["type"] = general_type
            return result

        return self._push(Hook(name="datasets", fn=_datasets, per_dataset=True))

    # -----------------------------
    # Hooks de opções
    # -----------------------------

    def responsive(self, maintain_aspect_ratio: bool = True) -> "HookChain":
        return self._push_fragment(
            "responsive", {"options": {"maintainAspectRatio": maintain_aspect_ratio}}
        )

    def legend(self, value: LegendArg = None) -> "HookChain":
        """
        Define as opções de legenda.

        Um booleano é interpretado como `{"display": value}`.
        """
        if value is None:
            legend: Any = {}
        elif isinstance(value, bool):
            legend = {"display": value}
        elif isinstance(value, Mapping):
            legend = dict(value)
        else:
            legend = value
        return self._push_fragment("legend", {"options": {"legend": legend}})

    def display_axes(self, display: bool = True, strict: bool = False) -> "HookChain":
        """
        Define se os eixos são exibidos.

        Com `strict`, mescla apenas `options.scale.display`. Caso contrário,
        substitui `xAxes` e `yAxes` por listas de um elemento; chamadas
        repetidas substituem, nunca acumulam, entradas de eixo.
        """
        if strict:
            fragment: Dict[str, Any] = {"options": {"scale": {"display": display}}}
        else:
            fragment = {
                "options": {
                    "scales": {
                        "xAxes": [{"display": display}],
                        "yAxes": [{"display": display}],
                    }
                }
            }
        return self._push_fragment("display_axes", fragment)

    def minimalist(self, value: bool = True) -> "HookChain":
        """Equivale a `legend({"display": not value})` seguido de `display_axes(not value)`."""
        self.legend({"display": not value})
        self.display_axes(not value)
        return self

    def padding(self, value: PaddingArg = DEFAULT_PADDING) -> "HookChain":
        return self._push_fragment("padding", {"options": {"layout": {"padding": value}}})

    def title(self, value: TitleArg = None) -> "HookChain":
        """
        Define o título do gráfico.

        Uma string vira `{"text": value, "display": True}`; um mapeamento é
        mesclado sobre `{"display": True}`, salvo se trouxer seu próprio
        `display`.
        """
        if value is None:
            title: Any = {"display": True}
        elif isinstance(value, str):
            title = {"text": value, "display": True}
        elif isinstance(value, Mapping):
            title = {"display": True, **value}
        else:
            title = value
        return self._push_fragment("title", {"options": {"title": title}})

    def begin_at_zero(self, value: bool = True) -> "HookChain":
        # yAxes é substituída por inteiro (listas são atômicas)
        return self._push_fragment(
            "begin_at_zero",
            {"options": {"scales": {"yAxes": [{"ticks": {"beginAtZero": value}}]}}},
        )

    # -----------------------------
    # Aplicação
    # -----------------------------

    def apply(
        self,
        base: Mapping[str, Any],
        ctx: Optional[BuildContext] = None,
    ) -> Configuration:
        """
        Aplica todos os hooks, em ordem, sobre uma cópia da configuração base.

        Com uma cadeia vazia, retorna uma configuração igual (deep-equal)
        à base, mas distinta dela.

        Args:
            base: Configuração base do chamador (não é mutada).
            ctx: Contexto opcional para eventos e warnings estruturados.

        Returns:
            Configuration: Configuração final.

        Raises:
            ConfigRootTypeError: Se `base` não for um mapeamento.
            HookReturnTypeError: Se um hook retornar algo que não é mapeamento.
        """
        if not isinstance(base, Mapping):
            raise ConfigRootTypeError(
                f"Configuração base deve ser um mapeamento, recebido: {type(base).__name__}"
            )

        running: Configuration = deepcopy(dict(base))

        for index, hook in enumerate(list(self._hooks)):
            key = f"{index}:{hook.name}"

            if ctx is not None and hook.per_dataset and get_datasets(running) is None:
                ctx.add_warning(hook=key, message="config has no data.datasets; hook had no effect")
            elif ctx is not None and hook.per_dataset:
                skipped = non_mapping_positions(running)
                if skipped:
                    ctx.add_warning(
                        hook=key,
                        message=f"non-mapping datasets left unchanged at positions {skipped}",
                    )

            result = hook(running)
            if not isinstance(result, Mapping):
                raise HookReturnTypeError(
                    f"Hook '{hook.name}' (posição {index}) deve retornar um mapeamento, "
                    f"recebido: {type(result).__name__}"
                )
            running = result if isinstance(result, dict) else dict(result)

            if ctx is not None:
                ctx.log(hook=key, level="INFO", message="hook applied", index=index, name=hook.name)

        if ctx is not None:
            ctx.log(
                hook="build",
                level="INFO",
                message="build completed",
                hooks=len(self._hooks),
                config_hash=compute_config_hash(running),
            )

        return running

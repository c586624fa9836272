# src/chartflow/core/hooks/palette.py
"""Paleta de cores padrão, imutável durante a vida do processo."""

from typing import Tuple

COLOR_PALETTE: Tuple[str, ...] = (
    "#667EEA",
    "#F56565",
    "#48BB78",
    "#ED8936",
    "#9F7AEA",
    "#38B2AC",
    "#ED64A6",
    "#ECC94B",
    "#4299E1",
    "#A0AEC0",
)

DEFAULT_PADDING = 5
DEFAULT_GENERAL_TYPE = "bar"

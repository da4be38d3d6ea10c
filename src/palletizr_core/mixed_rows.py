"""Layers built from full-length rows of both carton orientations.

A row runs along the pallet length.  An as-given row holds
``pallet.length // carton.length`` cartons and takes ``carton.width`` of
the pallet width; a swapped row holds ``pallet.length // carton.width``
cartons and takes ``carton.length``.  Mixing the two can use width that a
single orientation leaves empty.

A mixed layer is only attempted when at least one row of each type fits,
both along the pallet length and across its width.  This is stricter than
the row search alone: a carton whose swapped row cannot fit across the
width gets no mixed layer even though ``best_row_mix`` would still return
a pure as-given mix.  That pure mix is the plain as-given grid, which the
single-orientation candidate already covers.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .models import (
    LAYOUT_MIXED,
    ROTATION_AS_GIVEN,
    ROTATION_SWAPPED,
    Carton,
    LayerLayout,
    MixedRows,
    Pallet,
    Settings,
)
from .stacking import LayerCell, stack_layer
from .tracing import NULL_TRACER, LayoutTracer
from .units import EPS, fit_count


def best_row_mix(carton: Carton, pallet: Pallet) -> Tuple[MixedRows, int]:
    """Search swapped-row counts and return the densest ``(rows, per_layer)``.

    Ties keep the smaller swapped-row count.
    """
    count_row0 = fit_count(pallet.length, carton.length)
    count_row90 = fit_count(pallet.length, carton.width)
    max_rows90 = fit_count(pallet.width, carton.length)

    best = MixedRows(0, 0)
    best_per_layer = 0
    for b in range(max_rows90 + 1):
        leftover = max(pallet.width - b * carton.length, 0.0)
        a = fit_count(leftover, carton.width)
        per_layer = a * count_row0 + b * count_row90
        if per_layer > best_per_layer:
            best = MixedRows(as_given=a, swapped=b)
            best_per_layer = per_layer
    return best, best_per_layer


def row_cells(carton: Carton, pallet: Pallet, rows: MixedRows) -> List[LayerCell]:
    """Swapped rows from the back edge first, then as-given rows."""
    count_row0 = fit_count(pallet.length, carton.length)
    count_row90 = fit_count(pallet.length, carton.width)
    cells: List[LayerCell] = []
    y = 0.0
    for r in range(rows.swapped):
        for gx in range(count_row90):
            cells.append((gx * carton.width, y, ROTATION_SWAPPED, gx, r))
        y += carton.length
    for r in range(rows.as_given):
        for gx in range(count_row0):
            cells.append((gx * carton.length, y, ROTATION_AS_GIVEN, gx, rows.swapped + r))
        y += carton.width
    if y > pallet.width + EPS:
        raise ValueError(f"rows {rows} overflow the pallet width {pallet.width}")
    return cells


def pack_mixed_rows(
    carton: Carton,
    pallet: Pallet,
    settings: Settings,
    tracer: LayoutTracer = NULL_TRACER,
) -> Optional[LayerLayout]:
    if not settings.enable_rotation:
        return None

    # Both row types must be able to exist, otherwise there is nothing to mix.
    if fit_count(pallet.length, carton.length) == 0 or fit_count(pallet.length, carton.width) == 0:
        tracer.degenerate_fit("mixed_rows", "a row type holds no carton along the pallet length")
        return None
    if fit_count(pallet.width, carton.width) == 0 or fit_count(pallet.width, carton.length) == 0:
        tracer.degenerate_fit("mixed_rows", "a row type does not fit across the pallet width")
        return None

    rows, per_layer = best_row_mix(carton, pallet)
    if per_layer <= 0:
        tracer.degenerate_fit("mixed_rows", "no row combination holds a carton")
        return None

    return stack_layer(
        row_cells(carton, pallet, rows),
        carton,
        pallet,
        settings,
        kind=LAYOUT_MIXED,
        rows=rows,
    )

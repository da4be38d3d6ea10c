from __future__ import annotations

from typing import List

from .models import (
    LAYOUT_ORIENTATION,
    Carton,
    LayerLayout,
    Orientation,
    Pallet,
    Settings,
)
from .stacking import LayerCell, stack_layer
from .units import fit_count


def candidate_orientations(carton: Carton, settings: Settings) -> List[Orientation]:
    """As-given footprint first, then the swapped one when rotation is on."""
    base = Orientation.from_carton(carton)
    if not settings.enable_rotation:
        return [base]
    return [base, base.swapped()]


def grid_cells(pallet: Pallet, orientation: Orientation) -> List[LayerCell]:
    cols = fit_count(pallet.length, orientation.length)
    rows = fit_count(pallet.width, orientation.width)
    cells: List[LayerCell] = []
    for gy in range(rows):
        for gx in range(cols):
            cells.append(
                (
                    gx * orientation.length,
                    gy * orientation.width,
                    orientation.rotation,
                    gx,
                    gy,
                )
            )
    return cells


def pack_orientation(
    carton: Carton,
    pallet: Pallet,
    orientation: Orientation,
    settings: Settings,
) -> LayerLayout:
    """Uniform grid of one carton orientation, stacked to the pallet limits."""
    footprint = sorted((orientation.length, orientation.width))
    if orientation.height != carton.height or footprint != sorted((carton.length, carton.width)):
        raise ValueError(f"orientation {orientation} does not match the carton")
    cells = grid_cells(pallet, orientation)
    return stack_layer(
        cells,
        carton,
        pallet,
        settings,
        kind=LAYOUT_ORIENTATION,
        orientation=orientation,
    )

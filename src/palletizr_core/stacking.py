from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .models import (
    Carton,
    CartonPlacement,
    LayerLayout,
    MixedRows,
    Orientation,
    Pallet,
    Settings,
)
from .units import fit_count

# One carton slot of a layer: (x, y, rotation, grid_x, grid_y)
LayerCell = Tuple[float, float, str, int, int]


def compute_layers_by_height(
    max_stack: float,
    layer_height: float,
    include_pallet_height: bool,
    pallet_h: float,
) -> int:
    include_height = pallet_h if include_pallet_height else 0
    if layer_height <= 0 or max_stack <= 0:
        return 0
    available = max(max_stack - include_height, 0)
    return fit_count(available, layer_height)


def compute_layers_by_weight(max_weight: float, layer_weight: float) -> int:
    if layer_weight <= 0 or max_weight <= 0:
        return 0
    return fit_count(max_weight, layer_weight)


def compute_max_stack(num_layers: int, layer_height: float, pallet_h: float) -> float:
    """Floor-to-top height of a loaded pallet."""
    if layer_height <= 0 or num_layers <= 0:
        return pallet_h
    return num_layers * layer_height + pallet_h


def compute_max_layers(
    carton: Carton, pallet: Pallet, settings: Settings, cartons_per_layer: int
) -> Tuple[int, int, int]:
    """Return ``(max_layers, layers_by_height, layers_by_weight)``."""
    by_height = compute_layers_by_height(
        pallet.max_stack_height, carton.height, True, pallet.height
    )
    if cartons_per_layer <= 0:
        return 0, by_height, 0
    by_weight = compute_layers_by_weight(
        pallet.max_stack_weight, carton.weight * cartons_per_layer
    )
    if settings.consider_load_bearing:
        return min(by_height, by_weight), by_height, by_weight
    return by_height, by_height, by_weight


def nominal_capacity(carton: Carton, pallet: Pallet) -> int:
    """Cartons in the unrotated bounding grid filled to the height limit."""
    per_layer = fit_count(pallet.length, carton.length) * fit_count(
        pallet.width, carton.width
    )
    layers = compute_layers_by_height(
        pallet.max_stack_height, carton.height, True, pallet.height
    )
    return per_layer * layers


def stack_layer(
    cells: Sequence[LayerCell],
    carton: Carton,
    pallet: Pallet,
    settings: Settings,
    *,
    kind: str,
    orientation: Optional[Orientation] = None,
    rows: Optional[MixedRows] = None,
) -> LayerLayout:
    """Repeat one layer pattern up to the height and weight limits."""
    per_layer = len(cells)
    max_layers, by_height, by_weight = compute_max_layers(
        carton, pallet, settings, per_layer
    )
    total = per_layer * max_layers

    placements: List[CartonPlacement] = []
    for layer in range(max_layers):
        z = layer * carton.height
        for x, y, rotation, grid_x, grid_y in cells:
            placements.append(CartonPlacement(x, y, z, layer, rotation, grid_x, grid_y))

    pallet_area = pallet.length * pallet.width
    efficiency = per_layer * carton.footprint / pallet_area if pallet_area > 0 else 0.0
    nominal = nominal_capacity(carton, pallet)
    utilization = total / nominal if nominal > 0 else 0.0

    return LayerLayout(
        kind=kind,
        cartons_per_layer=per_layer,
        max_layers=max_layers,
        total_cartons=total,
        placements=tuple(placements),
        efficiency=efficiency,
        utilization=utilization,
        orientation=orientation,
        rows=rows,
        layers_by_height=by_height,
        layers_by_weight=by_weight,
        layer_weight=per_layer * carton.weight,
        layer_height=carton.height,
    )

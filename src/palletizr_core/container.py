from __future__ import annotations

from typing import List, Optional, Tuple

from .models import (
    PALLET_AS_GIVEN,
    PALLET_ORIENTATIONS,
    PALLET_SWAPPED,
    Carton,
    Container,
    ContainerLayout,
    LayerLayout,
    Pallet,
    PalletPlacement,
)
from .stacking import compute_max_stack
from .tracing import NULL_TRACER, LayoutTracer
from .units import fit_count


def pallet_footprint(pallet: Pallet, orientation: str) -> Tuple[float, float]:
    """Pallet extent along the container length and width."""
    if orientation == PALLET_AS_GIVEN:
        return pallet.length, pallet.width
    if orientation == PALLET_SWAPPED:
        return pallet.width, pallet.length
    raise ValueError(f"unknown pallet orientation {orientation!r}")


def pack_container(
    pallet_layout: Optional[LayerLayout],
    carton: Carton,
    pallet: Pallet,
    container: Container,
    orientation: str = PALLET_AS_GIVEN,
    tracer: LayoutTracer = NULL_TRACER,
) -> ContainerLayout:
    """Place loaded pallets on a grid, layer by layer.

    Coordinates are pallet centres relative to the container floor centre
    in x (length) and y (width); z is the pallet base above the floor.
    """
    foot_l, foot_w = pallet_footprint(pallet, orientation)
    if pallet_layout is None or pallet_layout.is_empty:
        tracer.degenerate_fit("container", "no loaded pallet to place")
        return ContainerLayout.empty(orientation)

    stack_height = compute_max_stack(pallet_layout.max_layers, carton.height, pallet.height)
    along_length = fit_count(container.length, foot_l)
    along_width = fit_count(container.width, foot_w)
    pallets_per_layer = along_length * along_width
    max_layers = fit_count(container.height, stack_height)
    geometric = pallets_per_layer * max_layers

    load_weight = pallet_layout.load_weight
    weight_limited = fit_count(container.weight_capacity, load_weight)
    actual = min(geometric, weight_limited)
    if actual <= 0:
        reason = "pallet grid is empty" if geometric <= 0 else "one pallet exceeds the weight capacity"
        tracer.degenerate_fit("container", reason)

    placements: List[PalletPlacement] = []
    for layer in range(max_layers):
        if len(placements) >= actual:
            break
        z = layer * stack_height
        for ix in range(along_length):
            if len(placements) >= actual:
                break
            for iy in range(along_width):
                if len(placements) >= actual:
                    break
                placements.append(
                    PalletPlacement(
                        x=(ix + 0.5) * foot_l - container.length / 2,
                        y=(iy + 0.5) * foot_w - container.width / 2,
                        z=z,
                        layer=layer,
                        index=len(placements),
                    )
                )

    layout = ContainerLayout(
        pallets_per_layer=pallets_per_layer,
        max_pallet_layers=max_layers,
        total_pallets=actual,
        placements=tuple(placements),
        container_utilization=actual * foot_l * foot_w * stack_height / container.volume,
        weight_utilization=actual * load_weight / container.weight_capacity,
        orientation=orientation,
        stack_height=stack_height,
        pallet_load_weight=load_weight,
        weight_limited_pallets=weight_limited,
    )
    tracer.container_packed(layout)
    return layout


def best_container_layout(
    pallet_layout: Optional[LayerLayout],
    carton: Carton,
    pallet: Pallet,
    container: Container,
    tracer: LayoutTracer = NULL_TRACER,
) -> ContainerLayout:
    """Try both pallet footprints; ties keep the as-given one."""
    best: Optional[ContainerLayout] = None
    for orientation in PALLET_ORIENTATIONS:
        layout = pack_container(pallet_layout, carton, pallet, container, orientation, tracer)
        if best is None or layout.total_pallets > best.total_pallets:
            best = layout
    return best

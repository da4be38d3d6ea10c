from __future__ import annotations

import math
from typing import Optional

from .container import best_container_layout, pack_container
from .models import (
    Carton,
    Container,
    ContainerLayout,
    LayerLayout,
    Layout3D,
    OptimizationReport,
    Pallet,
    Settings,
    Summary,
)
from .selector import select_pallet_layout
from .tracing import LayoutTracer, default_tracer


def compose(
    carton: Carton,
    pallet: Pallet,
    container: Container,
    settings: Settings,
    pallet_layout: Optional[LayerLayout],
    container_layout: ContainerLayout,
) -> OptimizationReport:
    """Clip the packed capacity to the requested quantity and summarize."""
    quantity = carton.quantity
    per_pallet = pallet_layout.total_cartons if pallet_layout is not None else 0

    if per_pallet > 0:
        pallets_needed = math.ceil(quantity / per_pallet)
    else:
        pallets_needed = 0
    pallets_used = min(pallets_needed, container_layout.total_pallets)
    placed = min(quantity, pallets_used * per_pallet)
    remaining = max(0, quantity - placed)
    packing_efficiency = placed / quantity if quantity > 0 else 0.0

    if container_layout.total_pallets > 0:
        containers_used = math.ceil(pallets_needed / container_layout.total_pallets)
    else:
        containers_used = 0

    summary = Summary(
        total_cartons=quantity,
        cartons_placed=placed,
        remaining_cartons=remaining,
        pallets_used=pallets_used,
        containers_used=containers_used,
        efficiency=packing_efficiency * 100,
        space_utilization=container_layout.container_utilization * 100,
        weight_utilization=container_layout.weight_utilization * 100,
    )
    return OptimizationReport(
        carton=carton,
        pallet=pallet,
        container=container,
        settings=settings,
        pallet_layout=pallet_layout,
        container_layout=container_layout,
        carton_placements=pallet_layout.placements if pallet_layout is not None else (),
        pallet_placements=container_layout.placements[:pallets_used],
        pallets_needed=pallets_needed,
        packing_efficiency=packing_efficiency,
        space_utilization=container_layout.container_utilization,
        weight_utilization=container_layout.weight_utilization,
        summary=summary,
        layout_3d=Layout3D(
            pallet_layout=pallet_layout,
            container_layout=container_layout,
            carton=carton,
            pallet=pallet,
            container=container,
        ),
    )


def generate_optimization_report(
    carton: Carton,
    pallet: Pallet,
    container: Container,
    settings: Optional[Settings] = None,
    tracer: Optional[LayoutTracer] = None,
) -> OptimizationReport:
    """Pack cartons on a pallet, pallets in a container, and report."""
    settings = settings if settings is not None else Settings()
    tracer = tracer if tracer is not None else default_tracer()

    pallet_layout = select_pallet_layout(carton, pallet, settings, tracer)
    if settings.allow_pallet_rotation:
        container_layout = best_container_layout(pallet_layout, carton, pallet, container, tracer)
    else:
        container_layout = pack_container(pallet_layout, carton, pallet, container, tracer=tracer)
    return compose(carton, pallet, container, settings, pallet_layout, container_layout)

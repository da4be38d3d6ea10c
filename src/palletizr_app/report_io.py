from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import numpy as np

from palletizr_core.models import (
    Carton,
    Container,
    ContainerLayout,
    LayerLayout,
    OptimizationReport,
    Pallet,
)


def iso_utc_now_ms() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def placements_array(placements: Iterable[Any]) -> np.ndarray:
    """``(n, 3)`` array of placement coordinates for renderers."""
    coords = [(p.x, p.y, p.z) for p in placements]
    if not coords:
        return np.zeros((0, 3), dtype=float)
    return np.asarray(coords, dtype=float)


def _carton_payload(carton: Carton) -> Dict[str, Any]:
    return {
        "length": carton.length,
        "width": carton.width,
        "height": carton.height,
        "weight": carton.weight,
        "quantity": carton.quantity,
    }


def _pallet_payload(pallet: Pallet) -> Dict[str, Any]:
    return {
        "length": pallet.length,
        "width": pallet.width,
        "height": pallet.height,
        "maxStackHeight": pallet.max_stack_height,
        "maxStackWeight": pallet.max_stack_weight,
    }


def _container_payload(container: Container) -> Dict[str, Any]:
    return {
        "length": container.length,
        "width": container.width,
        "height": container.height,
        "weightCapacity": container.weight_capacity,
    }


def _pallet_layout_payload(layout: Optional[LayerLayout]) -> Optional[Dict[str, Any]]:
    if layout is None:
        return None
    payload: Dict[str, Any] = {
        "kind": layout.kind,
        "rotation": layout.rotation,
        "cartonsPerLayer": layout.cartons_per_layer,
        "maxLayers": layout.max_layers,
        "totalCartons": layout.total_cartons,
        "efficiency": layout.efficiency,
        "utilization": layout.utilization,
        "cartonPositions": [
            {
                "x": p.x,
                "y": p.y,
                "z": p.z,
                "layer": p.layer,
                "rotation": p.rotation,
                "gridX": p.grid_x,
                "gridY": p.grid_y,
            }
            for p in layout.placements
        ],
    }
    if layout.rows is not None:
        payload["rows"] = {"normal": layout.rows.as_given, "rotated": layout.rows.swapped}
    return payload


def _container_layout_payload(layout: ContainerLayout, pallets_used: int) -> Dict[str, Any]:
    return {
        "orientation": layout.orientation,
        "palletsPerLayer": layout.pallets_per_layer,
        "maxPalletLayers": layout.max_pallet_layers,
        "totalPallets": layout.total_pallets,
        "stackHeight": layout.stack_height,
        "containerUtilization": layout.container_utilization,
        "weightUtilization": layout.weight_utilization,
        "palletPositions": [
            {"x": p.x, "y": p.y, "z": p.z, "layer": p.layer, "index": p.index}
            for p in layout.placements[:pallets_used]
        ],
    }


def report_to_payload(report: OptimizationReport, *, timestamp: bool = False) -> Dict[str, Any]:
    summary = report.summary
    payload: Dict[str, Any] = {
        "carton": _carton_payload(report.carton),
        "pallet": _pallet_payload(report.pallet),
        "container": _container_payload(report.container),
        "settings": {
            "enableRotation": report.settings.enable_rotation,
            "considerLoadBearing": report.settings.consider_load_bearing,
            "allowPalletRotation": report.settings.allow_pallet_rotation,
        },
        "summary": {
            "totalCartons": summary.total_cartons,
            "cartonsPlaced": summary.cartons_placed,
            "remainingCartons": summary.remaining_cartons,
            "palletsUsed": summary.pallets_used,
            "containersUsed": summary.containers_used,
            "efficiency": summary.efficiency,
            "spaceUtilization": summary.space_utilization,
            "weightUtilization": summary.weight_utilization,
        },
        "layout3D": {
            "palletLayout": _pallet_layout_payload(report.pallet_layout),
            "containerLayout": _container_layout_payload(
                report.container_layout, summary.pallets_used
            ),
            "scale": report.layout_3d.scale,
            "cartonDimensions": _carton_payload(report.carton),
            "palletDimensions": _pallet_payload(report.pallet),
            "containerDimensions": _container_payload(report.container),
        },
    }
    if timestamp:
        payload["timestamp"] = iso_utc_now_ms()
    return payload


def save_report(path: str | Path, report: OptimizationReport) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(report_to_payload(report, timestamp=True), f, ensure_ascii=False, indent=2)


def load_report_payload(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

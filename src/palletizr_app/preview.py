from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt

from palletizr_core.models import (
    PALLET_SWAPPED,
    ROTATION_AS_GIVEN,
    ROTATION_SWAPPED,
    OptimizationReport,
)

LAYER_COLORS = {ROTATION_AS_GIVEN: "blue", ROTATION_SWAPPED: "green"}


def _axes(ax):
    if ax is not None:
        return ax
    _, ax = plt.subplots()
    return ax


def draw_pallet_layer(
    report: OptimizationReport,
    layer: int = 0,
    ax=None,
    show_numbers: bool = False,
):
    """Draw one carton layer seen from above, pallet outline included."""
    ax = _axes(ax)
    ax.clear()
    pallet = report.pallet
    carton = report.carton
    ax.add_patch(
        plt.Rectangle(
            (0, 0),
            pallet.length,
            pallet.width,
            fill=False,
            edgecolor="black",
            linewidth=2,
        )
    )
    layout = report.pallet_layout
    placements = layout.layer(layer) if layout is not None else ()
    for i, placement in enumerate(placements):
        if placement.rotation == ROTATION_SWAPPED:
            w, h = carton.width, carton.length
        else:
            w, h = carton.length, carton.width
        ax.add_patch(
            plt.Rectangle(
                (placement.x, placement.y),
                w,
                h,
                fill=True,
                facecolor=LAYER_COLORS.get(placement.rotation, "blue"),
                alpha=0.5,
                edgecolor="black",
            )
        )
        if show_numbers:
            ax.text(
                placement.x + w / 2,
                placement.y + h / 2,
                str(i + 1),
                ha="center",
                va="center",
                fontsize=8,
                color="black",
                zorder=10,
            )
    ax.set_title(f"Layer {layer + 1}: {len(placements)}")
    margin = 0.1 * max(pallet.length, pallet.width)
    ax.set_xlim(-margin, pallet.length + margin)
    ax.set_ylim(-margin, pallet.width + margin)
    ax.set_aspect("equal")
    return ax


def draw_container_plan(report: OptimizationReport, layer: Optional[int] = 0, ax=None):
    """Draw the pallets actually used, seen from above.

    ``layer=None`` overlays every pallet layer.
    """
    ax = _axes(ax)
    ax.clear()
    container = report.container
    half_l = container.length / 2
    half_w = container.width / 2
    ax.add_patch(
        plt.Rectangle(
            (-half_l, -half_w),
            container.length,
            container.width,
            fill=False,
            edgecolor="black",
            linewidth=2,
        )
    )
    if report.container_layout.orientation == PALLET_SWAPPED:
        foot_l, foot_w = report.pallet.width, report.pallet.length
    else:
        foot_l, foot_w = report.pallet.length, report.pallet.width
    shown = [p for p in report.pallet_placements if layer is None or p.layer == layer]
    for placement in shown:
        ax.add_patch(
            plt.Rectangle(
                (placement.x - foot_l / 2, placement.y - foot_w / 2),
                foot_l,
                foot_w,
                fill=True,
                facecolor="orange",
                alpha=0.5,
                edgecolor="black",
            )
        )
    ax.set_title(f"Pallets: {len(shown)}")
    ax.set_xlim(-half_l - 50, half_l + 50)
    ax.set_ylim(-half_w - 50, half_w + 50)
    ax.set_aspect("equal")
    return ax

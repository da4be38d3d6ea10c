from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .mixed_rows import pack_mixed_rows
from .models import (
    LAYOUT_MIXED,
    ROTATION_SWAPPED,
    Carton,
    LayerLayout,
    Pallet,
    ScoringWeights,
    Settings,
)
from .orientation import candidate_orientations, pack_orientation
from .tracing import NULL_TRACER, LayoutTracer

CANDIDATE_AS_GIVEN = "as_given"
CANDIDATE_SWAPPED = "swapped"
CANDIDATE_MIXED = "mixed_rows"


@dataclass(frozen=True)
class Candidate:
    name: str
    layout: LayerLayout
    score: float


def score_layout(layout: LayerLayout, weights: ScoringWeights) -> float:
    score = (
        layout.total_cartons
        + weights.efficiency_weight * layout.efficiency
        + weights.utilization_weight * layout.utilization
    )
    if layout.kind == LAYOUT_MIXED:
        score += weights.mixed_row_bonus
    elif layout.rotation == ROTATION_SWAPPED:
        score += weights.rotated_bonus
    return score


def evaluate_candidates(
    carton: Carton,
    pallet: Pallet,
    settings: Settings,
    tracer: LayoutTracer = NULL_TRACER,
) -> List[Candidate]:
    """Score every layer candidate in evaluation order.

    Each candidate is computed from the inputs alone, so the order only
    matters for tie-breaking.
    """
    candidates: List[Candidate] = []
    for orientation in candidate_orientations(carton, settings):
        layout = pack_orientation(carton, pallet, orientation, settings)
        name = CANDIDATE_SWAPPED if orientation.rotation == ROTATION_SWAPPED else CANDIDATE_AS_GIVEN
        score = score_layout(layout, settings.scoring)
        tracer.candidate_scored(name, layout, score)
        candidates.append(Candidate(name, layout, score))

    mixed = pack_mixed_rows(carton, pallet, settings, tracer)
    if mixed is not None:
        score = score_layout(mixed, settings.scoring)
        tracer.candidate_scored(CANDIDATE_MIXED, mixed, score)
        candidates.append(Candidate(CANDIDATE_MIXED, mixed, score))
    return candidates


def best_candidate(candidates: List[Candidate]) -> Optional[Candidate]:
    best: Optional[Candidate] = None
    for candidate in candidates:
        if candidate.layout.total_cartons <= 0:
            continue
        if best is None or candidate.score > best.score:
            best = candidate
    return best


def select_pallet_layout(
    carton: Carton,
    pallet: Pallet,
    settings: Settings,
    tracer: LayoutTracer = NULL_TRACER,
) -> Optional[LayerLayout]:
    """Best scoring layer layout, or ``None`` when nothing fits."""
    best = best_candidate(evaluate_candidates(carton, pallet, settings, tracer))
    if best is None:
        tracer.degenerate_fit("pallet", "no candidate places a carton")
        return None
    tracer.candidate_selected(best.name, best.layout, best.score)
    return best.layout

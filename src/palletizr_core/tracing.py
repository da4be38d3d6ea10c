"""Decision-point hooks for the packing engine.

Packers never log directly; they report to a :class:`LayoutTracer`.  The
base class ignores every event, :class:`LoggingTracer` forwards them to the
standard ``logging`` module and :class:`RecordingTracer` keeps them for
inspection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import ContainerLayout, LayerLayout

logger = logging.getLogger(__name__)


class LayoutTracer:
    def candidate_scored(self, name: str, layout: LayerLayout, score: float) -> None:
        pass

    def candidate_selected(self, name: str, layout: LayerLayout, score: float) -> None:
        pass

    def degenerate_fit(self, stage: str, reason: str) -> None:
        pass

    def container_packed(self, layout: ContainerLayout) -> None:
        pass


class LoggingTracer(LayoutTracer):
    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logger

    def candidate_scored(self, name: str, layout: LayerLayout, score: float) -> None:
        self.log.debug(
            "candidate %s: %d per layer x %d layers = %d cartons, score %.3f",
            name,
            layout.cartons_per_layer,
            layout.max_layers,
            layout.total_cartons,
            score,
        )

    def candidate_selected(self, name: str, layout: LayerLayout, score: float) -> None:
        self.log.debug("selected %s (score %.3f)", name, score)

    def degenerate_fit(self, stage: str, reason: str) -> None:
        self.log.debug("no fit at %s: %s", stage, reason)

    def container_packed(self, layout: ContainerLayout) -> None:
        self.log.debug(
            "container (%s): %d per layer x %d layers, %d pallets placed",
            layout.orientation,
            layout.pallets_per_layer,
            layout.max_pallet_layers,
            layout.total_pallets,
        )


@dataclass
class TraceEvent:
    kind: str
    data: Dict[str, Any] = field(default_factory=dict)


class RecordingTracer(LayoutTracer):
    def __init__(self) -> None:
        self.events: List[TraceEvent] = []

    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]

    def candidate_scored(self, name: str, layout: LayerLayout, score: float) -> None:
        self.events.append(
            TraceEvent("candidate_scored", {"name": name, "layout": layout, "score": score})
        )

    def candidate_selected(self, name: str, layout: LayerLayout, score: float) -> None:
        self.events.append(
            TraceEvent("candidate_selected", {"name": name, "layout": layout, "score": score})
        )

    def degenerate_fit(self, stage: str, reason: str) -> None:
        self.events.append(TraceEvent("degenerate_fit", {"stage": stage, "reason": reason}))

    def container_packed(self, layout: ContainerLayout) -> None:
        self.events.append(TraceEvent("container_packed", {"layout": layout}))


NULL_TRACER = LayoutTracer()


def default_tracer() -> LayoutTracer:
    return LoggingTracer()

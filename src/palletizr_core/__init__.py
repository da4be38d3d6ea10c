"""Carton, pallet and container load planning."""

from .container import best_container_layout, pack_container
from .engine import compose, generate_optimization_report
from .mixed_rows import pack_mixed_rows
from .models import (
    Carton,
    CartonPlacement,
    Container,
    ContainerLayout,
    LayerLayout,
    Layout3D,
    MixedRows,
    OptimizationReport,
    Orientation,
    Pallet,
    PalletPlacement,
    ScoringWeights,
    Settings,
    Summary,
)
from .orientation import pack_orientation
from .selector import evaluate_candidates, select_pallet_layout
from .tracing import LayoutTracer, LoggingTracer, RecordingTracer
from .validation import InputRangeError, validate_all, validate_field

__all__ = [
    "Carton",
    "CartonPlacement",
    "Container",
    "ContainerLayout",
    "LayerLayout",
    "Layout3D",
    "MixedRows",
    "OptimizationReport",
    "Orientation",
    "Pallet",
    "PalletPlacement",
    "ScoringWeights",
    "Settings",
    "Summary",
    "pack_orientation",
    "pack_mixed_rows",
    "evaluate_candidates",
    "select_pallet_layout",
    "pack_container",
    "best_container_layout",
    "compose",
    "generate_optimization_report",
    "LayoutTracer",
    "LoggingTracer",
    "RecordingTracer",
    "InputRangeError",
    "validate_all",
    "validate_field",
]

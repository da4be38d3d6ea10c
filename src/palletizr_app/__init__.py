"""Input boundary, catalogs and presentation helpers for palletizr_core."""

from .inputs import EngineInputs, build_inputs, optimize

__all__ = ["EngineInputs", "build_inputs", "optimize"]
